"""
Fonctions utilitaires sur les chaines.

- is_blank : test d'un caractere blanc (espace ou tabulation)
- trim_capitalize : normalisation d'un nom d'affichage
"""

from uocflix.core.errors import require
from uocflix.utils.constants import BLANK_CHARS


def is_blank(char: str) -> bool:
    """Vrai pour un espace ou une tabulation."""
    return len(char) == 1 and char in BLANK_CHARS


def _map_single(char: str, mapped: str) -> str:
    """Garde le caractere si sa conversion de casse en produit plusieurs (ß -> SS)."""
    return mapped if len(mapped) == 1 else char


def trim_capitalize(text: str) -> str:
    """
    Retire les blancs de debut et de fin, puis met une majuscule a chaque mot.

    Chaque mot (sequence de caracteres non blancs) commence par une
    majuscule, le reste est en minuscules. Les suites de blancs internes
    sont conservees telles quelles. Un caractere dont la conversion de
    casse donne plusieurs caracteres (ß, ﬁ) est laisse tel quel.
    Ex: "  jOHN   smith " -> "John   Smith"

    Args:
        text: Nom a normaliser, avec au moins un caractere non blanc.

    Returns:
        Nom normalise.

    Raises:
        PreconditionViolation: si le texte ne contient que des blancs.
    """
    trimmed = text.strip(BLANK_CHARS)
    require(bool(trimmed), "le nom ne contient aucun caractere non blanc")

    result = []
    start_of_word = True
    for char in trimmed:
        if is_blank(char):
            start_of_word = True
            result.append(char)
        elif start_of_word:
            result.append(_map_single(char, char.upper()))
            start_of_word = False
        else:
            result.append(_map_single(char, char.lower()))
    return "".join(result)
