"""
Erreurs et statuts du domaine.

Les operations des entites levent des exceptions ; chaque exception porte
le Status correspondant pour les appelants qui raisonnent en codes retour
(voir DirectoryService).
"""

from enum import Enum
from typing import Optional


class Status(Enum):
    """Resultat d'une operation de mutation."""

    OK = "ok"
    MEMORY_ERROR = "memory_error"
    DUPLICATED = "duplicated"
    NOT_FOUND = "not_found"
    LIMIT_REACHED = "limit_reached"


class PreconditionViolation(AssertionError):
    """
    Violation de contrat par l'appelant.

    Argument vide, depilement d'une pile vide, normalisation d'un nom
    compose uniquement de blancs. Ce n'est pas une condition d'execution
    recuperable : elle n'est jamais convertie en Status.
    """


class UOCFlixError(Exception):
    """
    Erreur metier recuperable.

    Attributes:
        status: Status equivalent a l'erreur.
    """

    status: Status


class DuplicateUserError(UOCFlixError):
    """Levee quand un username est deja present dans la table."""

    status = Status.DUPLICATED

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Utilisateur deja present: {username}")


class UserNotFoundError(UOCFlixError):
    """Levee quand un username est absent de la table."""

    status = Status.NOT_FOUND

    def __init__(self, username: Optional[str]) -> None:
        self.username = username
        super().__init__(f"Utilisateur introuvable: {username}")


def require(condition: bool, message: str) -> None:
    """Leve PreconditionViolation si la condition n'est pas remplie."""
    if not condition:
        raise PreconditionViolation(message)
