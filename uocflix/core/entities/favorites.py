"""
Pile des films favoris d'un utilisateur.

Le dernier film ajoute est en tete de pile. Les doublons sont autorises.
Les agregations parcourent la pile iterativement : la profondeur d'appel
ne depend pas du nombre de favoris.
"""

from dataclasses import dataclass
from typing import Iterator

from uocflix.core.entities.catalog import Film, Series
from uocflix.core.errors import require


@dataclass(frozen=True)
class Favorite:
    """Entree de la pile : reference vers un film du catalogue."""

    film: Film


class FavoriteStack:
    """
    Pile LIFO de favoris.

    Le stockage interne est une liste dont la fin est le sommet, ce qui
    garde push et pop en O(1). L'iteration part du sommet.
    """

    def __init__(self) -> None:
        self._entries: list[Favorite] = []

    def push(self, film: Film) -> Favorite:
        """Empile une reference vers le film et retourne l'entree creee."""
        favorite = Favorite(film=film)
        self._entries.append(favorite)
        return favorite

    def pop(self) -> Favorite:
        """Depile l'entree la plus recente."""
        require(bool(self._entries), "pop sur une pile de favoris vide")
        return self._entries.pop()

    def top(self) -> Favorite:
        """Retourne l'entree la plus recente sans la depiler."""
        require(bool(self._entries), "top sur une pile de favoris vide")
        return self._entries[-1]

    def is_empty(self) -> bool:
        return not self._entries

    def duplicate(self) -> "FavoriteStack":
        """
        Copie independante de la pile.

        Les entrees sont recopiees dans un nouveau stockage ; les films et
        series references ne le sont pas.
        """
        copy = FavoriteStack()
        copy._entries = list(self._entries)
        return copy

    def clear(self) -> None:
        """Libere toutes les entrees. Sans effet sur une pile vide."""
        self._entries.clear()

    def count_per_series(self, series: Series) -> int:
        """Nombre de favoris dont le film appartient a la serie donnee."""
        count = 0
        for favorite in self:
            if favorite.film.series is not None and favorite.film.series == series:
                count += 1
        return count

    def length_in_min(self) -> int:
        """Duree cumulee des films favoris, en minutes."""
        total = 0
        for favorite in self:
            total += favorite.film.duration_min
        return total

    def films(self) -> list[Film]:
        """Films de la pile, du plus recent au plus ancien."""
        return [favorite.film for favorite in self]

    def __iter__(self) -> Iterator[Favorite]:
        return reversed(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"FavoriteStack(size={len(self._entries)})"
