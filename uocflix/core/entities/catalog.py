"""
Entites du catalogue (genres, series, films).

Le catalogue appartient a un collaborateur externe : les favoris
referencent ces objets sans jamais les copier ni les modifier.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class Genre(Enum):
    """
    Genres du catalogue, dans l'ordre de parcours du classement.

    La valeur est l'index de parcours (0..7). NOT_FOUND est la sentinelle
    retournee quand aucun genre ne peut etre determine.
    """

    ACTION = 0
    ANIMATION = 1
    COMEDY = 2
    DOCUMENTARY = 3
    DRAMA = 4
    HORROR = 5
    SCIENCE_FICTION = 6
    THRILLER = 7
    NOT_FOUND = -1

    @classmethod
    def ranked(cls) -> Iterator["Genre"]:
        """Itere sur les 8 genres reels, index croissant."""
        return (genre for genre in cls if genre is not cls.NOT_FOUND)


@dataclass(frozen=True)
class Series:
    """
    Serie (ou saga) a laquelle appartiennent des films.

    Attributs :
        title : Titre de la serie
        genre : Genre de la serie, partage par tous ses films
        year : Annee de debut
        seasons : Nombre de saisons
    """

    title: str
    genre: Genre
    year: Optional[int] = None
    seasons: int = 1


@dataclass(frozen=True)
class Film:
    """
    Film du catalogue.

    Attributs :
        title : Titre du film
        duration_min : Duree en minutes
        series : Serie d'appartenance (None pour un film isole)
        year : Annee de sortie
    """

    title: str
    duration_min: int = 0
    series: Optional[Series] = None
    year: Optional[int] = None

    @property
    def genre(self) -> Genre:
        """Genre herite de la serie, NOT_FOUND pour un film isole."""
        if self.series is None:
            return Genre.NOT_FOUND
        return self.series.genre
