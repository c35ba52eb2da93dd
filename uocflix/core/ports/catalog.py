"""
Interface port pour le catalogue de films et series.

Le chargement et la persistance du catalogue sont a la charge d'un
collaborateur externe. Le domaine n'en consomme que cette interface
en lecture.
"""

from abc import ABC, abstractmethod
from typing import Optional

from uocflix.core.entities.catalog import Film, Series


class ICatalog(ABC):
    """
    Interface de consultation du catalogue.

    Definit les operations de lecture des films et series.
    """

    @abstractmethod
    def get_film(self, title: str) -> Optional[Film]:
        """Recupere un film par son titre."""
        ...

    @abstractmethod
    def get_series(self, title: str) -> Optional[Series]:
        """Recupere une serie par son titre."""
        ...

    @abstractmethod
    def list_films(self) -> list[Film]:
        """Liste tous les films du catalogue."""
        ...
