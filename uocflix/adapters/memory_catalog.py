"""
Catalogue en memoire.

Implementation de ICatalog sur des dictionnaires, pour les tests et
pour les appelants qui ont deja charge leur catalogue.
"""

from typing import Iterable, Optional

from loguru import logger

from uocflix.core.entities.catalog import Film, Series
from uocflix.core.ports.catalog import ICatalog


def _key(title: str) -> str:
    """Cle de recherche : titre sans blancs de bord, en minuscules."""
    return title.strip().casefold()


class InMemoryCatalog(ICatalog):
    """
    Catalogue indexe par titre (insensible a la casse).

    Un film ajoute enregistre aussi sa serie : get_series retourne toujours
    la serie referencee par le dernier film ajoute sous ce titre.
    """

    def __init__(
        self,
        films: Iterable[Film] = (),
        series: Iterable[Series] = (),
    ) -> None:
        self._films: dict[str, Film] = {}
        self._series: dict[str, Series] = {}
        for item in series:
            self.add_series(item)
        for film in films:
            self.add_film(film)

    def add_series(self, series: Series) -> None:
        """Ajoute ou remplace une serie."""
        self._series[_key(series.title)] = series

    def add_film(self, film: Film) -> None:
        """Ajoute ou remplace un film ; sa serie remplace celle de meme titre."""
        if film.series is not None:
            self._series[_key(film.series.title)] = film.series
        self._films[_key(film.title)] = film
        logger.debug("Film ajoute au catalogue", title=film.title)

    def get_film(self, title: str) -> Optional[Film]:
        return self._films.get(_key(title))

    def get_series(self, title: str) -> Optional[Series]:
        return self._series.get(_key(title))

    def list_films(self) -> list[Film]:
        return list(self._films.values())
