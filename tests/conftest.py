"""
Fixtures pytest partagees pour les tests UOCFlix.

Ce module contient les fixtures communes utilisees dans les tests:
- Series et films du catalogue
- Utilisateurs et table d'utilisateurs
- Settings de test avec chemins temporaires
"""

from pathlib import Path

import pytest

from uocflix.adapters.memory_catalog import InMemoryCatalog
from uocflix.config import Settings
from uocflix.core.entities import Film, Genre, Series, User, UserTable


@pytest.fixture
def comedy_series() -> Series:
    """Serie de comedie."""
    return Series(title="Friends", genre=Genre.COMEDY, year=1994, seasons=10)


@pytest.fixture
def drama_series() -> Series:
    """Serie dramatique."""
    return Series(title="The Crown", genre=Genre.DRAMA, year=2016, seasons=6)


@pytest.fixture
def action_series() -> Series:
    """Saga d'action."""
    return Series(title="Mission Impossible", genre=Genre.ACTION, year=1996)


@pytest.fixture
def comedy_film(comedy_series: Series) -> Film:
    """Film de 90 minutes de la serie de comedie."""
    return Film(title="Friends Reunion", duration_min=90, series=comedy_series)


@pytest.fixture
def drama_film(drama_series: Series) -> Film:
    """Film de 45 minutes de la serie dramatique."""
    return Film(title="The Crown Special", duration_min=45, series=drama_series)


@pytest.fixture
def action_film(action_series: Series) -> Film:
    """Film de 110 minutes de la saga d'action."""
    return Film(title="Mission Impossible", duration_min=110, series=action_series)


@pytest.fixture
def standalone_film() -> Film:
    """Film isole, sans serie."""
    return Film(title="Amelie", duration_min=122, year=2001)


@pytest.fixture
def user() -> User:
    """Utilisateur type."""
    return User("jsmith", "john smith", "jsmith@uoc.edu")


@pytest.fixture
def other_user() -> User:
    """Second utilisateur."""
    return User("mgarcia", "Maria Garcia", "mgarcia@uoc.edu")


@pytest.fixture
def user_table(user: User, other_user: User) -> UserTable:
    """Table contenant user et other_user."""
    table = UserTable()
    table.add(user)
    table.add(other_user)
    return table


@pytest.fixture
def catalog(
    comedy_film: Film,
    drama_film: Film,
    action_film: Film,
    standalone_film: Film,
) -> InMemoryCatalog:
    """Catalogue en memoire avec les films de test."""
    return InMemoryCatalog(films=[comedy_film, drama_film, action_film, standalone_film])


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log.
    """
    return Settings(
        log_file=tmp_path / "test.log",
        max_favorites_per_user=None,
        normalize_names=True,
    )
