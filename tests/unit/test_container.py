"""
Tests pour le container d'injection de dependances.
"""

from uocflix.adapters.memory_catalog import InMemoryCatalog
from uocflix.container import Container
from uocflix.core.entities.catalog import Film
from uocflix.core.errors import Status
from uocflix.services.directory import DirectoryService


class TestContainer:
    """Tests pour Container."""

    def test_directory_service_is_wired(self):
        """Le service recoit la table et le catalogue singletons."""
        container = Container()
        service = container.directory_service()
        assert isinstance(service, DirectoryService)
        assert container.user_table() is container.user_table()
        assert isinstance(container.catalog(), InMemoryCatalog)

    def test_services_share_the_same_table(self):
        """Deux services obtenus du container voient les memes utilisateurs."""
        container = Container()
        container.catalog().add_film(Film(title="Amelie", duration_min=122))

        first = container.directory_service()
        second = container.directory_service()
        assert first.register("jsmith", "John", "j@uoc.edu") is Status.OK
        assert second.add_favorite("jsmith", "Amelie") is Status.OK
        assert second.profile("jsmith").total_minutes == 122
