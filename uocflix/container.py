"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances de l'annuaire.
"""

from dependency_injector import containers, providers

from .adapters.memory_catalog import InMemoryCatalog
from .config import Settings
from .core.entities.user_table import UserTable
from .services.directory import DirectoryService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.directory_service()
        service.register("jdoe", "john doe", "jdoe@uoc.edu")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Catalogue - rempli par le collaborateur qui charge les films
    catalog = providers.Singleton(InMemoryCatalog)

    # Table des utilisateurs - unique pour le processus
    user_table = providers.Singleton(UserTable)

    # Services
    directory_service = providers.Factory(
        DirectoryService,
        user_table=user_table,
        catalog=catalog,
        settings=config,
    )
