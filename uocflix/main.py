"""
Point d'entree de UOCFlix.

Initialise le container DI et configure le logging a partir des Settings.
"""

from typing import Optional

from loguru import logger

from . import __version__
from .container import Container
from .logging_config import configure_logging


def bootstrap(container: Optional[Container] = None) -> Container:
    """Configure le logging depuis les settings du container et le retourne.

    Args:
        container: Container a utiliser (nouveau container si None).

    Returns:
        Le container pret a fournir le DirectoryService.
    """
    container = container or Container()
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.info("Demarrage de UOCFlix", version=__version__)
    return container


def main() -> None:
    """Point d'entree de l'application."""
    bootstrap()


if __name__ == "__main__":
    main()
