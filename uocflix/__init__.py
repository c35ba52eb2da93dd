"""
UOCFlix - Annuaire d'utilisateurs et de leurs films favoris.

Ce package gere en memoire une table d'utilisateurs, chacun possedant
une pile de films favoris, et fournit des agregations sur ces favoris
(genre prefere, duree totale, nombre de favoris par serie).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs)
- services/ : Couche application (annuaire)
- adapters/ : Implementations des ports (catalogue en memoire)
"""

from loguru import logger

from uocflix.utils.constants import LOGGER_NAME

# Silencieux tant que l'application n'appelle pas configure_logging
logger.disable(LOGGER_NAME)

__version__ = "0.1.0"
