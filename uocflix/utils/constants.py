"""
Constantes globales pour UOCFlix.
"""

# Caracteres consideres comme blancs dans les noms (espace, tabulation)
BLANK_CHARS = " \t"

# Prefixe des variables d'environnement de configuration
ENV_PREFIX = "UOCFLIX_"

# Nom du package pour l'activation des logs loguru
LOGGER_NAME = "uocflix"
