"""
Utilitaires et constantes pour UOCFlix.
"""

from uocflix.utils.constants import BLANK_CHARS, ENV_PREFIX, LOGGER_NAME
from uocflix.utils.helpers import is_blank, trim_capitalize

__all__ = [
    "BLANK_CHARS",
    "ENV_PREFIX",
    "LOGGER_NAME",
    "is_blank",
    "trim_capitalize",
]
