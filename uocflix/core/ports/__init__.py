"""
Ports (interfaces abstraites) du domaine.

Exports :
- ICatalog : Consultation du catalogue de films et series
"""

from uocflix.core.ports.catalog import ICatalog

__all__ = ["ICatalog"]
