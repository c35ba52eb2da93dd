"""
Couche adaptateurs : implementations concretes des ports.

Exports :
- InMemoryCatalog : ICatalog en memoire
"""

from uocflix.adapters.memory_catalog import InMemoryCatalog

__all__ = ["InMemoryCatalog"]
