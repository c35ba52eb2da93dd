"""
Couche application (services).

Exports :
- DirectoryService : annuaire des utilisateurs et de leurs favoris
- UserProfile : vue en lecture d'un utilisateur
"""

from uocflix.services.directory import DirectoryService, UserProfile

__all__ = ["DirectoryService", "UserProfile"]
