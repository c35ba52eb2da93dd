"""
Entites metier representant les concepts du domaine.

Exports:
- Genre, Series, Film : catalogue (reference, jamais possede)
- Favorite, FavoriteStack : pile des favoris d'un utilisateur
- User : utilisateur et agregations sur ses favoris
- UserTable : table des utilisateurs
"""

from uocflix.core.entities.catalog import Film, Genre, Series
from uocflix.core.entities.favorites import Favorite, FavoriteStack
from uocflix.core.entities.user import User
from uocflix.core.entities.user_table import UserTable

__all__ = [
    "Genre",
    "Series",
    "Film",
    "Favorite",
    "FavoriteStack",
    "User",
    "UserTable",
]
