"""
Couche domaine (core).

Contient les entites metier, les ports (interfaces abstraites) et les erreurs.
Cette couche n'a AUCUNE dependance vers les adaptateurs ou la configuration.

Sous-packages :
- entities/ : Entites metier (Film, Series, FavoriteStack, User, UserTable)
- ports/ : Interfaces abstraites definissant les contrats des adaptateurs
"""
