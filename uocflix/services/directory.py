"""
Service d'annuaire des utilisateurs.

Couche application au-dessus de UserTable : les operations de mutation
retournent un Status plutot que de lever une exception, et les films
favoris sont resolus par titre via le catalogue.

Les violations de contrat (PreconditionViolation) ne sont jamais converties
en Status : elles remontent a l'appelant.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from uocflix.config import Settings
from uocflix.core.entities.catalog import Genre
from uocflix.core.entities.user import User
from uocflix.core.entities.user_table import UserTable
from uocflix.core.errors import Status, UOCFlixError
from uocflix.core.ports.catalog import ICatalog


@dataclass(frozen=True)
class UserProfile:
    """
    Vue en lecture d'un utilisateur et de ses statistiques.

    Attributs :
        username : Identifiant
        name : Nom d'affichage
        mail : Adresse de contact
        favorites_count : Nombre de favoris
        favorite_genre : Genre le plus present (NOT_FOUND sans favoris)
        total_minutes : Duree cumulee des favoris
        recent_titles : Titres des favoris, du plus recent au plus ancien
    """

    username: str
    name: str
    mail: str
    favorites_count: int
    favorite_genre: Genre
    total_minutes: int
    recent_titles: tuple[str, ...] = ()


class DirectoryService:
    """
    Service d'annuaire.

    Methodes :
        register: Cree et ajoute un utilisateur.
        unregister: Retire un utilisateur.
        normalize_name: Normalise le nom d'un utilisateur.
        add_favorite: Ajoute un film du catalogue aux favoris.
        profile: Statistiques d'un utilisateur.
        favs_per_series: Nombre de favoris d'un utilisateur pour une serie.
    """

    def __init__(
        self,
        user_table: UserTable,
        catalog: ICatalog,
        settings: Optional[Settings] = None,
    ) -> None:
        self._table = user_table
        self._catalog = catalog
        self._settings = settings or Settings()

    def register(
        self,
        username: str,
        name: str,
        mail: str,
        normalize: Optional[bool] = None,
    ) -> Status:
        """
        Cree un utilisateur et l'ajoute a la table.

        Args:
            username: Identifiant unique.
            name: Nom d'affichage.
            mail: Adresse de contact.
            normalize: Normaliser le nom avant l'ajout
                       (None : valeur de settings.normalize_names).

        Returns:
            Status.OK, Status.DUPLICATED ou Status.MEMORY_ERROR.
        """
        if normalize is None:
            normalize = self._settings.normalize_names

        try:
            user = User(username, name, mail)
            if normalize:
                user.trim_capitalize_name()
            self._table.add(user)
        except UOCFlixError as e:
            logger.warning("Inscription refusee", username=username, reason=str(e))
            return e.status
        except MemoryError:
            logger.error("Memoire insuffisante a l'inscription", username=username)
            return Status.MEMORY_ERROR

        logger.info("Utilisateur inscrit", username=username)
        return Status.OK

    def unregister(self, username: str) -> Status:
        """Retire un utilisateur. Retourne Status.OK ou Status.NOT_FOUND."""
        try:
            self._table.remove(username)
        except UOCFlixError as e:
            logger.warning("Desinscription impossible", username=username, reason=str(e))
            return e.status

        logger.info("Utilisateur desinscrit", username=username)
        return Status.OK

    def normalize_name(self, username: str) -> Status:
        """Normalise le nom d'affichage d'un utilisateur existant."""
        user = self._table.find(username)
        if user is None:
            return Status.NOT_FOUND

        try:
            user.trim_capitalize_name()
        except MemoryError:
            logger.error("Memoire insuffisante a la normalisation", username=username)
            return Status.MEMORY_ERROR
        return Status.OK

    def add_favorite(self, username: str, film_title: str) -> Status:
        """
        Ajoute un film du catalogue aux favoris d'un utilisateur.

        Returns:
            Status.OK ; Status.NOT_FOUND si l'utilisateur ou le film est
            inconnu ; Status.LIMIT_REACHED si le plafond configure est
            atteint ; Status.MEMORY_ERROR en cas d'echec d'allocation.
        """
        user = self._table.find(username)
        if user is None:
            logger.warning("Utilisateur inconnu", username=username)
            return Status.NOT_FOUND

        film = self._catalog.get_film(film_title)
        if film is None:
            logger.warning("Film absent du catalogue", title=film_title)
            return Status.NOT_FOUND

        limit = self._settings.max_favorites_per_user
        if limit is not None and len(user.favorites) >= limit:
            logger.warning("Plafond de favoris atteint", username=username, limit=limit)
            return Status.LIMIT_REACHED

        try:
            user.add_favorite(film)
        except MemoryError:
            logger.error("Memoire insuffisante pour le favori", username=username)
            return Status.MEMORY_ERROR
        return Status.OK

    def profile(self, username: str) -> Optional[UserProfile]:
        """Retourne le profil d'un utilisateur, ou None s'il est inconnu."""
        user = self._table.find(username)
        if user is None:
            return None

        return UserProfile(
            username=user.username,
            name=user.name,
            mail=user.mail,
            favorites_count=len(user.favorites),
            favorite_genre=user.favorite_genre(),
            total_minutes=user.favs_length_in_min(),
            recent_titles=tuple(film.title for film in user.favorites.films()),
        )

    def favs_per_series(self, username: str, series_title: str) -> int:
        """Nombre de favoris de l'utilisateur pour une serie (0 si inconnue)."""
        user = self._table.find(username)
        series = self._catalog.get_series(series_title)
        if user is None or series is None:
            return 0
        return user.favs_count_per_series(series)
