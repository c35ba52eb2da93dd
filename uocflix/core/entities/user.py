"""
Entite utilisateur.

Un utilisateur possede ses champs d'identite et sa pile de favoris.
Toute copie produit une nouvelle pile : deux utilisateurs ne partagent
jamais de stockage mutable.
"""

from typing import Optional

from loguru import logger

from uocflix.core.entities.catalog import Film, Genre, Series
from uocflix.core.entities.favorites import FavoriteStack
from uocflix.core.errors import require
from uocflix.utils.helpers import trim_capitalize


def _check_field(value: Optional[str], field_name: str) -> None:
    require(
        isinstance(value, str) and value != "",
        f"{field_name} doit etre une chaine non vide",
    )


class User:
    """
    Utilisateur de l'annuaire.

    Attributs :
        username : Identifiant unique (non modifie apres creation par convention)
        name : Nom d'affichage, normalisable via trim_capitalize_name
        mail : Adresse de contact (opaque)
        favorites : Pile des films favoris, propriete exclusive de l'utilisateur
    """

    def __init__(self, username: str, name: str, mail: str) -> None:
        _check_field(username, "username")
        _check_field(name, "name")
        _check_field(mail, "mail")

        self.username: Optional[str] = username
        self.name: Optional[str] = name
        self.mail: Optional[str] = mail
        self.favorites = FavoriteStack()

    @property
    def is_released(self) -> bool:
        """Vrai apres release()."""
        return self.username is None

    def release(self) -> None:
        """
        Libere les champs et les favoris.

        Idempotent : un second appel est sans effet.
        """
        self.favorites.clear()
        self.username = None
        self.name = None
        self.mail = None

    def equals(self, other: "User") -> bool:
        """Egalite champ a champ de username, name et mail (favoris ignores)."""
        return (
            self.username == other.username
            and self.name == other.name
            and self.mail == other.mail
        )

    def copy_from(self, src: "User") -> None:
        """
        Remplace les donnees de l'utilisateur par celles de src.

        Les favoris ne sont pas copies : l'utilisateur repart d'une pile vide.
        Les champs de src sont verifies avant toute modification.
        """
        _check_field(src.username, "username")
        _check_field(src.name, "name")
        _check_field(src.mail, "mail")

        favorites = FavoriteStack()
        self.favorites.clear()
        self.username = src.username
        self.name = src.name
        self.mail = src.mail
        self.favorites = favorites

    def copy(self) -> "User":
        """Nouvel utilisateur independant avec les memes champs et sans favoris."""
        require(not self.is_released, "copie d'un utilisateur libere")
        return User(self.username, self.name, self.mail)

    def trim_capitalize_name(self) -> None:
        """
        Normalise le nom : blancs de bord retires, une majuscule par mot.

        Le nom n'est remplace qu'une fois le nouveau calcule ; en cas
        d'erreur il reste inchange.

        Raises:
            PreconditionViolation: si le nom ne contient que des blancs.
        """
        require(self.name is not None, "normalisation d'un utilisateur libere")
        normalized = trim_capitalize(self.name)
        if normalized != self.name:
            logger.debug("Nom normalise", username=self.username, name=normalized)
        self.name = normalized

    def add_favorite(self, film: Film) -> None:
        """Ajoute un film en tete de la pile de favoris."""
        self.favorites.push(film)
        logger.debug("Favori ajoute", username=self.username, film=film.title)

    def favorite_genre(self) -> Genre:
        """
        Genre le plus present dans les favoris.

        Parcourt une copie jetable de la pile en la depilant. En cas
        d'egalite, le genre de plus petit index l'emporte. Retourne
        Genre.NOT_FOUND si aucun favori n'a de genre.
        """
        occurrences = {genre: 0 for genre in Genre.ranked()}
        pending = self.favorites.duplicate()
        try:
            while not pending.is_empty():
                genre = pending.pop().film.genre
                if genre is not Genre.NOT_FOUND:
                    occurrences[genre] += 1
        finally:
            pending.clear()

        best = Genre.NOT_FOUND
        max_occurrences = 0
        for genre in Genre.ranked():
            if occurrences[genre] > max_occurrences:
                best = genre
                max_occurrences = occurrences[genre]
        return best

    def favs_count_per_series(self, series: Series) -> int:
        """Nombre de favoris appartenant a la serie."""
        return self.favorites.count_per_series(series)

    def favs_length_in_min(self) -> int:
        """Duree totale des favoris en minutes."""
        return self.favorites.length_in_min()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return (
            f"User(username={self.username!r}, name={self.name!r}, "
            f"mail={self.mail!r}, favorites={len(self.favorites)})"
        )
