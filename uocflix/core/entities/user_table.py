"""
Table des utilisateurs.

Collection non ordonnee d'utilisateurs, indexee par username unique.
La table possede ses utilisateurs : add stocke une copie, release les libere.
"""

from typing import Iterator, Optional, Union

from loguru import logger

from uocflix.core.entities.user import User
from uocflix.core.errors import DuplicateUserError, UserNotFoundError, require


class UserTable:
    """
    Table dynamique d'utilisateurs.

    Ajout en O(1) amorti, recherche et suppression en O(n).
    Une reference obtenue via find() n'est plus valide apres la
    suppression de cet utilisateur.
    """

    def __init__(self) -> None:
        self._elements: list[User] = []

    def release(self) -> None:
        """Libere chaque utilisateur puis vide la table."""
        for user in self._elements:
            user.release()
        self._elements = []

    def add(self, user: User) -> User:
        """
        Ajoute une copie de l'utilisateur (sans ses favoris).

        La copie est construite avant l'insertion : en cas d'erreur la table
        reste inchangee.

        Returns:
            L'utilisateur stocke dans la table.

        Raises:
            DuplicateUserError: si le username est deja present.
        """
        require(user is not None, "utilisateur manquant")
        if self.find(user.username) is not None:
            raise DuplicateUserError(user.username)

        stored = user.copy()
        self._elements.append(stored)
        logger.debug("Utilisateur ajoute", username=stored.username, size=len(self._elements))
        return stored

    def remove(self, user: Union[User, str]) -> None:
        """
        Retire l'utilisateur de la table en conservant l'ordre des autres.

        Les elements restants sont prepares dans un nouveau stockage qui
        ne remplace l'ancien qu'une fois complet : une erreur en cours de
        decalage laisse la table intacte.

        Args:
            user: Utilisateur ou username a retirer.

        Raises:
            UserNotFoundError: si le username est absent.
        """
        username = user if isinstance(user, str) else user.username
        require(username is not None, "username manquant")

        index = self._index_of(username)
        if index is None:
            raise UserNotFoundError(username)

        removed = self._elements[index]
        self._elements = self._without(index)
        removed.release()
        logger.debug("Utilisateur retire", username=username, size=len(self._elements))

    def find(self, username: Optional[str]) -> Optional[User]:
        """Retourne l'utilisateur portant ce username, ou None."""
        index = self._index_of(username)
        if index is None:
            return None
        return self._elements[index]

    def size(self) -> int:
        return len(self._elements)

    def equals(self, other: "UserTable") -> bool:
        """
        Egalite ensembliste sur les usernames.

        Meme nombre d'utilisateurs et chaque username de other present ici.
        L'ordre, les noms, mails et favoris ne sont pas compares.
        """
        if self.size() != other.size():
            return False
        return all(self.find(user.username) is not None for user in other)

    def _without(self, index: int) -> list[User]:
        """Nouveau stockage sans l'element a l'index donne, ordre conserve."""
        return self._elements[:index] + self._elements[index + 1:]

    def _index_of(self, username: Optional[str]) -> Optional[int]:
        for i, user in enumerate(self._elements):
            if user.username == username:
                return i
        return None

    def __iter__(self) -> Iterator[User]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and self._index_of(username) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserTable):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"UserTable(size={len(self._elements)})"
