"""Abstract base class for user identity stores.

Defines the contract the data service relies on for accounts and login.
The in-memory implementation lives in ``src/providers/memory``; another
backend can be swapped in without touching the service or the console.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.models.user import Role, User


class IUserStore(ABC):
    """Contract for user account storage and authentication.

    All operations are synchronous and safe to call from several threads.
    Mutations are visible to every read that starts after they return.
    """

    @abstractmethod
    def authenticate(self, username: str, password: str) -> User | None:
        """Return the user whose username and password both match.

        Parameters
        ----------
        username:
            Exact, case-sensitive login name.
        password:
            Plaintext password; compared through its digest.

        Returns
        -------
        User or None
            ``None`` for an unknown username *or* a wrong password.  The two
            cases are deliberately indistinguishable to the caller.
        """

    @abstractmethod
    def add(self, username: str, password: str, role: Role | str) -> bool:
        """Create an account.

        Returns
        -------
        bool
            ``False`` if *username* is already taken; the existing record is
            left untouched.
        """

    @abstractmethod
    def delete(self, username: str) -> None:
        """Remove every account named *username*.  No-op if there is none."""

    @abstractmethod
    def update_password(self, username: str, new_password: str) -> bool:
        """Replace the password digest of *username*.

        Unlike :meth:`delete`, a missing user is reported: returns ``False``.
        """

    @abstractmethod
    def get(self, username: str) -> User | None:
        """Return the account named *username*, or ``None``."""

    @abstractmethod
    def list(self) -> tuple[User, ...]:
        """Return a point-in-time snapshot of all accounts in insertion order."""
