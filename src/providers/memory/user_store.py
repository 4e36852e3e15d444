"""In-memory user store with digest-based authentication."""

from __future__ import annotations

import structlog

from src.interfaces.user_store import IUserStore
from src.models.user import Role, User
from src.utils.hashing import CredentialHasher
from src.utils.snapshot_list import SnapshotList

logger = structlog.get_logger(logger_name=__name__)


class MemoryUserStore(IUserStore):
    """User accounts held in a copy-on-write list.

    Parameters
    ----------
    hasher:
        Produces the digests stored in place of passwords.  Built by the
        caller so a missing digest algorithm fails before the store exists.
    """

    def __init__(self, hasher: CredentialHasher) -> None:
        self._hasher = hasher
        self._users: SnapshotList[User] = SnapshotList()

    # ------------------------------------------------------------------
    # IUserStore implementation
    # ------------------------------------------------------------------

    def authenticate(self, username: str, password: str) -> User | None:
        digest = self._hasher.hash(password)
        for user in self._users.snapshot():
            if user.username == username and user.password_digest == digest:
                logger.debug("user_authenticated", username=username)
                return user
        logger.info("authentication_failed", username=username)
        return None

    def add(self, username: str, password: str, role: Role | str) -> bool:
        user = User(
            username=username,
            password_digest=self._hasher.hash(password),
            role=Role(role),
        )
        added = self._users.append_if(
            user,
            lambda users: all(existing.username != username for existing in users),
        )
        if added:
            logger.info("user_added", username=username, role=user.role.value)
        else:
            logger.info("user_add_rejected_duplicate", username=username)
        return added

    def delete(self, username: str) -> None:
        removed = self._users.remove_where(lambda user: user.username == username)
        logger.info("user_deleted", username=username, removed=removed)

    def update_password(self, username: str, new_password: str) -> bool:
        digest = self._hasher.hash(new_password)
        updated = self._users.replace_first(
            lambda user: user.username == username,
            lambda user: user.model_copy(update={"password_digest": digest}),
        )
        if updated:
            logger.info("user_password_updated", username=username)
        else:
            logger.info("user_password_update_missing_user", username=username)
        return updated

    def get(self, username: str) -> User | None:
        for user in self._users.snapshot():
            if user.username == username:
                return user
        return None

    def list(self) -> tuple[User, ...]:
        return self._users.snapshot()
