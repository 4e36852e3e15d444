"""User identity models.

A :class:`User` is the unit stored by the user store.  It is frozen: the
only field that ever changes -- the password digest -- is replaced by
building a new instance with ``model_copy(update={...})`` and swapping it
into the store.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):  # noqa: UP042 - StrEnum requires Python 3.11+
    """Access role.  Compared by equality only; there is no hierarchy."""

    ADMIN = "ADMIN"
    USER = "USER"


class User(BaseModel):
    """A stored account: unique username, password digest and role."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(description="Unique, case-sensitive login name.")
    password_digest: str = Field(
        repr=False,
        description="Hex digest of the password; never the plaintext.",
    )
    role: Role = Field(default=Role.USER, description="ADMIN or USER.")
