"""Form definition model -- an admin-authored survey template."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormDefinition(BaseModel):
    """A feedback form with an ordered list of rating categories.

    ``id`` is generated once, when the form is created, and identifies the
    form for its whole life.  Feedback records point at forms through this
    id only, so deleting a form leaves its feedback in place.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), min_length=1)
    title: str
    description: str = ""
    rating_categories: tuple[str, ...] = Field(min_length=1)

    @field_validator("rating_categories", mode="before")
    @classmethod
    def _freeze_categories(cls, value: object) -> object:
        # Lists from callers are copied so later edits to them can't leak in.
        if isinstance(value, list):
            return tuple(value)
        return value

    def __str__(self) -> str:
        return self.title
