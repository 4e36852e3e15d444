"""Feedback record model -- one user's response to one form.

# ─── FIELD NOTES ─────────────────────────────────────────────────────
#
#   - ``form_id`` is a plain foreign key into the form store.  Nothing
#     checks that the form still exists; records of a deleted form are
#     kept and simply stop showing up in form-scoped views.
#   - ``form_title`` is copied from the form at submission time and is a
#     historical snapshot.  It is never re-synced with the form.
#   - ``ratings`` preserves insertion order, which is the order the form
#     listed its categories in.  The text export relies on that order.
#   - ``ratings`` is a read-only view over a private copy, so a record
#     handed out by the store cannot be edited in place.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

MIN_RATING = 1
MAX_RATING = 5

Rating = Annotated[int, Field(ge=MIN_RATING, le=MAX_RATING)]


class FeedbackRecord(BaseModel):
    """A submitted feedback entry."""

    model_config = ConfigDict(frozen=True)

    user_name: str = Field(description="Username of the submitting account.")
    user_email: str = ""
    ratings: Mapping[str, Rating] = Field(default_factory=dict, validate_default=True)
    comments: str = ""
    form_id: str = Field(min_length=1)
    form_title: str = Field(default="", description="Form title at submission time.")

    @field_validator("ratings")
    @classmethod
    def _freeze_ratings(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(value))

    @field_serializer("ratings")
    def _dump_ratings(self, value: Mapping[str, int]) -> dict[str, int]:
        return dict(value)

    @property
    def submission_key(self) -> tuple[str, str]:
        """The (form_id, user_name) pair that may occur at most once."""
        return (self.form_id, self.user_name)
