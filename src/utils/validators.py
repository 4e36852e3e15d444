"""Input rules applied by the console before data reaches a store.

Stores accept whatever the models accept; these helpers enforce the
friendlier rules of the form-filling flow and raise
:class:`~src.utils.errors.ValidationError` with a message fit for display.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.models.feedback import MAX_RATING, MIN_RATING
from src.utils.errors import ValidationError

MAX_RATING_CATEGORIES = 5


def validate_email(email: str) -> str:
    """Return *email* stripped; reject empty values and values without ``@``."""
    email = email.strip()
    if not email or "@" not in email:
        raise ValidationError("Invalid Email.", component="validators")
    return email


def validate_rating(value: str | int) -> int:
    """Parse a 1–5 rating."""
    try:
        rating = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Rating must be a whole number between {MIN_RATING} and {MAX_RATING}.",
            component="validators",
        ) from exc
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}.",
            component="validators",
        )
    return rating


def clean_categories(raw: Iterable[str]) -> list[str]:
    """Strip category names, drop blanks and enforce the 1–5 range."""
    categories = [name.strip() for name in raw if name and name.strip()]
    if not categories:
        raise ValidationError("A form needs at least one rating category.", component="validators")
    if len(categories) > MAX_RATING_CATEGORIES:
        raise ValidationError(
            f"A form can have at most {MAX_RATING_CATEGORIES} rating categories.",
            component="validators",
        )
    return categories


def validate_title(title: str) -> str:
    title = title.strip()
    if not title:
        raise ValidationError("A form needs a title.", component="validators")
    return title
