"""feedbackDesk domain models - re-exports all public model classes.

    - user.py      - accounts and roles
    - form.py      - form definitions (survey templates)
    - feedback.py  - submitted feedback records

All models are frozen Pydantic v2 models; changes produce new instances
via ``model_copy(update={...})``.
"""

from __future__ import annotations

from src.models.feedback import MAX_RATING, MIN_RATING, FeedbackRecord
from src.models.form import FormDefinition
from src.models.user import Role, User

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "FeedbackRecord",
    "FormDefinition",
    "Role",
    "User",
]
