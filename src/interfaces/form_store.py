"""Abstract base class for form definition stores."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.models.form import FormDefinition


class IFormStore(ABC):
    """Contract for form definition storage.

    Forms are immutable once created; there is no update operation.
    """

    @abstractmethod
    def add(self, title: str, description: str, categories: Sequence[str]) -> FormDefinition:
        """Create a form with a freshly generated id and return it."""

    @abstractmethod
    def delete(self, form: FormDefinition) -> None:
        """Remove *form* (matched by id).  No-op if it is not stored.

        Feedback that references the form is not touched.
        """

    @abstractmethod
    def get(self, form_id: str) -> FormDefinition | None:
        """Return the form with *form_id*, or ``None``."""

    @abstractmethod
    def list(self) -> tuple[FormDefinition, ...]:
        """Return a point-in-time snapshot of all forms in creation order."""
