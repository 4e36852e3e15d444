"""Abstract base class for feedback record stores.

Records reference forms and users by plain keys (``form_id`` and
``user_name``); the store never checks that either still exists.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.models.feedback import FeedbackRecord


class IFeedbackStore(ABC):
    """Contract for feedback record storage."""

    @abstractmethod
    def add(self, record: FeedbackRecord) -> None:
        """Append *record* unconditionally.

        No duplicate check happens here.  Callers that need the
        one-submission-per-form rule either check :meth:`has_submitted`
        first (not atomic) or use :meth:`add_if_absent`.
        """

    @abstractmethod
    def add_if_absent(self, record: FeedbackRecord) -> bool:
        """Append *record* unless its (form_id, user_name) pair already exists.

        The check and the insert are atomic with respect to every other
        write on this store.  The first submission wins; later ones return
        ``False`` and are discarded.
        """

    @abstractmethod
    def has_submitted(self, user_name: str, form_id: str) -> bool:
        """Return ``True`` if any record matches both fields exactly."""

    @abstractmethod
    def list(self) -> tuple[FeedbackRecord, ...]:
        """Return a point-in-time snapshot of all records in submission order."""

    @abstractmethod
    def list_for_form(self, form_id: str) -> tuple[FeedbackRecord, ...]:
        """Return the records submitted against *form_id*."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every record."""
