"""In-memory feedback record store."""

from __future__ import annotations

import structlog

from src.interfaces.feedback_store import IFeedbackStore
from src.models.feedback import FeedbackRecord
from src.utils.snapshot_list import SnapshotList

logger = structlog.get_logger(logger_name=__name__)


class MemoryFeedbackStore(IFeedbackStore):
    """Feedback records held in a copy-on-write list."""

    def __init__(self) -> None:
        self._records: SnapshotList[FeedbackRecord] = SnapshotList()

    def add(self, record: FeedbackRecord) -> None:
        self._records.append(record)
        logger.info("feedback_added", form_id=record.form_id, user_name=record.user_name)

    def add_if_absent(self, record: FeedbackRecord) -> bool:
        key = record.submission_key
        added = self._records.append_if(
            record,
            lambda records: all(existing.submission_key != key for existing in records),
        )
        if added:
            logger.info("feedback_added", form_id=record.form_id, user_name=record.user_name)
        else:
            logger.info(
                "feedback_rejected_duplicate",
                form_id=record.form_id,
                user_name=record.user_name,
            )
        return added

    def has_submitted(self, user_name: str, form_id: str) -> bool:
        return any(
            record.form_id == form_id and record.user_name == user_name
            for record in self._records.snapshot()
        )

    def list(self) -> tuple[FeedbackRecord, ...]:
        return self._records.snapshot()

    def list_for_form(self, form_id: str) -> tuple[FeedbackRecord, ...]:
        return tuple(record for record in self._records.snapshot() if record.form_id == form_id)

    def clear(self) -> None:
        count = len(self._records)
        self._records.clear()
        logger.info("feedback_cleared", removed=count)
