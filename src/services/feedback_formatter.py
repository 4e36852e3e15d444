"""Human-readable rendering and export of feedback records.

Three consumers share these helpers:

- **Export** - :meth:`FeedbackFormatter.export` writes every record as a
  block of ``Field: value`` lines between dashed delimiters.  The format is
  for people, not for re-import.
- **Detail view** - :meth:`FeedbackFormatter.render_record` shows one record.
- **Table rows** - :meth:`FeedbackFormatter.format_ratings` gives the compact
  ``"Speed:4 Clarity:5 "`` summary, and :func:`filter_by_name` narrows a
  form's records by a name search.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from src.models.feedback import MAX_RATING, FeedbackRecord
from src.utils.errors import ExportError
from src.utils.logging import get_logger

DELIMITER = "-" * 33


def filter_by_name(records: Iterable[FeedbackRecord], pattern: str) -> list[FeedbackRecord]:
    """Keep records whose ``user_name`` matches *pattern* (case-insensitive).

    *pattern* is searched as a regular expression anywhere in the name.  An
    empty pattern keeps everything; a pattern that is not a valid regular
    expression is matched as a literal substring instead.
    """
    if not pattern:
        return list(records)
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error:
        regex = re.compile(re.escape(pattern), re.IGNORECASE)
    return [record for record in records if regex.search(record.user_name)]


class FeedbackFormatter:
    """Renders feedback records as plain text."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def render_record(self, record: FeedbackRecord) -> str:
        """Render one record as a delimited ``Field: value`` block."""
        lines = [
            DELIMITER,
            f" Form: {record.form_title}",
            f" Name: {record.user_name}",
            f" Email: {record.user_email}",
        ]
        for category, score in record.ratings.items():
            lines.append(f" Rating ({category}): {score} / {MAX_RATING}")
        lines.append(f" Comments: {record.comments}")
        lines.append(DELIMITER)
        return "\n".join(lines) + "\n\n"

    def render(self, records: Iterable[FeedbackRecord]) -> str:
        return "".join(self.render_record(record) for record in records)

    @staticmethod
    def format_ratings(record: FeedbackRecord) -> str:
        return "".join(f"{category}:{score} " for category, score in record.ratings.items())

    def export(self, records: Iterable[FeedbackRecord], path: str | Path) -> int:
        """Write *records* to *path* (UTF-8, overwriting) and return the count.

        Raises:
            ExportError: If the file cannot be written.
        """
        records = list(records)
        target = Path(path)
        try:
            target.write_text(self.render(records), encoding="utf-8")
        except OSError as exc:
            self._logger.error("feedback_export_failed", path=str(target), error=str(exc))
            raise ExportError(
                message=f"Could not write {target}: {exc.strerror or exc}",
                component="exporter",
            ) from exc

        self._logger.info("feedback_exported", path=str(target), records=len(records))
        return len(records)
