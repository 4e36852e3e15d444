"""In-memory form definition store."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from src.interfaces.form_store import IFormStore
from src.models.form import FormDefinition
from src.utils.snapshot_list import SnapshotList

logger = structlog.get_logger(logger_name=__name__)


class MemoryFormStore(IFormStore):
    """Form definitions held in a copy-on-write list."""

    def __init__(self) -> None:
        self._forms: SnapshotList[FormDefinition] = SnapshotList()

    def add(self, title: str, description: str, categories: Sequence[str]) -> FormDefinition:
        form = FormDefinition(
            title=title,
            description=description,
            rating_categories=tuple(categories),
        )
        self._forms.append(form)
        logger.info(
            "form_added",
            form_id=form.id,
            title=title,
            categories=len(form.rating_categories),
        )
        return form

    def delete(self, form: FormDefinition) -> None:
        removed = self._forms.remove_where(lambda stored: stored.id == form.id)
        logger.info("form_deleted", form_id=form.id, removed=removed)

    def get(self, form_id: str) -> FormDefinition | None:
        for form in self._forms.snapshot():
            if form.id == form_id:
                return form
        return None

    def list(self) -> tuple[FormDefinition, ...]:
        return self._forms.snapshot()
