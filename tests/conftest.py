"""Shared pytest fixtures for the feedbackDesk test suite."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from src.config.settings import Settings
from src.models.feedback import FeedbackRecord
from src.models.form import FormDefinition
from src.providers.memory import MemoryFeedbackStore, MemoryFormStore, MemoryUserStore
from src.services.data_service import DataService, reset_data_service
from src.utils.hashing import CredentialHasher
from src.utils.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    """Configure structlog once, against the session-wide captured stderr."""
    configure_logging(log_level="WARNING")


@pytest.fixture(autouse=True)
def _fresh_singleton() -> Iterator[None]:
    """Make every test start (and end) without a process-wide DataService."""
    reset_data_service()
    yield
    reset_data_service()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings that never read a real config file or .env values."""
    return Settings(
        _env_file=None,
        app_env="test",
        log_level="WARNING",
        hash_algorithm="sha256",
        seed_demo_data=True,
        seed_config_path=str(tmp_path / "missing.yaml"),
        export_path=str(tmp_path / "feedback_export.txt"),
    )


@pytest.fixture
def hasher() -> CredentialHasher:
    return CredentialHasher()


@pytest.fixture
def user_store(hasher: CredentialHasher) -> MemoryUserStore:
    return MemoryUserStore(hasher)


@pytest.fixture
def form_store() -> MemoryFormStore:
    return MemoryFormStore()


@pytest.fixture
def feedback_store() -> MemoryFeedbackStore:
    return MemoryFeedbackStore()


@pytest.fixture
def service(test_settings: Settings) -> DataService:
    """A seeded DataService that is independent of the process-wide one."""
    return DataService.create(test_settings)


@pytest.fixture
def empty_service(test_settings: Settings) -> DataService:
    return DataService.create(test_settings, seed={})


@pytest.fixture
def support_form(service: DataService) -> FormDefinition:
    """The seeded three-category 'Product Support Survey'."""
    return next(form for form in service.get_forms() if form.title == "Product Support Survey")


def make_record(
    user_name: str = "dev",
    form_id: str = "form-1",
    form_title: str = "Product Support Survey",
    **overrides: Any,
) -> FeedbackRecord:
    fields: dict[str, Any] = {
        "user_name": user_name,
        "user_email": f"{user_name}@example.com",
        "ratings": {"Speed": 4, "Clarity": 5, "Friendliness": 3},
        "comments": "Quick and polite.",
        "form_id": form_id,
        "form_title": form_title,
    }
    fields.update(overrides)
    return FeedbackRecord(**fields)


@pytest.fixture
def record_factory():
    """Return the :func:`make_record` builder for tests that need several records."""
    return make_record
