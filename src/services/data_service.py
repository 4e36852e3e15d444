"""Process-wide data service: the single entry point to users, forms and feedback.

# ─── ARCHITECTURE ROLE ───────────────────────────────────────────────
#
#   console / exporter ──→ DataService ──→ IUserStore     (+ CredentialHasher)
#                                     ──→ IFormStore
#                                     ──→ IFeedbackStore
#
# ``get_data_service()`` builds one DataService per process on first call
# and seeds it with demo data.  Construction runs under a module lock with
# a double check, so concurrent first callers block until the one
# initializing thread is done and then all see the same seeded instance.
#
# After initialization the service only routes calls.  It holds no state
# of its own; every store serializes its own writes and none of them locks
# across stores.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from src.config.loader import load_seed_config
from src.config.settings import Settings
from src.interfaces.feedback_store import IFeedbackStore
from src.interfaces.form_store import IFormStore
from src.interfaces.user_store import IUserStore
from src.models.feedback import FeedbackRecord
from src.models.form import FormDefinition
from src.models.user import Role, User
from src.providers.memory import MemoryFeedbackStore, MemoryFormStore, MemoryUserStore
from src.utils.errors import ConfigurationError, ValidationError
from src.utils.hashing import CredentialHasher
from src.utils.logging import get_logger
from src.utils.validators import clean_categories, validate_title


class DataService:
    """Facade over the three stores.

    Most methods map one-to-one onto a store operation.  Two
    differences in failure handling are kept:

    - :meth:`delete_user` of an unknown user is a silent no-op, while
      :meth:`update_user_password` of an unknown user returns ``False``.
    - :meth:`has_user_submitted_form` followed by :meth:`add_feedback` is
      *not* atomic; two concurrent submissions can both pass the check.
      :meth:`submit_feedback` is the atomic alternative (first write wins).
    """

    def __init__(
        self,
        user_store: IUserStore,
        form_store: IFormStore,
        feedback_store: IFeedbackStore,
    ) -> None:
        self._users = user_store
        self._forms = form_store
        self._feedback = feedback_store
        self._logger: structlog.BoundLogger = get_logger(__name__)

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        seed: Mapping[str, Any] | None = None,
    ) -> DataService:
        """Build a service backed by in-memory stores.

        Parameters
        ----------
        settings:
            Supplies the digest algorithm and seeding options.  Defaults to
            a fresh :class:`Settings` read from the environment.
        seed:
            Explicit seed data.  When omitted and ``settings.seed_demo_data``
            is true, the data comes from :func:`load_seed_config`.

        Raises
        ------
        ConfigurationError
            If the digest algorithm is unavailable or the seed file is
            malformed.
        """
        app_settings = settings or Settings()
        hasher = CredentialHasher(app_settings.hash_algorithm)
        service = cls(
            user_store=MemoryUserStore(hasher),
            form_store=MemoryFormStore(),
            feedback_store=MemoryFeedbackStore(),
        )

        if seed is None and app_settings.seed_demo_data:
            seed = load_seed_config(app_settings.seed_config_path)
        if seed:
            service._load_seed(seed)

        service._logger.info(
            "data_service_initialized",
            hash_algorithm=hasher.algorithm,
            users=len(service.get_users()),
            forms=len(service.get_forms()),
        )
        return service

    def _load_seed(self, seed: Mapping[str, Any]) -> None:
        """Add seed users and forms, rejecting malformed entries.

        Seed forms follow the same rules as forms created at the console.

        Raises:
            ConfigurationError: If an entry is missing a field, has the wrong
                type, names an unknown role or breaks a form rule.
        """
        section = "users"
        try:
            for entry in seed.get("users", []):
                self._users.add(
                    _seed_text(entry, "username"),
                    _seed_text(entry, "password"),
                    entry.get("role", Role.USER),
                )
            section = "forms"
            for entry in seed.get("forms", []):
                self._forms.add(
                    validate_title(_seed_text(entry, "title")),
                    entry.get("description") or "",
                    clean_categories(_seed_categories(entry)),
                )
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as exc:
            raise ConfigurationError(
                message=f"Invalid seed {section} entry: {exc}",
                component="config",
            ) from exc

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def authenticate_user(self, username: str, password: str) -> User | None:
        return self._users.authenticate(username, password)

    def add_user(self, username: str, password: str, role: Role | str) -> bool:
        return self._users.add(username, password, role)

    def delete_user(self, username: str) -> None:
        self._users.delete(username)

    def update_user_password(self, username: str, new_password: str) -> bool:
        return self._users.update_password(username, new_password)

    def get_user(self, username: str) -> User | None:
        return self._users.get(username)

    def get_users(self) -> tuple[User, ...]:
        return self._users.list()

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def add_form(self, title: str, description: str, categories: Sequence[str]) -> FormDefinition:
        return self._forms.add(title, description, categories)

    def delete_form(self, form: FormDefinition) -> None:
        self._forms.delete(form)

    def get_form(self, form_id: str) -> FormDefinition | None:
        return self._forms.get(form_id)

    def get_forms(self) -> tuple[FormDefinition, ...]:
        return self._forms.list()

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------

    def add_feedback(self, record: FeedbackRecord) -> None:
        self._feedback.add(record)

    def has_user_submitted_form(self, user: User, form: FormDefinition) -> bool:
        return self._feedback.has_submitted(user.username, form.id)

    def submit_feedback(
        self,
        user: User,
        form: FormDefinition,
        email: str,
        ratings: Mapping[str, int],
        comments: str = "",
    ) -> bool:
        """Record *user*'s response to *form* unless they already responded.

        The form title is copied into the record as it is right now.
        Returns ``False`` when a record for (form, user) already exists.
        """
        record = FeedbackRecord(
            user_name=user.username,
            user_email=email,
            ratings=dict(ratings),
            comments=comments,
            form_id=form.id,
            form_title=form.title,
        )
        return self._feedback.add_if_absent(record)

    def get_feedback(self) -> tuple[FeedbackRecord, ...]:
        return self._feedback.list()

    def get_feedback_for_form(self, form: FormDefinition) -> tuple[FeedbackRecord, ...]:
        return self._feedback.list_for_form(form.id)

    def clear_all_feedback(self) -> None:
        self._feedback.clear()


def _seed_text(entry: Mapping[str, Any], key: str) -> str:
    # YAML reads an unquoted ``password: 123`` as an int.
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"'{key}' must be text, got {type(value).__name__}")
    return str(value)


def _seed_categories(entry: Mapping[str, Any]) -> list[str]:
    categories = entry["rating_categories"]
    if isinstance(categories, str) or not isinstance(categories, (list, tuple)):
        raise TypeError("'rating_categories' must be a list")
    return [_seed_text({"category": name}, "category") for name in categories]


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_instance: DataService | None = None
_instance_lock = threading.Lock()


def get_data_service(settings: Settings | None = None) -> DataService:
    """Return the process-wide :class:`DataService`, creating it on first use.

    *settings* only matters for the call that performs initialization;
    later calls return the existing instance and ignore it.
    """
    global _instance

    service = _instance
    if service is not None:
        return service

    with _instance_lock:
        if _instance is None:
            _instance = DataService.create(settings)
        return _instance


def reset_data_service() -> None:
    """Drop the process-wide instance so the next access builds a fresh one."""
    global _instance

    with _instance_lock:
        _instance = None
