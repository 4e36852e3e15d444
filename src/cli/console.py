# =============================================================================
# src/cli/console.py - Interactive Feedback Console
# =============================================================================
#
# Text-mode front end for the data service.  The screens follow the same
# flow as the desktop app this project grew out of:
#
#   Role selection ─┬─ User  → pick form → login → (already submitted? refuse)
#                   │                             → fill in email/ratings/comments
#                   ├─ Admin → login → dashboard (forms, feedback, export,
#                   │                             clear data, manage users)
#                   └─ Exit
#
# Login failures always print the same "Invalid credentials." message: the
# console never reveals whether the username or the password was wrong, or
# whether the account simply has the other role.
#
# All I/O goes through injectable callables (input_fn, password_fn, out) so
# tests can drive whole sessions with scripted answers.
# =============================================================================

"""Interactive console for submitting and managing feedback.

Usage::

    python -m src.cli
    python -m src.cli --export-path /tmp/feedback.txt --log-level WARNING
"""

from __future__ import annotations

import argparse
import getpass
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

import pydantic

from src.models.feedback import MAX_RATING
from src.models.form import FormDefinition
from src.models.user import Role, User
from src.services.data_service import DataService
from src.services.feedback_formatter import FeedbackFormatter, filter_by_name
from src.utils.errors import ExportError, ValidationError
from src.utils.logging import get_logger
from src.utils.validators import (
    MAX_RATING_CATEGORIES,
    clean_categories,
    validate_email,
    validate_rating,
    validate_title,
)

INVALID_CREDENTIALS = "Invalid credentials."
ALREADY_SUBMITTED = "You have already submitted feedback for this form."


class FeedbackConsole:
    """Menu-driven session over a :class:`DataService`."""

    def __init__(
        self,
        service: DataService,
        formatter: FeedbackFormatter | None = None,
        export_path: str = "feedback_export.txt",
        input_fn: Callable[[str], str] | None = None,
        password_fn: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._service = service
        self._formatter = formatter or FeedbackFormatter()
        self._export_path = export_path
        self._input = input_fn or input
        self._password = password_fn or getpass.getpass
        self._out = out or sys.stdout
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Small I/O helpers
    # ------------------------------------------------------------------

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str, default: str = "") -> str:
        suffix = f" [{default}]" if default else ""
        answer = self._input(f"{prompt}{suffix}: ").strip()
        return answer or default

    def _confirm(self, prompt: str) -> bool:
        return self._ask(f"{prompt} (y/n)").lower() in ("y", "yes")

    def _choose(self, title: str, options: Sequence[str]) -> int | None:
        """Show a numbered menu; return the 0-based choice or None for back/cancel."""
        self._say()
        self._say(title)
        for number, option in enumerate(options, start=1):
            self._say(f"  {number}. {option}")
        self._say("  0. Back")
        while True:
            answer = self._ask("Choose")
            if answer in ("", "0"):
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return int(answer) - 1
            self._say("Please enter one of the listed numbers.")

    def _choose_form(self, title: str) -> FormDefinition | None:
        forms = self._service.get_forms()
        if not forms:
            self._say("No forms are available.")
            return None
        index = self._choose(title, [form.title for form in forms])
        return None if index is None else forms[index]

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Loop on the role selection screen until the user exits."""
        self._say("Feedback System")
        while True:
            choice = self._choose("Select your role", ["User", "Admin"])
            if choice is None:
                self._say("Goodbye.")
                return
            if choice == 0:
                self._user_session()
            else:
                self._admin_session()

    def login(self, role: Role) -> User | None:
        """Prompt until valid credentials for *role* are given; blank username cancels."""
        while True:
            username = self._ask(f"{role.value.title()} username (blank to cancel)")
            if not username:
                return None
            password = self._password("Password: ")
            user = self._service.authenticate_user(username, password)
            if user is not None and user.role == role:
                return user
            self._logger.info("console_login_failed", expected_role=role.value)
            self._say(INVALID_CREDENTIALS)

    # ------------------------------------------------------------------
    # User path
    # ------------------------------------------------------------------

    def _user_session(self) -> None:
        form = self._choose_form("Select a feedback form")
        if form is None:
            return
        user = self.login(Role.USER)
        if user is None:
            return
        if self._service.has_user_submitted_form(user, form):
            self._say(ALREADY_SUBMITTED)
            return
        self.fill_form(user, form)

    def fill_form(self, user: User, form: FormDefinition) -> bool:
        """Collect one response to *form* and submit it; return True if stored."""
        self._say()
        self._say(form.title)
        if form.description:
            self._say(form.description)
        self._say(f"Name: {user.username}")

        while True:
            try:
                email = validate_email(self._ask("Email"))
                break
            except ValidationError as exc:
                self._say(exc.message)

        ratings: dict[str, int] = {}
        for category in form.rating_categories:
            while True:
                try:
                    ratings[category] = validate_rating(
                        self._ask(f"{category} (1-{MAX_RATING})", default=str(MAX_RATING))
                    )
                    break
                except ValidationError as exc:
                    self._say(exc.message)

        comments = self._ask("Comments")

        if not self._service.submit_feedback(user, form, email, ratings, comments):
            self._say(ALREADY_SUBMITTED)
            return False
        self._say("Thank you!")
        return True

    # ------------------------------------------------------------------
    # Admin path
    # ------------------------------------------------------------------

    def _admin_session(self) -> None:
        admin = self.login(Role.ADMIN)
        if admin is None:
            return
        self._say(f"Welcome, Admin {admin.username}")
        actions: list[tuple[str, Callable[[], None]]] = [
            ("List forms", self.list_forms),
            ("Create form", self.create_form),
            ("Delete form", self.delete_form),
            ("View form feedback", self.view_form_feedback),
            ("Manage users", self.manage_users),
            ("Export feedback", self.export_feedback),
            ("Clear all data", self.clear_feedback),
        ]
        while True:
            choice = self._choose("Admin Dashboard", [label for label, _ in actions])
            if choice is None:
                self._logger.info("admin_logout", username=admin.username)
                return
            actions[choice][1]()

    def list_forms(self) -> None:
        forms = self._service.get_forms()
        if not forms:
            self._say("No forms.")
        for form in forms:
            categories = ", ".join(form.rating_categories)
            self._say(f"- {form.title} ({categories})")

    def create_form(self) -> FormDefinition | None:
        try:
            title = validate_title(self._ask("Title"))
            description = self._ask("Description")
            raw = [self._ask(f"Rating category {n}") for n in range(1, MAX_RATING_CATEGORIES + 1)]
            categories = clean_categories(raw)
            form = self._service.add_form(title, description, categories)
        except (ValidationError, pydantic.ValidationError) as exc:
            message = exc.message if isinstance(exc, ValidationError) else "Invalid form definition."
            self._say(f"Form not created: {message}")
            return None
        self._say(f"Created form '{form.title}'.")
        return form

    def delete_form(self) -> None:
        form = self._choose_form("Delete which form?")
        if form is None:
            return
        if self._confirm(f"Delete {form.title}?"):
            self._service.delete_form(form)
            self._say("Form deleted.")

    def view_form_feedback(self) -> None:
        form = self._choose_form("View feedback for which form?")
        if form is None:
            return
        records = list(self._service.get_feedback_for_form(form))
        while True:
            self._say()
            self._say(f"Feedback for: {form.title} ({len(records)} shown)")
            for number, record in enumerate(records, start=1):
                ratings = self._formatter.format_ratings(record)
                self._say(
                    f"  {number}. {record.user_name} | {record.user_email} | "
                    f"{ratings}| {record.comments}"
                )
            answer = self._ask("Number for details, 'f' to filter by name, blank to go back")
            if not answer:
                return
            if answer.lower() == "f":
                pattern = self._ask("Search by name")
                records = filter_by_name(self._service.get_feedback_for_form(form), pattern)
            elif answer.isdigit() and 1 <= int(answer) <= len(records):
                self._say(self._formatter.render_record(records[int(answer) - 1]))
            else:
                self._say("Please enter one of the listed numbers.")

    def export_feedback(self) -> None:
        path = self._ask("Export to", default=self._export_path)
        try:
            count = self._formatter.export(self._service.get_feedback(), path)
        except ExportError as exc:
            self._say(f"Export failed: {exc.message}")
            return
        self._say(f"Saved successfully ({count} records to {path}).")

    def clear_feedback(self) -> None:
        if self._confirm("Are you sure? This deletes ALL feedback."):
            self._service.clear_all_feedback()
            self._say("All feedback cleared.")

    # ------------------------------------------------------------------
    # User management
    # ------------------------------------------------------------------

    def manage_users(self) -> None:
        actions: list[tuple[str, Callable[[], None]]] = [
            ("List users", self._list_users),
            ("Add user", self._add_user),
            ("Delete user", self._delete_user),
            ("Reset password", self._reset_password),
        ]
        while True:
            choice = self._choose("Manage Users", [label for label, _ in actions])
            if choice is None:
                return
            actions[choice][1]()

    def _list_users(self) -> None:
        for user in self._service.get_users():
            self._say(f"- {user.username} ({user.role.value})")

    def _add_user(self) -> None:
        username = self._ask("New username")
        if not username:
            return
        password = self._password("Password: ")
        if not password:
            self._say("Password must not be empty.")
            return
        role = Role.ADMIN if self._ask("Role (USER/ADMIN)", default="USER").upper() == "ADMIN" else Role.USER
        if self._service.add_user(username, password, role):
            self._say(f"User '{username}' added.")
        else:
            self._say(f"Username '{username}' is already taken.")

    def _delete_user(self) -> None:
        username = self._ask("Username to delete")
        if username and self._confirm(f"Delete {username}?"):
            self._service.delete_user(username)
            self._say(f"User '{username}' deleted.")

    def _reset_password(self) -> None:
        username = self._ask("Username")
        if not username:
            return
        password = self._password("New password: ")
        if not password:
            self._say("Password must not be empty.")
            return
        if self._service.update_user_password(username, password):
            self._say("Password updated.")
        else:
            self._say(f"No user named '{username}'.")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI flags, bootstrap the service and run the console."""
    parser = argparse.ArgumentParser(
        prog="feedbackdesk",
        description="Interactive console for feedback forms.",
    )
    parser.add_argument("--export-path", default=None, help="Default file for feedback export.")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...).")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines on stderr.")
    args = parser.parse_args(argv)

    # Deferred so --help works without touching settings or logging.
    from src.config.settings import Settings
    from src.main import bootstrap
    from src.utils.errors import ConfigurationError

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.export_path:
        overrides["export_path"] = args.export_path
    settings = Settings(**overrides)

    try:
        service = bootstrap(settings, json_logs=args.json_logs)
    except ConfigurationError as exc:
        print(f"Startup failed: {exc}", file=sys.stderr)
        return 2

    console = FeedbackConsole(service, export_path=settings.export_path)
    try:
        console.run()
    except (EOFError, KeyboardInterrupt):
        print(file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
