"""Integration tests: whole console sessions driven by scripted answers.

Each test feeds the console a list of typed answers (and, separately, the
passwords) and checks both the printed output and the resulting state of
the data service.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from src.cli.console import ALREADY_SUBMITTED, INVALID_CREDENTIALS, FeedbackConsole, main
from src.models.form import FormDefinition
from src.services.data_service import DataService


class Script:
    """Hands out pre-recorded answers; fails loudly if the console asks for more."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self._answers.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self._answers


def run_console(
    service: DataService,
    answers: list[str],
    passwords: list[str] = (),
    export_path: str = "feedback_export.txt",
) -> str:
    out = io.StringIO()
    inputs = Script(answers)
    secrets = Script(list(passwords))
    FeedbackConsole(
        service,
        export_path=export_path,
        input_fn=inputs,
        password_fn=secrets,
        out=out,
    ).run()
    assert inputs.exhausted and secrets.exhausted
    return out.getvalue()


# ======================================================================
# User path
# ======================================================================


class TestUserSubmission:
    def test_submit_feedback(self, service: DataService, support_form: FormDefinition) -> None:
        output = run_console(
            service,
            ["1", "2", "dev", "dev@example.com", "4", "", "3", "Great", "0"],
            ["123"],
        )
        assert "Thank you!" in output
        (record,) = service.get_feedback()
        assert record.user_name == "dev"
        assert record.user_email == "dev@example.com"
        assert record.ratings == {"Speed": 4, "Clarity": 5, "Friendliness": 3}
        assert record.comments == "Great"
        assert record.form_id == support_form.id
        assert record.form_title == support_form.title

    def test_reprompts_invalid_email_and_rating(self, service: DataService) -> None:
        output = run_console(
            service,
            ["1", "1", "dev", "nope", "dev@example.com", "9", "2", "", "0"],
            ["123"],
        )
        assert "Invalid Email." in output
        assert "Rating must be between 1 and 5." in output
        assert service.get_feedback()[0].ratings == {"Overall Experience": 2}

    def test_second_submission_refused(
        self, service: DataService, support_form: FormDefinition
    ) -> None:
        dev = service.get_user("dev")
        service.submit_feedback(dev, support_form, "dev@example.com", {"Speed": 5})

        output = run_console(service, ["1", "2", "dev", "0"], ["123"])
        assert ALREADY_SUBMITTED in output
        assert len(service.get_feedback()) == 1

    def test_wrong_password_is_generic(self, service: DataService) -> None:
        output = run_console(service, ["1", "2", "dev", "", "0"], ["wrong"])
        assert INVALID_CREDENTIALS in output
        assert service.get_feedback() == ()

    def test_unknown_user_gets_same_message(self, service: DataService) -> None:
        output = run_console(service, ["1", "2", "ghost", "", "0"], ["123"])
        assert INVALID_CREDENTIALS in output

    def test_admin_cannot_log_in_as_user(self, service: DataService) -> None:
        output = run_console(service, ["1", "2", "admin", "", "0"], ["123"])
        assert INVALID_CREDENTIALS in output

    def test_retry_after_failed_login(self, service: DataService) -> None:
        output = run_console(
            service,
            ["1", "1", "dev", "dev", "d@x.y", "", "", "0"],
            ["bad", "123"],
        )
        assert output.count(INVALID_CREDENTIALS) == 1
        assert "Thank you!" in output

    def test_fill_form_loses_race(self, service: DataService, support_form: FormDefinition) -> None:
        dev = service.get_user("dev")
        out = io.StringIO()
        console = FeedbackConsole(
            service,
            input_fn=Script(["dev@example.com", "", "", "", ""]),
            password_fn=Script([]),
            out=out,
        )
        # Another session submits between the check and the form being sent.
        service.submit_feedback(dev, support_form, "first@example.com", {"Speed": 1})
        assert console.fill_form(dev, support_form) is False
        assert ALREADY_SUBMITTED in out.getvalue()
        assert service.get_feedback()[0].user_email == "first@example.com"


# ======================================================================
# Admin path
# ======================================================================


class TestAdminDashboard:
    def test_non_admin_refused(self, service: DataService) -> None:
        output = run_console(service, ["2", "dev", "", "0"], ["123"])
        assert INVALID_CREDENTIALS in output
        assert "Admin Dashboard" not in output

    def test_create_form(self, service: DataService) -> None:
        output = run_console(
            service,
            ["2", "admin", "2", "Onboarding", "First week", " Quality ", "", "Pace", "", "", "0", "0"],
            ["123"],
        )
        assert "Created form 'Onboarding'." in output
        form = service.get_forms()[-1]
        assert form.title == "Onboarding"
        assert form.description == "First week"
        assert form.rating_categories == ("Quality", "Pace")

    def test_create_form_without_categories(self, service: DataService) -> None:
        output = run_console(
            service,
            ["2", "admin", "2", "Empty", "", "", "", "", "", "", "0", "0"],
            ["123"],
        )
        assert "Form not created" in output
        assert len(service.get_forms()) == 2

    def test_delete_form(self, service: DataService) -> None:
        run_console(service, ["2", "admin", "3", "1", "y", "0", "0"], ["123"])
        assert [f.title for f in service.get_forms()] == ["Product Support Survey"]

    def test_delete_form_declined(self, service: DataService) -> None:
        run_console(service, ["2", "admin", "3", "1", "n", "0", "0"], ["123"])
        assert len(service.get_forms()) == 2

    def test_view_feedback_with_filter_and_detail(
        self, service: DataService, support_form: FormDefinition
    ) -> None:
        for name in ("dev", "daksh"):
            service.submit_feedback(
                service.get_user(name), support_form, f"{name}@x.y", {"Speed": 3}, "fine"
            )
        output = run_console(
            service,
            ["2", "admin", "4", "2", "f", "dak", "1", "", "0", "0"],
            ["123"],
        )
        assert "Feedback for: Product Support Survey (2 shown)" in output
        assert "Feedback for: Product Support Survey (1 shown)" in output
        assert "1. daksh | daksh@x.y | Speed:3 | fine" in output
        assert " Name: daksh\n" in output

    def test_orphaned_feedback_hidden(
        self, service: DataService, support_form: FormDefinition
    ) -> None:
        service.submit_feedback(service.get_user("dev"), support_form, "d@x.y", {"Speed": 3})
        service.delete_form(support_form)
        output = run_console(service, ["2", "admin", "4", "1", "", "0", "0"], ["123"])
        assert "Feedback for: General Website Feedback (0 shown)" in output
        assert len(service.get_feedback()) == 1

    def test_export(self, service: DataService, support_form: FormDefinition, tmp_path: Path) -> None:
        service.submit_feedback(service.get_user("dev"), support_form, "d@x.y", {"Speed": 3})
        target = tmp_path / "export.txt"
        output = run_console(service, ["2", "admin", "6", str(target), "0", "0"], ["123"])
        assert "Saved successfully (1 records" in output
        text = target.read_text(encoding="utf-8")
        assert " Form: Product Support Survey\n" in text
        assert " Rating (Speed): 3 / 5\n" in text

    def test_export_default_path(self, service: DataService, tmp_path: Path) -> None:
        target = tmp_path / "default.txt"
        run_console(service, ["2", "admin", "6", "", "0", "0"], ["123"], export_path=str(target))
        assert target.exists()

    def test_export_failure_reported(self, service: DataService, tmp_path: Path) -> None:
        target = tmp_path / "no-such-dir" / "out.txt"
        output = run_console(service, ["2", "admin", "6", str(target), "0", "0"], ["123"])
        assert "Export failed" in output

    def test_clear_all_feedback(self, service: DataService, support_form: FormDefinition) -> None:
        service.submit_feedback(service.get_user("dev"), support_form, "d@x.y", {"Speed": 3})
        output = run_console(service, ["2", "admin", "7", "y", "0", "0"], ["123"])
        assert "All feedback cleared." in output
        assert service.get_feedback() == ()


class TestManageUsers:
    def test_add_and_reset_password(self, service: DataService) -> None:
        output = run_console(
            service,
            ["2", "admin", "5", "2", "newbie", "", "4", "newbie", "0", "0", "0"],
            ["123", "first", "second"],
        )
        assert "User 'newbie' added." in output
        assert "Password updated." in output
        assert service.authenticate_user("newbie", "second") is not None

    def test_add_duplicate(self, service: DataService) -> None:
        output = run_console(
            service,
            ["2", "admin", "5", "2", "dev", "", "0", "0", "0"],
            ["123", "other"],
        )
        assert "Username 'dev' is already taken." in output
        assert service.authenticate_user("dev", "123") is not None

    def test_delete_user_and_list(self, service: DataService) -> None:
        output = run_console(
            service,
            ["2", "admin", "5", "3", "daksh", "y", "1", "0", "0", "0"],
            ["123"],
        )
        assert service.get_user("daksh") is None
        assert "- admin (ADMIN)" in output
        assert "- daksh (USER)" not in output

    def test_reset_password_unknown_user(self, service: DataService) -> None:
        output = run_console(
            service,
            ["2", "admin", "5", "4", "ghost", "0", "0", "0"],
            ["123", "pw"],
        )
        assert "No user named 'ghost'." in output


# ======================================================================
# Entry point
# ======================================================================


class TestMain:
    @pytest.fixture(autouse=True)
    def _keep_session_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("src.main.configure_logging", lambda **kwargs: None)

    def test_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "--export-path" in capsys.readouterr().out

    def test_bad_hash_algorithm_exits_with_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("HASH_ALGORITHM", "not-a-digest")
        assert main(["--log-level", "ERROR"]) == 2
        assert "Startup failed" in capsys.readouterr().err

    def test_malformed_seed_file_exits_with_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("seed:\n  users:\n    - username: boss\n      role: admin\n", encoding="utf-8")
        monkeypatch.setenv("SEED_CONFIG_PATH", str(config))
        assert main(["--log-level", "ERROR"]) == 2
        assert "Startup failed: [config] Invalid seed users entry" in capsys.readouterr().err

    def test_runs_until_exit(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        monkeypatch.setenv("SEED_CONFIG_PATH", str(tmp_path / "absent.yaml"))
        monkeypatch.setattr("builtins.input", Script(["0"]))
        assert main(["--log-level", "ERROR"]) == 0
        assert "Goodbye." in capsys.readouterr().out
