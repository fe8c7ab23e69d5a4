import pytest
from typer.testing import CliRunner

from cadence.terminal.app import app

runner = CliRunner()


@pytest.fixture
def invoke(config_file, source_file):
    def run(*args, source=True):
        arguments = ["--config", str(config_file), "--no-header", *args]
        if source:
            arguments.extend(["--source", str(source_file)])
        return runner.invoke(app, arguments)

    return run


def test_agenda(invoke):
    result = invoke("agenda", "--date", "2026-07-15")

    assert result.exit_code == 0, result.output
    assert "July 2026" in result.output
    assert "2026-07-15 Wed" in result.output
    assert "Screening call" in result.output
    assert "Panel interview" in result.output
    assert "[phone]" in result.output
    assert "Skipped event #3" in result.output


def test_agenda_filtered_by_assignee(invoke):
    result = invoke("agenda", "--date", "2026-07-15", "--assignee", "u2")

    assert result.exit_code == 0, result.output
    assert "Panel interview" in result.output
    assert "Screening call" not in result.output


def test_agenda_empty_month(invoke):
    result = invoke("a", "--date", "2026-09-01")

    assert result.exit_code == 0, result.output
    assert "No events this month" in result.output


def test_agenda_step(invoke):
    result = invoke("agenda", "--date", "2026-06-15", "--step", "1")

    assert result.exit_code == 0, result.output
    assert "July 2026" in result.output


def test_month(invoke):
    result = invoke("month", "--date", "2026-07-15")

    assert result.exit_code == 0, result.output
    assert "July 2026" in result.output


def test_year(invoke):
    result = invoke("year", "--date", "2026-07-15")

    assert result.exit_code == 0, result.output
    assert "2026" in result.output
    assert "December" in result.output


def test_day(invoke):
    result = invoke("day", "--date", "2026-07-15")

    assert result.exit_code == 0, result.output
    assert "Wednesday, July 15, 2026" in result.output
    assert "Screening call" in result.output


def test_day_shows_banner_events(invoke):
    result = invoke("d", "--date", "2026-07-17")

    assert result.exit_code == 0, result.output
    assert "Onsite day" in result.output


def test_week(invoke):
    result = invoke("week", "--date", "2026-07-15")

    assert result.exit_code == 0, result.output
    assert "Jul 12 - Jul 18, 2026" in result.output


def test_users(invoke):
    result = invoke("users")

    assert result.exit_code == 0, result.output
    assert "Alice Recruiter" in result.output
    assert "Bob Interviewer" in result.output


def test_header_shows_range(config_file, source_file):
    result = runner.invoke(
        app,
        [
            "--config",
            str(config_file),
            "month",
            "--date",
            "2026-07-15",
            "--source",
            str(source_file),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Jul 1 - Jul 31, 2026" in result.output
    assert "assignee: all" in result.output


def test_invalid_date(invoke):
    result = invoke("month", "--date", "2026-13-45")

    assert result.exit_code != 0


def test_missing_source(invoke, tmp_path):
    result = invoke("month", "--source", str(tmp_path / "missing.yaml"), source=False)

    assert result.exit_code == 1
    assert "Error" in result.output


def test_config_view(invoke):
    result = invoke("config", "view", source=False)

    assert result.exit_code == 0, result.output
    assert "08-19" in result.output
    assert "closed" in result.output


def test_config_visible_hours(invoke):
    result = invoke("config", "visible-hours", "9", "17", source=False)
    assert result.exit_code == 0, result.output

    result = invoke("c", "v", source=False)

    assert "09-17" in result.output


def test_config_visible_hours_out_of_range(invoke):
    result = invoke("config", "vh", "5", "30", source=False)

    assert result.exit_code != 0


def test_config_working_hours(invoke):
    result = invoke("config", "working-hours", "sun", "10", "14", source=False)
    assert result.exit_code == 0, result.output

    result = invoke("config", "view", source=False)

    assert "10-14" in result.output


def test_config_working_hours_closed(invoke):
    result = invoke("config", "wh", "6", "--closed", source=False)

    assert result.exit_code == 0, result.output


def test_config_working_hours_needs_both_hours(invoke):
    result = invoke("config", "wh", "mon", "9", source=False)

    assert result.exit_code == 1


def test_show_uses_default_view(invoke):
    result = invoke("config", "set", "--default-view", "week", source=False)
    assert result.exit_code == 0, result.output

    result = invoke("show", "--date", "2026-07-15")

    assert result.exit_code == 0, result.output
    assert "Jul 12 - Jul 18, 2026" in result.output


def test_config_rejects_unknown_timezone(invoke):
    result = invoke("config", "set", "--timezone", "Mars/Olympus", source=False)

    assert result.exit_code == 1
    assert "Mars/Olympus" in result.output

    result = invoke("month", "--date", "2026-07-15")

    assert result.exit_code == 0, result.output


def test_invalid_configuration_file_is_reported(invoke, config_file):
    config_file.write_text("timezone: Mars/Olympus\n")

    result = invoke("month", "--date", "2026-07-15")

    assert result.exit_code == 1
    assert "invalid configuration" in result.output


def test_relative_date(invoke):
    result = invoke("month", "--date", "t")

    assert result.exit_code == 0, result.output


def test_names_with_brackets_are_shown_verbatim(config_file, tmp_path):
    source_path = tmp_path / "brackets.yaml"
    source_path.write_text(
        """
users:
  - id: "u[9]"
    name: "Ann [/]"
    role: "[bold]lead"
    color: red
events:
  - id: 1
    title: "Sync [/red]"
    startDate: "2026-07-15T09:00:00Z"
    endDate: "2026-07-15T09:45:00Z"
    user: {id: "u[9]", name: "Ann [/]"}
"""
    )
    base = ["--config", str(config_file)]

    result = runner.invoke(app, [*base, "users", "--source", str(source_path)])

    assert result.exit_code == 0, result.output
    assert "Ann [/]" in result.output
    assert "[bold]lead" in result.output

    result = runner.invoke(
        app,
        [
            *base,
            "agenda",
            "--date",
            "2026-07-15",
            "--assignee",
            "u[9]",
            "--source",
            str(source_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "assignee: Ann [/]" in result.output
    assert "Sync [/red]" in result.output
