import pytest

from baseball_elimination.config.settings import settings
from baseball_elimination.loader.schedule_loader import (
    ScheduleFormatError,
    load_division,
    parse_division,
)


def test_load_division(teams5):
    assert teams5.number_of_teams() == 5
    assert teams5.teams()[-1] == "Detroit"
    assert teams5.record("Detroit").against == (3, 7, 3, 3, 0)
    assert teams5.remaining("New_York") == 28


def test_blank_lines_and_spacing_are_ignored():
    division = parse_division(
        "\n  2\n\nA   3  1   1   0 1\n\n   B 2 2 1 1 0  \n"
    )
    assert division.teams() == ["A", "B"]
    assert division.against("B", "A") == 1


def test_trailing_lines_are_ignored():
    division = parse_division("1\nSolo 1 1 0 0\nextra junk\n")
    assert division.teams() == ["Solo"]


@pytest.mark.parametrize(
    "text, line_number",
    [
        ("two\nA 1 1 0 0\n", 1),
        ("0\n", 1),
        ("2\nA 1 1 1 0 1\nB 1 1 1 1\n", 3),  # missing a game column
        ("2\nA 1 x 1 0 1\nB 1 1 1 1 0\n", 2),
        ("2\nA 1 1 1 0 1\nB 1 -1 1 1 0\n", 3),
        ("2\nA 1 1 0 0 1\nB 1 1 1 1 0\n", 2),  # fewer remaining than scheduled
    ],
)
def test_bad_rows_report_line_number(text, line_number):
    with pytest.raises(ScheduleFormatError) as excinfo:
        parse_division(text)
    assert excinfo.value.line_number == line_number
    assert str(excinfo.value).startswith(f"line {line_number}:")


def test_empty_schedule():
    with pytest.raises(ScheduleFormatError):
        parse_division("   \n\n")


def test_missing_rows():
    with pytest.raises(ScheduleFormatError) as excinfo:
        parse_division("3\nA 1 1 0 0 0 0\n")
    assert excinfo.value.line_number is None


def test_division_validation_errors_are_wrapped():
    # Asymmetric schedule
    with pytest.raises(ScheduleFormatError, match="Asymmetric"):
        parse_division("2\nA 1 1 2 0 2\nB 1 1 1 1 0\n")
    # Duplicate names
    with pytest.raises(ScheduleFormatError, match="Duplicate"):
        parse_division("2\nA 1 1 0 0 0\nA 1 1 0 0 0\n")


def test_remaining_check_can_be_disabled(monkeypatch):
    monkeypatch.setattr(settings, "check_remaining_games", False)
    division = parse_division("2\nA 1 1 0 0 1\nB 1 1 1 1 0\n")
    assert division.remaining("A") == 0


def test_unreadable_file(tmp_path):
    with pytest.raises(ScheduleFormatError) as excinfo:
        load_division(tmp_path / "missing.txt")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_from_string_path(data_dir):
    division = load_division(str(data_dir / "teams4.txt"))
    assert division.wins("Atlanta") == 83
