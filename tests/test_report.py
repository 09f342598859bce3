import pytest
from rich.console import Console

import main
from baseball_elimination.calculation.elimination import EliminationAnalyzer
from baseball_elimination.models.division import UnknownTeamError
from baseball_elimination.reporting.console import (
    describe_result,
    format_certificate,
    render_report,
)


def make_console():
    return Console(record=True, width=120, color_system=None)


def test_format_certificate():
    assert format_certificate(None) == "-"
    assert format_certificate({"New_York", "Atlanta"}) == "{ Atlanta New_York }"


def test_describe_result(teams4):
    analyzer = EliminationAnalyzer(teams4)
    assert (
        describe_result(analyzer.result("Philadelphia"))
        == "Philadelphia is eliminated by the subset R = { Atlanta New_York }"
    )
    assert describe_result(analyzer.result("Atlanta")) == "Atlanta is not eliminated"


def test_render_report(teams4):
    console = make_console()
    render_report(EliminationAnalyzer(teams4), console=console)
    output = console.export_text()

    assert "Division standings" in output
    assert "Montreal is eliminated by the subset R = { Atlanta }" in output
    assert "New_York is not eliminated" in output
    assert "2 of 4 teams eliminated" in output


def test_render_single_team(teams5):
    console = make_console()
    render_report(EliminationAnalyzer(teams5), console=console, team="Detroit")
    output = console.export_text()

    assert (
        "Detroit is eliminated by the subset R = { Baltimore Boston New_York Toronto }"
        in output
    )
    assert "Division standings" not in output


def test_render_unknown_team(teams5):
    with pytest.raises(UnknownTeamError):
        render_report(EliminationAnalyzer(teams5), console=make_console(), team="Nobody")


def test_main_success(data_dir, capsys):
    assert main.main([str(data_dir / "teams4.txt"), "--log-level", "ERROR"]) == 0
    assert "Philadelphia is eliminated" in capsys.readouterr().out


def test_main_log_level_is_case_insensitive(data_dir):
    assert main.main([str(data_dir / "teams4.txt"), "--log-level", "error"]) == 0


def test_main_rejects_unknown_log_level(data_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main([str(data_dir / "teams4.txt"), "--log-level", "chatty"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_main_bad_schedule(tmp_path):
    schedule = tmp_path / "broken.txt"
    schedule.write_text("2\nA 1 1\n", encoding="utf-8")
    assert main.main([str(schedule), "--log-level", "ERROR"]) == 1


def test_main_unknown_team(data_dir):
    assert (
        main.main([str(data_dir / "teams4.txt"), "--team", "Boston", "--log-level", "ERROR"])
        == 1
    )
