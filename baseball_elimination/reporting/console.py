from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from baseball_elimination.calculation.elimination import EliminationAnalyzer
from baseball_elimination.models.enums import EliminationStatus
from baseball_elimination.models.result import EliminationResult

STATUS_LABELS = {
    EliminationStatus.NOT_ELIMINATED: "[green]alive[/green]",
    EliminationStatus.ELIMINATED_TRIVIAL: "[red]eliminated (trivial)[/red]",
    EliminationStatus.ELIMINATED_BY_MIN_CUT: "[red]eliminated (min cut)[/red]",
}


def format_certificate(certificate: Optional[Iterable[str]]) -> str:
    """Renders a certificate as '{ a b c }' with names sorted; '-' when absent."""
    if certificate is None:
        return "-"
    return "{ " + " ".join(sorted(certificate)) + " }"


def describe_result(result: EliminationResult) -> str:
    if result.eliminated:
        return f"{result.team} is eliminated by the subset R = {format_certificate(result.certificate)}"
    return f"{result.team} is not eliminated"


def build_standings_table(analyzer: EliminationAnalyzer) -> Table:
    table = Table(title="Division standings", header_style="bold cyan")
    table.add_column("Team")
    table.add_column("W", justify="right")
    table.add_column("L", justify="right")
    table.add_column("R", justify="right")
    table.add_column("Max W", justify="right")
    table.add_column("Status")
    table.add_column("Certificate")

    for record, result in zip(analyzer.division.records, analyzer.results()):
        table.add_row(
            record.name,
            str(record.wins),
            str(record.losses),
            str(record.remaining),
            str(record.max_possible_wins),
            STATUS_LABELS[result.status],
            format_certificate(result.certificate),
        )
    return table


def render_report(
    analyzer: EliminationAnalyzer,
    console: Optional[Console] = None,
    team: Optional[str] = None,
) -> None:
    """Prints the standings table, one line per team and a summary panel.

    When `team` is given only that team's verdict is printed.
    """
    console = console or Console()

    if team is not None:
        console.print(describe_result(analyzer.result(team)), highlight=False)
        return

    console.print(build_standings_table(analyzer))
    for result in analyzer.results():
        console.print(describe_result(result), highlight=False)

    eliminated = [r for r in analyzer.results() if r.eliminated]
    console.print(
        Panel(
            f"{len(eliminated)} of {analyzer.number_of_teams()} teams eliminated",
            title="Summary",
            expand=False,
        )
    )
