from pathlib import Path
from typing import List, Optional, Tuple, Union

from loguru import logger
from pydantic import ValidationError

from baseball_elimination.config.settings import settings
from baseball_elimination.models.division import Division, DivisionRow


class ScheduleFormatError(Exception):
    """Raised when a schedule cannot be turned into a division."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def _parse_int(token: str, field: str, line_number: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ScheduleFormatError(
            f"{field} must be an integer, got {token!r}", line_number
        ) from None
    if value < 0:
        raise ScheduleFormatError(
            f"{field} must be non-negative, got {value}", line_number
        )
    return value


def _parse_row(line: str, line_number: int, n: int) -> DivisionRow:
    items = line.split()
    expected = 4 + n
    if len(items) != expected:
        raise ScheduleFormatError(
            f"expected {expected} fields (name, wins, losses, remaining and {n} games), "
            f"got {len(items)}",
            line_number,
        )

    name = items[0]
    wins = _parse_int(items[1], "wins", line_number)
    losses = _parse_int(items[2], "losses", line_number)
    remaining = _parse_int(items[3], "remaining", line_number)
    against = tuple(
        _parse_int(token, f"games against team {j}", line_number)
        for j, token in enumerate(items[4:])
    )

    if settings.check_remaining_games and remaining < sum(against):
        raise ScheduleFormatError(
            f"{name} has {remaining} games remaining but {sum(against)} left inside the division",
            line_number,
        )
    return name, wins, losses, remaining, against


def parse_division(text: str) -> Division:
    """
    Parses a schedule in the classic text format.

    The first non-blank line holds the number of teams n; each of the next n
    non-blank lines holds a team name (no spaces), its wins, losses and
    remaining games, followed by the n games it has left against every team
    in file order.

    Raises:
        ScheduleFormatError: if the text does not describe a valid division.
    """
    lines: List[Tuple[int, str]] = [
        (number, line.strip())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        raise ScheduleFormatError("schedule is empty")

    count_line, count_text = lines[0]
    try:
        n = int(count_text)
    except ValueError:
        raise ScheduleFormatError(
            f"first line must be the number of teams, got {count_text!r}", count_line
        ) from None
    if n < 1:
        raise ScheduleFormatError(f"number of teams must be positive, got {n}", count_line)

    team_lines = lines[1:]
    if len(team_lines) < n:
        raise ScheduleFormatError(
            f"expected {n} team rows, found {len(team_lines)}"
        )
    if len(team_lines) > n:
        logger.warning(
            f"Ignoring {len(team_lines) - n} trailing line(s) after {n} team rows "
            f"(first at line {team_lines[n][0]})"
        )

    rows = [_parse_row(line, number, n) for number, line in team_lines[:n]]

    try:
        division = Division.from_rows(rows)
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        raise ScheduleFormatError(f"invalid division: {messages}") from e

    logger.debug(f"Parsed division with {n} teams: {division.teams()}")
    return division


def load_division(path: Union[str, Path]) -> Division:
    """Reads and parses a schedule file."""
    path = Path(path)
    logger.info(f"Loading schedule from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScheduleFormatError(f"cannot read schedule {path}: {e}") from e
    return parse_division(text)
