from typing import Dict, Iterable, List, Sequence, Tuple, Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator

from .team import TeamRecord


class DivisionError(Exception):
    """Base exception for division lookups."""

    pass


class UnknownTeamError(DivisionError):
    """Raised when a by-name query references a team outside the division."""

    def __init__(self, team: str):
        super().__init__(f"Unknown team: {team!r}")
        self.team = team


# (name, wins, losses, remaining, games left against each team)
DivisionRow = Tuple[str, int, int, int, Sequence[int]]


class Division(BaseModel):
    """Immutable snapshot of a division: team records and the remaining schedule."""

    model_config = ConfigDict(frozen=True)

    records: Tuple[TeamRecord, ...]

    _index: Dict[str, int] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def check_schedule(self) -> "Division":
        n = len(self.records)
        if n == 0:
            raise ValueError("A division needs at least one team.")

        seen = set()
        for record in self.records:
            if record.name in seen:
                raise ValueError(f"Duplicate team name: {record.name!r}")
            seen.add(record.name)

        for i, record in enumerate(self.records):
            if len(record.against) != n:
                raise ValueError(
                    f"Schedule row for {record.name!r} has {len(record.against)} entries, expected {n}."
                )
            if record.against[i] != 0:
                raise ValueError(
                    f"{record.name!r} cannot have games left against itself."
                )

        for i in range(n):
            for j in range(i + 1, n):
                if self.records[i].against[j] != self.records[j].against[i]:
                    raise ValueError(
                        f"Asymmetric schedule: {self.records[i].name!r} vs {self.records[j].name!r} "
                        f"({self.records[i].against[j]} != {self.records[j].against[i]})."
                    )
        return self

    def model_post_init(self, __context: Any) -> None:
        self._index = {record.name: i for i, record in enumerate(self.records)}

    @classmethod
    def from_rows(cls, rows: Iterable[DivisionRow]) -> "Division":
        """Builds a division from (name, wins, losses, remaining, against) rows."""
        return cls(
            records=tuple(
                TeamRecord(
                    name=name,
                    wins=wins,
                    losses=losses,
                    remaining=remaining,
                    against=tuple(against),
                )
                for name, wins, losses, remaining, against in rows
            )
        )

    def number_of_teams(self) -> int:
        return len(self.records)

    def teams(self) -> List[str]:
        return [record.name for record in self.records]

    def index_of(self, team: str) -> int:
        try:
            return self._index[team]
        except KeyError:
            raise UnknownTeamError(team) from None

    def record(self, team: str) -> TeamRecord:
        return self.records[self.index_of(team)]

    def wins(self, team: str) -> int:
        return self.record(team).wins

    def losses(self, team: str) -> int:
        return self.record(team).losses

    def remaining(self, team: str) -> int:
        return self.record(team).remaining

    def against(self, team1: str, team2: str) -> int:
        j = self.index_of(team2)
        return self.record(team1).against[j]

    def leader_index(self) -> int:
        """Index of the first team holding the most wins."""
        leader = 0
        for i, record in enumerate(self.records):
            if record.wins > self.records[leader].wins:
                leader = i
        return leader
