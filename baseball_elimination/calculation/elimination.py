from fractions import Fraction
from itertools import combinations
from typing import Dict, FrozenSet, Iterable, List, Optional

from loguru import logger

from baseball_elimination.calculation.network_builder import build_elimination_network
from baseball_elimination.flow.max_flow import MaxFlowSolver
from baseball_elimination.models.division import Division
from baseball_elimination.models.enums import EliminationStatus
from baseball_elimination.models.result import EliminationResult


def elimination_bound(division: Division, certificate: Iterable[str]) -> Fraction:
    """
    Average number of wins the certificate teams must reach between them.

    For a subset R this is (sum of wins in R + games left inside R) / |R|.
    Some team of R must finish with at least this many wins, so any team
    whose best possible total is below it is eliminated. The value is an
    exact Fraction so comparisons hold for win totals of any size.

    Raises:
        UnknownTeamError: if a certificate name is not in the division.
        ValueError: if the certificate is empty.
    """
    indices = sorted({division.index_of(team) for team in certificate})
    if not indices:
        raise ValueError("Certificate must name at least one team.")

    total = sum(division.records[i].wins for i in indices)
    total += sum(division.records[i].against[j] for i, j in combinations(indices, 2))
    return Fraction(total, len(indices))


def analyze_team(
    division: Division, x: int, leader: Optional[int] = None
) -> EliminationResult:
    """Decides whether the team at index `x` can still finish first."""
    if leader is None:
        leader = division.leader_index()

    candidate = division.records[x]
    leader_record = division.records[leader]

    if candidate.max_possible_wins < leader_record.wins:
        logger.debug(
            f"{candidate.name} trivially eliminated: {candidate.max_possible_wins} "
            f"possible wins < {leader_record.wins} ({leader_record.name})"
        )
        return EliminationResult(
            team=candidate.name,
            status=EliminationStatus.ELIMINATED_TRIVIAL,
            certificate=frozenset({leader_record.name}),
        )

    elimination_network = build_elimination_network(division, x)
    solver = MaxFlowSolver(
        elimination_network.network,
        elimination_network.source,
        elimination_network.sink,
    )

    certificate = frozenset(
        division.records[team].name
        for team, vertex in elimination_network.team_vertices.items()
        if solver.in_source_side(vertex)
    )

    if not certificate:
        logger.debug(
            f"{candidate.name} alive: all {elimination_network.games_left} "
            f"remaining games can be distributed (max flow {solver.value})"
        )
        return EliminationResult(
            team=candidate.name, status=EliminationStatus.NOT_ELIMINATED
        )

    logger.debug(
        f"{candidate.name} eliminated by {sorted(certificate)}: max flow {solver.value} "
        f"< {elimination_network.games_left} games left"
    )
    return EliminationResult(
        team=candidate.name,
        status=EliminationStatus.ELIMINATED_BY_MIN_CUT,
        certificate=certificate,
    )


class EliminationAnalyzer:
    """Runs the elimination analysis for every team of a division.

    Results are computed once at construction and never change; analysing
    a reloaded division means building a new analyzer.
    """

    def __init__(self, division: Division):
        self.division = division

        leader = division.leader_index()
        self._results: Dict[str, EliminationResult] = {}
        for x, record in enumerate(division.records):
            self._results[record.name] = analyze_team(division, x, leader)

        eliminated = [r.team for r in self._results.values() if r.eliminated]
        logger.info(
            f"Analyzed {division.number_of_teams()} teams: "
            f"{len(eliminated)} eliminated {eliminated}"
        )

    def number_of_teams(self) -> int:
        return self.division.number_of_teams()

    def teams(self) -> List[str]:
        return self.division.teams()

    def wins(self, team: str) -> int:
        return self.division.wins(team)

    def losses(self, team: str) -> int:
        return self.division.losses(team)

    def remaining(self, team: str) -> int:
        return self.division.remaining(team)

    def against(self, team1: str, team2: str) -> int:
        return self.division.against(team1, team2)

    def result(self, team: str) -> EliminationResult:
        self.division.index_of(team)  # raises UnknownTeamError
        return self._results[team]

    def results(self) -> List[EliminationResult]:
        """Results in division order."""
        return [self._results[team] for team in self.division.teams()]

    def is_eliminated(self, team: str) -> bool:
        return self.result(team).eliminated

    def certificate_of_elimination(self, team: str) -> Optional[FrozenSet[str]]:
        """Subset of teams that eliminates `team`; None if it is not eliminated."""
        return self.result(team).certificate
