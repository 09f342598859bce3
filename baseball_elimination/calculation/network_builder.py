from itertools import combinations
from typing import Dict, Tuple

from loguru import logger

from baseball_elimination.config.settings import settings
from baseball_elimination.flow.network import FlowNetwork, INFINITE_CAPACITY
from baseball_elimination.models.division import Division


class EliminationNetwork:
    """Flow network asking whether every other team can stay at or below
    the candidate's best possible win total.

    Vertex layout: one vertex per other team, then one per pair of other
    teams, then the source and the sink. The candidate itself has no vertex.
    """

    def __init__(
        self,
        candidate: int,
        network: FlowNetwork,
        source: int,
        sink: int,
        team_vertices: Dict[int, int],
        game_vertices: Dict[Tuple[int, int], int],
    ):
        self.candidate = candidate
        self.network = network
        self.source = source
        self.sink = sink
        self.team_vertices = team_vertices  # team index -> vertex
        self.game_vertices = game_vertices  # (i, j) with i < j -> vertex

    @property
    def games_left(self) -> int:
        """Games left among the other teams, i.e. the capacity out of the source."""
        return int(
            sum(edge.capacity for edge in self.network.adjacent(self.source))
        )

    def __repr__(self):
        return (
            f"EliminationNetwork(candidate={self.candidate}, "
            f"vertices={self.network.vertex_count}, edges={self.network.edge_count})"
        )


def build_elimination_network(division: Division, x: int) -> EliminationNetwork:
    """
    Builds the elimination flow network for the team at index `x`.

    Edges:
        source -> game(i, j)        capacity g[i][j]
        game(i, j) -> team(i), team(j)  infinite capacity
        team(i) -> sink             capacity max(0, w[x] + r[x] - w[i])

    Args:
        division: The division snapshot.
        x: Index of the candidate team.

    Returns:
        An EliminationNetwork with the vertex bookkeeping needed to read
        the minimum cut back as team indices.
    """
    n = division.number_of_teams()
    if not 0 <= x < n:
        raise IndexError(f"Team index {x} is not between 0 and {n - 1}")

    others = [i for i in range(n) if i != x]
    pairs = list(combinations(others, 2))

    vertex_count = len(others) + len(pairs) + 2
    source = vertex_count - 2
    sink = vertex_count - 1
    network = FlowNetwork(vertex_count)

    best = division.records[x].max_possible_wins

    team_vertices: Dict[int, int] = {}
    for vertex, team in enumerate(others):
        team_vertices[team] = vertex
        network.add_edge(vertex, sink, max(0, best - division.records[team].wins))

    game_vertices: Dict[Tuple[int, int], int] = {}
    for offset, (i, j) in enumerate(pairs):
        vertex = len(others) + offset
        game_vertices[(i, j)] = vertex
        network.add_edge(source, vertex, division.records[i].against[j])
        network.add_edge(vertex, team_vertices[i], INFINITE_CAPACITY)
        network.add_edge(vertex, team_vertices[j], INFINITE_CAPACITY)

    if settings.show_network_stats:
        logger.debug(
            f"Built network for {division.records[x].name}: "
            f"{network.vertex_count} vertices, {network.edge_count} edges"
        )

    return EliminationNetwork(x, network, source, sink, team_vertices, game_vertices)
