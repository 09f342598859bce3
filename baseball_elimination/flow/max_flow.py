from collections import deque
from typing import Deque, List, Optional

from loguru import logger

from .network import EPSILON, FlowEdge, FlowNetwork, MalformedNetworkError


class MaxFlowSolver:
    """Maximum s-t flow and minimum cut by shortest augmenting paths.

    Each augmentation follows a BFS-shortest path in the residual graph
    (Edmonds-Karp), which bounds the number of augmentations by O(V * E)
    regardless of capacity values. The flow is pushed into the edges of the
    given network, so a network must not be shared between two solvers.
    Flows start as integers, so integer capacities are handled exactly at
    any size; only real-valued capacities go through float arithmetic.

    After construction:
        value                -- value of the maximum flow
        in_source_side(v)    -- v is reachable from the source in the final
                                residual graph, i.e. on the source side of
                                the minimum cut
    """

    def __init__(self, network: FlowNetwork, source: int, sink: int) -> None:
        network.validate_vertex(source)
        network.validate_vertex(sink)
        if source == sink:
            raise MalformedNetworkError("Source equals sink")

        self.network = network
        self.source = source
        self.sink = sink
        self.augmentations = 0
        self.value = 0

        self._marked: List[bool] = []
        self._edge_to: List[Optional[FlowEdge]] = []

        while self._has_augmenting_path():
            bottleneck = self._bottleneck()
            if bottleneck == float("inf"):
                raise MalformedNetworkError(
                    "Source and sink are joined by a path of infinite capacity"
                )
            v = sink
            while v != source:
                edge = self._edge_to[v]
                edge.add_residual_flow_to(v, bottleneck)
                v = edge.other(v)
            self.value += bottleneck
            self.augmentations += 1

        logger.trace(
            f"Max flow {self.value} found after {self.augmentations} augmentations "
            f"({network.vertex_count} vertices, {network.edge_count} edges)"
        )

    def _has_augmenting_path(self) -> bool:
        """BFS over residual edges; leaves `_marked` as the source-side set."""
        vertex_count = self.network.vertex_count
        self._marked = [False] * vertex_count
        self._edge_to = [None] * vertex_count

        queue: Deque[int] = deque([self.source])
        self._marked[self.source] = True
        while queue and not self._marked[self.sink]:
            v = queue.popleft()
            for edge in self.network.adjacent(v):
                w = edge.other(v)
                if not self._marked[w] and edge.residual_capacity_to(w) > EPSILON:
                    self._edge_to[w] = edge
                    self._marked[w] = True
                    queue.append(w)

        return self._marked[self.sink]

    def _bottleneck(self) -> float:
        bottleneck = float("inf")
        v = self.sink
        while v != self.source:
            edge = self._edge_to[v]
            bottleneck = min(bottleneck, edge.residual_capacity_to(v))
            v = edge.other(v)
        return bottleneck

    def in_source_side(self, vertex: int) -> bool:
        self.network.validate_vertex(vertex)
        return self._marked[vertex]

    def cut_capacity(self) -> float:
        """Total capacity of edges leaving the source side of the cut."""
        return sum(
            edge.capacity
            for edge in self.network.edges()
            if self._marked[edge.tail] and not self._marked[edge.head]
        )

    def excess(self, vertex: int) -> float:
        """Inflow minus outflow at `vertex`."""
        excess = 0
        for edge in self.network.adjacent(vertex):
            if vertex == edge.tail:
                excess -= edge.flow
            else:
                excess += edge.flow
        return excess

    def is_optimal(self) -> bool:
        """Consistency checker for tests: feasibility of the flow and that it matches the cut."""
        for edge in self.network.edges():
            if edge.flow < -EPSILON or edge.flow > edge.capacity + EPSILON:
                logger.warning(f"Capacity constraint violated on {edge!r}")
                return False

        if abs(self.value + self.excess(self.source)) > EPSILON:
            logger.warning(f"Excess at source {self.source} does not match max flow")
            return False
        if abs(self.value - self.excess(self.sink)) > EPSILON:
            logger.warning(f"Excess at sink {self.sink} does not match max flow")
            return False
        for v in range(self.network.vertex_count):
            if v in (self.source, self.sink):
                continue
            if abs(self.excess(v)) > EPSILON:
                logger.warning(f"Net flow out of vertex {v} is not zero")
                return False

        if not self.in_source_side(self.source) or self.in_source_side(self.sink):
            logger.warning("Source/sink are on the wrong side of the min cut")
            return False
        if abs(self.value - self.cut_capacity()) > EPSILON:
            logger.warning(
                f"Max flow {self.value} differs from min cut {self.cut_capacity()}"
            )
            return False
        return True
