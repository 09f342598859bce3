import math
from typing import Iterator, List

# Residual capacities at or below this are treated as zero
EPSILON = 1e-9

INFINITE_CAPACITY = math.inf


class MalformedNetworkError(Exception):
    """Raised when a flow network violates its structural contract."""

    pass


class FlowEdge:
    """A capacitated directed edge tail -> head carrying a flow."""

    __slots__ = ("tail", "head", "capacity", "flow")

    def __init__(self, tail: int, head: int, capacity: float) -> None:
        if capacity < 0 or (isinstance(capacity, float) and math.isnan(capacity)):
            raise MalformedNetworkError(
                f"Edge {tail}->{head} has invalid capacity {capacity}"
            )
        self.tail = tail
        self.head = head
        self.capacity = capacity
        self.flow = 0

    def other(self, vertex: int) -> int:
        if vertex == self.tail:
            return self.head
        if vertex == self.head:
            return self.tail
        raise MalformedNetworkError(f"Vertex {vertex} is not an endpoint of {self!r}")

    def residual_capacity_to(self, vertex: int) -> float:
        """Residual capacity in the direction of `vertex`."""
        if vertex == self.tail:
            return self.flow  # backward edge
        if vertex == self.head:
            return self.capacity - self.flow  # forward edge
        raise MalformedNetworkError(f"Vertex {vertex} is not an endpoint of {self!r}")

    def add_residual_flow_to(self, vertex: int, delta: float) -> None:
        if vertex == self.tail:
            self.flow -= delta
        elif vertex == self.head:
            self.flow += delta
        else:
            raise MalformedNetworkError(
                f"Vertex {vertex} is not an endpoint of {self!r}"
            )

        # Snap round-off back onto the bounds
        if abs(self.flow) <= EPSILON:
            self.flow = 0
        if abs(self.flow - self.capacity) <= EPSILON:
            self.flow = self.capacity

    def __repr__(self):
        return f"FlowEdge({self.tail}->{self.head}, flow={self.flow}/{self.capacity})"


class FlowNetwork:
    """Directed capacitated graph over vertices 0..V-1.

    Every edge is stored in the adjacency list of both endpoints so the
    residual graph can be walked in either direction.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise MalformedNetworkError("Number of vertices must be non-negative")
        self._adjacency: List[List[FlowEdge]] = [[] for _ in range(vertex_count)]
        self._edge_count = 0

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def validate_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise MalformedNetworkError(
                f"Vertex {vertex} is not between 0 and {len(self._adjacency) - 1}"
            )

    def add_edge(self, tail: int, head: int, capacity: float) -> FlowEdge:
        self.validate_vertex(tail)
        self.validate_vertex(head)
        if tail == head:
            raise MalformedNetworkError(f"Self-loop on vertex {tail}")
        edge = FlowEdge(tail, head, capacity)
        self._adjacency[tail].append(edge)
        self._adjacency[head].append(edge)
        self._edge_count += 1
        return edge

    def adjacent(self, vertex: int) -> List[FlowEdge]:
        """Edges incident to `vertex`, in both directions."""
        self.validate_vertex(vertex)
        return self._adjacency[vertex]

    def edges(self) -> Iterator[FlowEdge]:
        """Every edge exactly once, in insertion order per tail vertex."""
        for vertex, incident in enumerate(self._adjacency):
            for edge in incident:
                if edge.tail == vertex:
                    yield edge
