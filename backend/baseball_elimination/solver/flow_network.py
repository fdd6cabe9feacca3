"""
Capacitated flow network and the elimination network builder.

For a candidate team t the network asks whether every remaining game among
the other teams can be assigned a winner without any of them passing t's best
possible final win total:

    source -> game(i, j)   capacity = games left between i and j
    game(i, j) -> i, j     unbounded
    i -> sink              capacity = wins(t) + remaining(t) - wins(i)

The assignment exists iff the max flow saturates every source edge.
"""

from dataclasses import dataclass
from typing import Iterator, List

from .division import Division, TeamRef
from .errors import InvalidNetworkError


class FlowEdge:
    """Directed edge v -> w carrying an integer flow bounded by its capacity."""

    __slots__ = ("v", "w", "capacity", "flow")

    def __init__(self, v: int, w: int, capacity: int):
        if v < 0 or w < 0:
            raise InvalidNetworkError(f"Vertex indices must be non-negative: {v} -> {w}")
        if capacity < 0:
            raise InvalidNetworkError(f"Edge {v} -> {w} has negative capacity {capacity}")
        self.v = v
        self.w = w
        self.capacity = capacity
        self.flow = 0

    def other(self, vertex: int) -> int:
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise InvalidNetworkError(f"Vertex {vertex} is not an endpoint of {self}")

    def residual_capacity_to(self, vertex: int) -> int:
        """Forward edges have capacity - flow left, backward edges can undo flow."""
        if vertex == self.v:
            return self.flow
        if vertex == self.w:
            return self.capacity - self.flow
        raise InvalidNetworkError(f"Vertex {vertex} is not an endpoint of {self}")

    def add_residual_flow_to(self, vertex: int, delta: int) -> None:
        if vertex == self.v:
            self.flow -= delta
        elif vertex == self.w:
            self.flow += delta
        else:
            raise InvalidNetworkError(f"Vertex {vertex} is not an endpoint of {self}")
        if self.flow < 0 or self.flow > self.capacity:
            raise InvalidNetworkError(f"Flow {self.flow} out of bounds on {self}")

    def __repr__(self) -> str:
        return f"<FlowEdge({self.v}->{self.w}, {self.flow}/{self.capacity})>"


class FlowNetwork:
    """Directed graph over vertices 0..vertex_count-1; each edge is listed at both endpoints."""

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise InvalidNetworkError("Number of vertices must be non-negative")
        self.vertex_count = vertex_count
        self._adj: List[List[FlowEdge]] = [[] for _ in range(vertex_count)]
        self.edge_count = 0

    def validate_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise InvalidNetworkError(
                f"Vertex {vertex} is not between 0 and {self.vertex_count - 1}"
            )

    def add_edge(self, edge: FlowEdge) -> None:
        self.validate_vertex(edge.v)
        self.validate_vertex(edge.w)
        self._adj[edge.v].append(edge)
        self._adj[edge.w].append(edge)
        self.edge_count += 1

    def adj(self, vertex: int) -> List[FlowEdge]:
        """Edges incident to vertex, both outgoing and incoming."""
        self.validate_vertex(vertex)
        return self._adj[vertex]

    def edges(self) -> Iterator[FlowEdge]:
        """Every edge exactly once."""
        for vertex, incident in enumerate(self._adj):
            for edge in incident:
                if edge.v == vertex:
                    yield edge


@dataclass
class NetworkSetup:
    """A built elimination network and the total it must carry."""

    network: FlowNetwork
    source: int
    sink: int
    total_other_remaining: int
    game_vertices: int


def build_network(division: Division, team: TeamRef) -> NetworkSetup:
    """
    Build the elimination network for a candidate team.

    Team vertices keep their division index (the candidate stays isolated),
    the source and sink follow, then one game vertex per pair of other teams.
    """
    t = division.team(team)
    n = division.team_count()
    source = n
    sink = n + 1

    pairs = [
        (i, j)
        for i in range(n) if i != t.index
        for j in range(i + 1, n) if j != t.index
    ]
    game_capacity = [division.against(i, j) for i, j in pairs]
    sink_capacity = {
        i: max(0, t.max_wins - division.wins(i))
        for i in range(n) if i != t.index
    }

    total_other_remaining = sum(game_capacity)
    # Larger than any flow the finite edges could ever carry
    unbounded = total_other_remaining + sum(sink_capacity.values()) + 1

    network = FlowNetwork(n + 2 + len(pairs))
    for offset, ((i, j), games) in enumerate(zip(pairs, game_capacity)):
        game_vertex = n + 2 + offset
        network.add_edge(FlowEdge(source, game_vertex, games))
        network.add_edge(FlowEdge(game_vertex, i, unbounded))
        network.add_edge(FlowEdge(game_vertex, j, unbounded))
    for i, capacity in sink_capacity.items():
        network.add_edge(FlowEdge(i, sink, capacity))

    return NetworkSetup(
        network=network,
        source=source,
        sink=sink,
        total_other_remaining=total_other_remaining,
        game_vertices=len(pairs)
    )
