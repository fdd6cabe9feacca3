"""
Edmonds-Karp maximum flow / minimum cut.
"""

from collections import deque
from typing import List, Optional

from .errors import InvalidNetworkError
from .flow_network import FlowEdge, FlowNetwork


class FordFulkerson:
    """
    Maximum flow from source to sink using shortest augmenting paths.

    The flow is computed on construction and written into the network's edges.
    Capacities are integers, so every augmentation raises the value by at
    least one and the loop terminates; breadth-first search bounds the number
    of augmentations by O(V * E).
    """

    def __init__(self, network: FlowNetwork, source: int, sink: int):
        network.validate_vertex(source)
        network.validate_vertex(sink)
        if source == sink:
            raise InvalidNetworkError("Source equals sink")
        if not self._is_feasible(network, source, sink):
            raise InvalidNetworkError("Initial flow is infeasible")

        self._network = network
        self._source = source
        self._sink = sink
        self._value = self._excess(network, sink)
        self._marked: List[bool] = []
        self._edge_to: List[Optional[FlowEdge]] = []

        while self._has_augmenting_path():
            bottleneck = None
            v = sink
            while v != source:
                edge = self._edge_to[v]
                residual = edge.residual_capacity_to(v)
                bottleneck = residual if bottleneck is None else min(bottleneck, residual)
                v = edge.other(v)

            v = sink
            while v != source:
                edge = self._edge_to[v]
                edge.add_residual_flow_to(v, bottleneck)
                v = edge.other(v)

            self._value += bottleneck

    def value(self) -> int:
        """Value of the maximum flow."""
        return self._value

    def in_cut(self, vertex: int) -> bool:
        """True iff vertex is on the source side of the minimum cut."""
        self._network.validate_vertex(vertex)
        return self._marked[vertex]

    def _has_augmenting_path(self) -> bool:
        """Breadth-first search in the residual graph; leaves reachability in _marked."""
        vertex_count = self._network.vertex_count
        self._marked = [False] * vertex_count
        self._edge_to = [None] * vertex_count

        queue = deque([self._source])
        self._marked[self._source] = True
        while queue and not self._marked[self._sink]:
            v = queue.popleft()
            for edge in self._network.adj(v):
                w = edge.other(v)
                if edge.residual_capacity_to(w) > 0 and not self._marked[w]:
                    self._edge_to[w] = edge
                    self._marked[w] = True
                    queue.append(w)

        return self._marked[self._sink]

    @staticmethod
    def _excess(network: FlowNetwork, vertex: int) -> int:
        excess = 0
        for edge in network.adj(vertex):
            if vertex == edge.v:
                excess -= edge.flow
            else:
                excess += edge.flow
        return excess

    @classmethod
    def _is_feasible(cls, network: FlowNetwork, source: int, sink: int) -> bool:
        """Capacity and conservation constraints hold for any flow already on the network."""
        for edge in network.edges():
            if edge.flow < 0 or edge.flow > edge.capacity:
                return False
        for vertex in range(network.vertex_count):
            if vertex not in (source, sink) and cls._excess(network, vertex) != 0:
                return False
        return cls._excess(network, source) == -cls._excess(network, sink)
