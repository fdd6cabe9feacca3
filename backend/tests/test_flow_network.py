"""
Tests for the elimination network builder.
"""

from baseball_elimination.solver import Division, FordFulkerson, build_network


def sink_capacities(setup):
    return {
        edge.v: edge.capacity
        for edge in setup.network.adj(setup.sink)
        if edge.w == setup.sink
    }


class TestBuildNetwork:
    """Shape and capacities of the network built for a candidate team."""

    def test_vertex_layout(self, teams4):
        """Test source, sink and game vertex numbering."""
        setup = build_network(teams4, "Philadelphia")
        # 4 team vertices, source, sink and one game vertex per pair of the other 3 teams
        assert setup.source == 4
        assert setup.sink == 5
        assert setup.game_vertices == 3
        assert setup.network.vertex_count == 9

    def test_candidate_is_isolated(self, teams4):
        """Test that the candidate vertex has no edges."""
        setup = build_network(teams4, "Philadelphia")
        assert setup.network.adj(1) == []

    def test_total_other_remaining(self, teams4, teams5):
        """Test total games among the other teams."""
        assert build_network(teams4, "Philadelphia").total_other_remaining == 7
        assert build_network(teams5, "Detroit").total_other_remaining == 27
        assert build_network(teams5, "New_York").total_other_remaining == 22

    def test_source_edges(self, teams4):
        """Test source edge capacities."""
        setup = build_network(teams4, "Philadelphia")
        source_edges = [e for e in setup.network.adj(setup.source)]
        assert sorted(e.capacity for e in source_edges) == [0, 1, 6]
        assert all(e.v == setup.source for e in source_edges)

    def test_sink_capacities(self, teams4):
        """Test sink edge capacities."""
        setup = build_network(teams4, "Philadelphia")
        # Philadelphia can reach 83 wins
        assert sink_capacities(setup) == {0: 0, 2: 5, 3: 6}

    def test_sink_capacities_clamped(self, teams4):
        """Test that sink capacities never go negative."""
        setup = build_network(teams4, "Montreal")
        # Montreal can reach 80, Atlanta already has 83
        assert sink_capacities(setup)[0] == 0

    def test_game_edges_unbounded(self, teams4):
        """Test that game edges exceed every finite capacity."""
        setup = build_network(teams4, "Philadelphia")
        finite = sum(e.capacity for e in setup.network.edges() if e.v == setup.source or e.w == setup.sink)
        game_edges = [
            e for e in setup.network.edges()
            if e.v >= setup.sink + 1
        ]
        assert len(game_edges) == 6
        assert all(e.capacity == finite + 1 for e in game_edges)

    def test_max_flow_bounded_by_source_capacity(self, teams4, teams5):
        """Test max flow never exceeds total source capacity."""
        for division in (teams4, teams5):
            for team in division.teams():
                setup = build_network(division, team)
                maxflow = FordFulkerson(setup.network, setup.source, setup.sink)
                assert maxflow.value() <= setup.total_other_remaining

    def test_single_team(self):
        """Test network for a one-team division."""
        division = Division.from_rows([("Solo", 10, 5, 3, [0])])
        setup = build_network(division, "Solo")
        assert setup.game_vertices == 0
        assert setup.total_other_remaining == 0
        assert FordFulkerson(setup.network, setup.source, setup.sink).value() == 0
