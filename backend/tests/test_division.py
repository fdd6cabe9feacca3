"""
Tests for the division team registry.
"""

import pytest

from baseball_elimination.solver import Division, Team, UnknownTeamError, MalformedInputError


class TestDivisionAccessors:
    """Lookups by name and by index."""

    def test_team_count_and_order(self, teams4):
        """Test team_count and name order."""
        assert teams4.team_count() == 4
        assert len(teams4) == 4
        assert teams4.teams() == ["Atlanta", "Philadelphia", "New_York", "Montreal"]

    def test_index_and_name_are_inverse(self, teams4):
        """Test that index_of and name are inverses."""
        for index, name in enumerate(teams4.teams()):
            assert teams4.index_of(name) == index
            assert teams4.name(index) == name

    def test_standings_by_name_and_index(self, teams4):
        """Test wins, losses, remaining and against lookups."""
        assert teams4.wins("Atlanta") == 83
        assert teams4.losses("Philadelphia") == 79
        assert teams4.remaining("New_York") == 6
        assert teams4.wins(3) == 77
        assert teams4.against("Atlanta", "New_York") == 6
        assert teams4.against(1, 3) == 2

    def test_schedule_is_symmetric(self, teams5):
        """Test against(i, j) == against(j, i)."""
        n = teams5.team_count()
        for i in range(n):
            for j in range(n):
                assert teams5.against(i, j) == teams5.against(j, i)

    def test_division_games_within_remaining(self, teams4, teams5):
        """teams4 only plays inside the division, teams5 has outside games too."""
        for i in range(4):
            assert sum(teams4.against(i, j) for j in range(4)) == teams4.remaining(i)
        for i in range(5):
            assert sum(teams5.against(i, j) for j in range(5)) <= teams5.remaining(i)

    def test_contains(self, teams4):
        """Test membership by name and index."""
        assert "Montreal" in teams4
        assert 0 in teams4
        assert "Boston" not in teams4
        assert 4 not in teams4

    @pytest.mark.parametrize("team", ["Boston", "", -1, 4, None, True])
    def test_unknown_team(self, teams4, team):
        """Test UnknownTeamError for bad names and indices."""
        with pytest.raises(UnknownTeamError):
            teams4.wins(team)

    def test_unknown_team_in_against(self, teams4):
        """Test UnknownTeamError for an unknown opponent."""
        with pytest.raises(UnknownTeamError):
            teams4.against("Atlanta", "Boston")

    def test_index_of_requires_name(self, teams4):
        """Test that index_of rejects an index."""
        with pytest.raises(UnknownTeamError):
            teams4.index_of(0)

    def test_unknown_team_error_is_key_error(self, teams4):
        """Test UnknownTeamError message and KeyError base."""
        with pytest.raises(KeyError, match="Unknown team: 'Boston'"):
            teams4.losses("Boston")

    def test_teams_are_immutable(self, teams4):
        """Test that teams are frozen."""
        with pytest.raises(AttributeError):
            teams4.team("Atlanta").wins = 100


class TestDivisionValidation:
    """Malformed divisions are rejected at construction."""

    def test_empty_division(self):
        """Test division with no teams."""
        assert Division.from_rows([]).team_count() == 0

    def test_negative_wins(self, teams4_rows):
        """Test that negative wins are rejected."""
        teams4_rows[0][1] = -1
        with pytest.raises(MalformedInputError, match="wins must be non-negative"):
            Division.from_rows(teams4_rows)

    def test_negative_against(self, teams4_rows):
        """Test that negative games against are rejected."""
        teams4_rows[1][4] = [1, 0, 0, -2]
        teams4_rows[3][4] = [1, -2, 0, 0]
        with pytest.raises(MalformedInputError, match="non-negative"):
            Division.from_rows(teams4_rows)

    def test_asymmetric_schedule(self, teams4_rows):
        """Test that an asymmetric schedule is rejected."""
        teams4_rows[0][4] = [0, 1, 5, 1]
        teams4_rows[0][3] = 7
        with pytest.raises(MalformedInputError, match="Asymmetric schedule"):
            Division.from_rows(teams4_rows)

    def test_games_against_self(self, teams4_rows):
        """Test that games against itself are rejected."""
        teams4_rows[3][4] = [1, 2, 0, 1]
        with pytest.raises(MalformedInputError, match="against itself"):
            Division.from_rows(teams4_rows)

    def test_division_games_exceed_remaining(self, teams4_rows):
        """Test that division games cannot exceed remaining games."""
        teams4_rows[0][3] = 7
        with pytest.raises(MalformedInputError, match="exceed"):
            Division.from_rows(teams4_rows)

    def test_wrong_row_length(self, teams4_rows):
        """Test that a short against row is rejected."""
        teams4_rows[2][4] = [6, 0, 0]
        with pytest.raises(MalformedInputError, match="expected 4"):
            Division.from_rows(teams4_rows)

    def test_duplicate_names(self, teams4_rows):
        """Test that duplicate team names are rejected."""
        teams4_rows[3][0] = "Atlanta"
        with pytest.raises(MalformedInputError, match="Duplicate"):
            Division.from_rows(teams4_rows)

    def test_non_integer_count(self, teams4_rows):
        """Test that a float count is rejected."""
        teams4_rows[0][2] = 71.5
        with pytest.raises(MalformedInputError, match="must be an integer"):
            Division.from_rows(teams4_rows)

    def test_index_mismatch(self):
        """Test that team indices must match positions."""
        team = Team(index=1, name="Solo", wins=1, losses=1, remaining=0, against=(0,))
        with pytest.raises(MalformedInputError, match="expected 0"):
            Division([team])
