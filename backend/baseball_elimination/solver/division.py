"""
Team registry for a division: static standings plus the name <-> index mapping.
"""

from typing import Dict, Iterable, List, Sequence, Tuple, Union

from .errors import MalformedInputError, UnknownTeamError
from .models import Team


TeamRef = Union[str, int]
TeamRow = Tuple[str, int, int, int, Sequence[int]]


def _check_count(team_name: str, label: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInputError(f"{team_name}: {label} must be an integer, got {value!r}")
    if value < 0:
        raise MalformedInputError(f"{team_name}: {label} must be non-negative, got {value}")


class Division:
    """
    Immutable set of teams in a division.

    Every accessor takes either a team name or a team index and raises
    UnknownTeamError for anything outside the registry.
    """

    def __init__(self, teams: Sequence[Team]):
        self._teams: Tuple[Team, ...] = tuple(teams)
        self._names: Dict[str, int] = {}

        n = len(self._teams)
        for position, team in enumerate(self._teams):
            if team.index != position:
                raise MalformedInputError(
                    f"Team {team.name!r} has index {team.index}, expected {position}"
                )
            if not team.name:
                raise MalformedInputError(f"Team at index {position} has no name")
            if team.name in self._names:
                raise MalformedInputError(f"Duplicate team name: {team.name!r}")
            self._names[team.name] = position

            _check_count(team.name, "wins", team.wins)
            _check_count(team.name, "losses", team.losses)
            _check_count(team.name, "remaining", team.remaining)
            if len(team.against) != n:
                raise MalformedInputError(
                    f"{team.name}: expected {n} remaining-against entries, got {len(team.against)}"
                )
            for games in team.against:
                _check_count(team.name, "remaining against", games)
            if team.against[position] != 0:
                raise MalformedInputError(f"{team.name}: cannot have games remaining against itself")
            # Games against teams outside the division may account for the difference
            if sum(team.against) > team.remaining:
                raise MalformedInputError(
                    f"{team.name}: {sum(team.against)} division games exceed "
                    f"{team.remaining} remaining games"
                )

        for i in range(n):
            for j in range(i + 1, n):
                if self._teams[i].against[j] != self._teams[j].against[i]:
                    raise MalformedInputError(
                        f"Asymmetric schedule: {self._teams[i].name} has {self._teams[i].against[j]} "
                        f"games left against {self._teams[j].name}, who has {self._teams[j].against[i]}"
                    )

    @classmethod
    def from_rows(cls, rows: Iterable[TeamRow]) -> "Division":
        """Build a division from (name, wins, losses, remaining, against) rows."""
        teams = []
        for index, (name, wins, losses, remaining, against) in enumerate(rows):
            teams.append(Team(
                index=index,
                name=name,
                wins=wins,
                losses=losses,
                remaining=remaining,
                against=tuple(against)
            ))
        return cls(teams)

    def __len__(self) -> int:
        return len(self._teams)

    def __contains__(self, team) -> bool:
        try:
            self._resolve(team)
        except UnknownTeamError:
            return False
        return True

    def _resolve(self, team: TeamRef) -> int:
        if isinstance(team, str):
            index = self._names.get(team)
            if index is None:
                raise UnknownTeamError(team)
            return index
        if isinstance(team, int) and not isinstance(team, bool) and 0 <= team < len(self._teams):
            return team
        raise UnknownTeamError(team)

    def team_count(self) -> int:
        return len(self._teams)

    def teams(self) -> List[str]:
        """Team names in index order."""
        return [team.name for team in self._teams]

    def team(self, team: TeamRef) -> Team:
        return self._teams[self._resolve(team)]

    def index_of(self, name: str) -> int:
        if not isinstance(name, str):
            raise UnknownTeamError(name)
        return self._resolve(name)

    def name(self, index: int) -> str:
        return self.team(index).name

    def wins(self, team: TeamRef) -> int:
        return self.team(team).wins

    def losses(self, team: TeamRef) -> int:
        return self.team(team).losses

    def remaining(self, team: TeamRef) -> int:
        return self.team(team).remaining

    def against(self, team1: TeamRef, team2: TeamRef) -> int:
        """Number of remaining games between team1 and team2."""
        return self.team(team1).against[self._resolve(team2)]
