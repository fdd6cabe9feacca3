"""
Abstract base class for division loaders and the division text format.

A division file looks like:

    4
    Atlanta       83 71  8  0 1 6 1
    Philadelphia  80 79  3  1 0 0 2
    New_York      78 78  6  6 0 0 0
    Montreal      77 82  3  1 2 0 0

The first line is the number of teams; each following line holds a team
name, its wins, losses and remaining games, then the games left against
every team of the division in file order.
"""

from abc import ABC, abstractmethod
from typing import List

from ..solver import Division, MalformedInputError
from ..solver.division import TeamRow


def parse_division(text: str) -> Division:
    """
    Parse the division text format.

    Raises:
        MalformedInputError: If the text is not a well-formed division
    """
    lines = [line.split() for line in text.splitlines() if line.strip()]
    if not lines:
        raise MalformedInputError("Division data is empty")

    header = lines[0]
    if len(header) != 1:
        raise MalformedInputError(f"First line must hold the number of teams, got {' '.join(header)!r}")
    try:
        n = int(header[0])
    except ValueError:
        raise MalformedInputError(f"Invalid number of teams: {header[0]!r}")
    if n < 0:
        raise MalformedInputError(f"Invalid number of teams: {n}")

    team_lines = lines[1:]
    if len(team_lines) != n:
        raise MalformedInputError(f"Expected {n} team lines, got {len(team_lines)}")

    rows: List[TeamRow] = []
    for fields in team_lines:
        if len(fields) != n + 4:
            raise MalformedInputError(
                f"Line for {fields[0]} has {len(fields)} fields, expected {n + 4}"
            )
        try:
            numbers = [int(value) for value in fields[1:]]
        except ValueError:
            raise MalformedInputError(f"Non-integer count on line for {fields[0]}")
        wins, losses, remaining = numbers[:3]
        rows.append((fields[0], wins, losses, remaining, numbers[3:]))

    return Division.from_rows(rows)


class DivisionLoader(ABC):
    """Abstract base class for division sources."""

    @property
    @abstractmethod
    def source_type(self) -> str:
        """Return the source type (e.g., 'file', 'url')."""
        pass

    @abstractmethod
    async def fetch_text(self, source: str) -> str:
        """
        Fetch the raw division text.

        Args:
            source: Where to read the division from

        Returns:
            The division in text format

        Raises:
            DivisionNotFoundError: If the source doesn't exist
            LoaderError: If the source can't be read
        """
        pass

    async def load(self, source: str) -> Division:
        """
        Load and validate a division.

        Raises:
            DivisionNotFoundError: If the source doesn't exist
            LoaderError: If the source can't be read
            MalformedInputError: If the data is not a valid division
        """
        return parse_division(await self.fetch_text(source))


class DivisionNotFoundError(Exception):
    """Raised when a division source cannot be found."""
    pass


class LoaderError(Exception):
    """Raised when a division source cannot be read."""
    pass
