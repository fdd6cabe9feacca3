"""
Data models for the elimination solver.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


TRIVIAL = "trivial"
FLOW = "flow"


@dataclass(frozen=True)
class Team:
    """A team in the division with its record and remaining schedule."""

    index: int
    name: str
    wins: int = 0
    losses: int = 0
    remaining: int = 0
    against: Tuple[int, ...] = ()

    @property
    def max_wins(self) -> int:
        """Best possible final win total (wins every remaining game)."""
        return self.wins + self.remaining

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "remaining": self.remaining,
            "against": list(self.against)
        }


@dataclass(frozen=True)
class EliminationResult:
    """Elimination status of one team."""

    team: str
    eliminated: bool = False
    certificate: Tuple[str, ...] = ()
    method: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "team": self.team,
            "eliminated": self.eliminated,
            "certificate": list(self.certificate) if self.eliminated else None,
            "method": self.method
        }
