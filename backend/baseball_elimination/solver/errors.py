"""
Exceptions raised by the elimination solver.
"""


class EliminationError(Exception):
    """Base class for all solver errors."""
    pass


class UnknownTeamError(EliminationError, KeyError):
    """Raised when a team name or index is not part of the division."""

    def __init__(self, team):
        self.team = team
        super().__init__(f"Unknown team: {team!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class MalformedInputError(EliminationError, ValueError):
    """Raised when division data is inconsistent (negative counts, asymmetric schedule, ...)."""
    pass


class InvalidNetworkError(EliminationError):
    """Raised when a flow network violates its own invariants."""
    pass
