"""
Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, model_validator


# ============== Division Schemas ==============

class TeamPayload(BaseModel):
    """One team of a division."""
    name: str = Field(..., min_length=1, max_length=100, pattern=r"^\S+$")
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    remaining: int = Field(..., ge=0)
    against: List[int] = Field(default_factory=list)


class DivisionPayload(BaseModel):
    """A full division, teams in division order."""
    teams: List[TeamPayload] = Field(..., max_length=200)

    def to_rows(self):
        return [
            (team.name, team.wins, team.losses, team.remaining, team.against)
            for team in self.teams
        ]


class SavedDivisionCreate(BaseModel):
    """
    Save a division.

    Either give the teams inline or a source: a URL or the division text itself.
    """
    teams: Optional[List[TeamPayload]] = Field(None, max_length=200)
    source: Optional[str] = None
    nickname: Optional[str] = Field(None, max_length=255)

    @model_validator(mode="after")
    def check_one_input(self) -> "SavedDivisionCreate":
        if (self.teams is None) == (self.source is None):
            raise ValueError("Provide exactly one of 'teams' or 'source'")
        return self


class SavedDivisionResponse(BaseModel):
    """Saved division response."""
    id: int
    nickname: Optional[str]
    source: Optional[str]
    team_names: List[str]
    has_results: bool
    created_at: datetime


# ============== Elimination Schemas ==============

class TeamElimination(BaseModel):
    """Elimination status for a single team."""
    name: str
    wins: int
    losses: int
    remaining: int
    eliminated: bool
    certificate: Optional[List[str]] = None
    method: Optional[str] = None  # trivial, flow


class EliminationReportResponse(BaseModel):
    """Elimination status of every team in a division."""
    division_id: Optional[int] = None
    team_count: int
    eliminated_count: int
    teams: List[TeamElimination]
    cached: bool = False


# ============== Error Schemas ==============

class ErrorResponse(BaseModel):
    """API error response."""
    detail: str
    code: Optional[str] = None
