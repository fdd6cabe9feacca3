"""
Stateless elimination API routes.
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from ..schemas import DivisionPayload, EliminationReportResponse, TeamElimination, ErrorResponse
from ...solver import Division, EliminationEngine, EliminationResult, MalformedInputError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eliminations", tags=["eliminations"])

INVALID_DIVISION_RESPONSES = {
    422: {"model": ErrorResponse, "description": "Malformed division"},
}


def team_elimination(division: Division, result: EliminationResult) -> TeamElimination:
    """Combine a team's standings with its elimination result."""
    team = division.team(result.team)
    return TeamElimination(
        name=team.name,
        wins=team.wins,
        losses=team.losses,
        remaining=team.remaining,
        eliminated=result.eliminated,
        certificate=list(result.certificate) if result.eliminated else None,
        method=result.method
    )


def build_report(
    division: Division,
    results: List[EliminationResult],
    division_id: Optional[int] = None,
    cached: bool = False
) -> EliminationReportResponse:
    teams = [team_elimination(division, result) for result in results]
    return EliminationReportResponse(
        division_id=division_id,
        team_count=division.team_count(),
        eliminated_count=sum(1 for team in teams if team.eliminated),
        teams=teams,
        cached=cached
    )


def division_from_payload(payload: DivisionPayload) -> Division:
    try:
        return Division.from_rows(payload.to_rows())
    except MalformedInputError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )


@router.post("", response_model=EliminationReportResponse, responses=INVALID_DIVISION_RESPONSES)
async def compute_eliminations(payload: DivisionPayload) -> EliminationReportResponse:
    """
    Determine which teams of a division are mathematically eliminated.

    Nothing is stored; use /divisions to keep a division and its report.
    """
    division = division_from_payload(payload)
    engine = EliminationEngine(division)
    results = await asyncio.to_thread(engine.results)
    logger.info(
        "Computed eliminations for %d teams (%d eliminated)",
        division.team_count(), sum(1 for r in results if r.eliminated)
    )
    return build_report(division, results)
