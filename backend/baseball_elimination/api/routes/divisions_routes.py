"""
Saved division API routes.
"""

import asyncio
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import (
    DivisionPayload,
    SavedDivisionCreate,
    SavedDivisionResponse,
    EliminationReportResponse,
    TeamElimination,
    ErrorResponse
)
from .eliminations_routes import build_report, division_from_payload, team_elimination
from ...db import get_db, SavedDivision, SavedDivisionRepository, division_from_json
from ...loaders import RemoteDivisionLoader, DivisionNotFoundError, LoaderError, parse_division
from ...solver import Division, EliminationEngine, EliminationResult, MalformedInputError, UnknownTeamError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/divisions", tags=["divisions"])

NOT_FOUND_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Division or team not found"},
}

SAVE_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Division source not found"},
    422: {"model": ErrorResponse, "description": "Malformed division"},
    502: {"model": ErrorResponse, "description": "Division source could not be fetched"},
}


def saved_division_response(saved: SavedDivision, division: Division) -> SavedDivisionResponse:
    return SavedDivisionResponse(
        id=saved.id,
        nickname=saved.nickname,
        source=saved.source,
        team_names=division.teams(),
        has_results=saved.has_results,
        created_at=saved.created_at
    )


async def get_saved_or_404(division_pk: int, repo: SavedDivisionRepository) -> SavedDivision:
    saved = await repo.get_by_id(division_pk)
    if saved is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Division {division_pk} not found"
        )
    return saved


async def division_from_source(source: str) -> Division:
    """Load a division from a URL or from inline division text."""
    if source.lower().startswith(("http://", "https://")):
        return await RemoteDivisionLoader().load(source)
    return parse_division(source)


@router.post("", response_model=SavedDivisionResponse, status_code=status.HTTP_201_CREATED, responses=SAVE_RESPONSES)
async def save_division(
    data: SavedDivisionCreate,
    db: AsyncSession = Depends(get_db)
) -> SavedDivisionResponse:
    """
    Save a division snapshot.

    The division is validated before anything is stored.
    """
    source = None
    try:
        if data.teams is not None:
            division = division_from_payload(DivisionPayload(teams=data.teams))
        else:
            division = await division_from_source(data.source)
            if data.source.lower().startswith(("http://", "https://")):
                source = data.source
    except MalformedInputError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )
    except DivisionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except LoaderError as e:
        logger.error("Failed to fetch division from %s: %s", data.source, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error fetching division: {str(e)}"
        )

    repo = SavedDivisionRepository(db)
    saved = await repo.create(division, nickname=data.nickname, source=source)
    logger.info("Saved division %d with %d teams", saved.id, division.team_count())
    return saved_division_response(saved, division)


@router.get("", response_model=List[SavedDivisionResponse])
async def list_divisions(db: AsyncSession = Depends(get_db)) -> List[SavedDivisionResponse]:
    """
    Get all saved divisions.
    """
    repo = SavedDivisionRepository(db)
    return [
        saved_division_response(saved, division_from_json(saved.teams_json))
        for saved in await repo.list_all()
    ]


@router.get("/{division_pk}", response_model=SavedDivisionResponse, responses=NOT_FOUND_RESPONSES)
async def get_division(division_pk: int, db: AsyncSession = Depends(get_db)) -> SavedDivisionResponse:
    repo = SavedDivisionRepository(db)
    saved = await get_saved_or_404(division_pk, repo)
    return saved_division_response(saved, division_from_json(saved.teams_json))


@router.delete("/{division_pk}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSES)
async def delete_division(division_pk: int, db: AsyncSession = Depends(get_db)) -> None:
    """
    Delete a saved division and its stored report.
    """
    repo = SavedDivisionRepository(db)
    saved = await get_saved_or_404(division_pk, repo)
    await repo.delete(saved)


@router.get("/{division_pk}/eliminations", response_model=EliminationReportResponse, responses=NOT_FOUND_RESPONSES)
async def get_division_eliminations(
    division_pk: int,
    db: AsyncSession = Depends(get_db)
) -> EliminationReportResponse:
    """
    Get the elimination report for a saved division.

    Computed on the first request and served from the database afterwards.
    """
    repo = SavedDivisionRepository(db)
    saved = await get_saved_or_404(division_pk, repo)
    division = division_from_json(saved.teams_json)

    stored = repo.get_results(saved)
    if stored is not None:
        results = [
            EliminationResult(
                team=row["team"],
                eliminated=row["eliminated"],
                certificate=tuple(row["certificate"] or ()),
                method=row["method"]
            )
            for row in stored
        ]
        return build_report(division, results, division_id=saved.id, cached=True)

    engine = EliminationEngine(division)
    results = await asyncio.to_thread(engine.results)
    await repo.store_results(saved, [result.to_dict() for result in results])
    logger.info("Computed eliminations for division %d", saved.id)
    return build_report(division, results, division_id=saved.id)


@router.get("/{division_pk}/teams/{team_name}", response_model=TeamElimination, responses=NOT_FOUND_RESPONSES)
async def get_team_elimination(
    division_pk: int,
    team_name: str,
    db: AsyncSession = Depends(get_db)
) -> TeamElimination:
    """
    Get one team's elimination status.

    Only that team's network is solved.
    """
    repo = SavedDivisionRepository(db)
    saved = await get_saved_or_404(division_pk, repo)
    division = division_from_json(saved.teams_json)

    try:
        result = await asyncio.to_thread(EliminationEngine(division).result, team_name)
    except UnknownTeamError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    return team_elimination(division, result)
