"""
Repository classes for database operations.
"""

import json
from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import SavedDivision
from ..solver import Division, Team


def division_from_json(teams_json: str) -> Division:
    """Rebuild a division from its stored team list."""
    rows = json.loads(teams_json)
    return Division.from_rows(
        (row["name"], row["wins"], row["losses"], row["remaining"], row["against"])
        for row in rows
    )


class SavedDivisionRepository:
    """Repository for saved division operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        division: Division,
        nickname: Optional[str] = None,
        source: Optional[str] = None
    ) -> SavedDivision:
        """Store a division snapshot."""
        teams: List[Team] = [division.team(i) for i in range(division.team_count())]
        saved = SavedDivision(
            nickname=nickname,
            source=source,
            teams_json=json.dumps([team.to_dict() for team in teams])
        )
        self.session.add(saved)
        await self.session.flush()
        await self.session.refresh(saved)
        return saved

    async def get_by_id(self, division_pk: int) -> Optional[SavedDivision]:
        """Get a saved division by primary key."""
        result = await self.session.execute(
            select(SavedDivision).where(SavedDivision.id == division_pk)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[SavedDivision]:
        """Get all saved divisions, newest first."""
        result = await self.session.execute(
            select(SavedDivision).order_by(SavedDivision.created_at.desc(), SavedDivision.id.desc())
        )
        return list(result.scalars().all())

    def get_results(self, saved: SavedDivision) -> Optional[List[dict]]:
        """Stored elimination results, or None if not computed yet."""
        if saved.results_json is None:
            return None
        return json.loads(saved.results_json)

    async def store_results(self, saved: SavedDivision, results: List[dict]) -> SavedDivision:
        """Persist the elimination results of a division."""
        saved.results_json = json.dumps(results)
        await self.session.flush()
        return saved

    async def delete(self, saved: SavedDivision) -> None:
        """Delete a saved division."""
        await self.session.delete(saved)
