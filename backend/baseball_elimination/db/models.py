"""
SQLAlchemy database models.
"""

from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class SavedDivision(Base):
    """A stored division snapshot and, once computed, its elimination report."""

    __tablename__ = "saved_divisions"

    id: Mapped[int] = mapped_column(primary_key=True)
    nickname: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    source: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    teams_json: Mapped[str] = mapped_column(Text, nullable=False)
    # Snapshots never change, so stored results never go stale
    results_json: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"<SavedDivision(id={self.id}, nickname={self.nickname})>"

    @property
    def has_results(self) -> bool:
        return self.results_json is not None
