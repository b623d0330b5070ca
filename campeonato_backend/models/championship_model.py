# championship_model.py
# Defines the Championship model (competition rules) and Group (sub-tables inside a championship).

from typing import Optional, List
from datetime import date
from enum import Enum
from sqlmodel import SQLModel, Field, JSON, Column

from campeonato_backend.core.championship_config import (
    DEFAULT_POINTS,
    DEFAULT_TIEBREAKERS,
    DEFAULT_ZONE_CONFIG,
)


class ChampionshipStatus(str, Enum):
    """Publication state of a championship"""
    DRAFT = "draft"           # Still being set up by the organizer
    PUBLISHED = "published"   # Visible on the public pages
    CLOSED = "closed"         # Season over, table frozen


class Championship(SQLModel, table=True):
    """
    A competition run by an organization.
    Holds the scoring rules, tiebreaker order and classification zones
    that every standings table of this championship is computed with.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    slug: str = Field(index=True)
    season: Optional[str] = None
    category: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    status: ChampionshipStatus = Field(default=ChampionshipStatus.DRAFT)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    # Rules & regulations
    points_win: int = Field(default=DEFAULT_POINTS["win"])
    points_draw: int = Field(default=DEFAULT_POINTS["draw"])
    points_loss: int = Field(default=DEFAULT_POINTS["loss"])
    tiebreakers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TIEBREAKERS),
        sa_column=Column(JSON),
    )

    # Classification zones (sizes, counted from the top / bottom of each table; negative sizes read as 0)
    zone_mode: str = Field(default=DEFAULT_ZONE_CONFIG["mode"])
    zone_promotion: int = Field(default=DEFAULT_ZONE_CONFIG["promotion"])
    zone_relegation: int = Field(default=DEFAULT_ZONE_CONFIG["relegation"])
    zone_gold: int = Field(default=DEFAULT_ZONE_CONFIG["gold"])
    zone_silver: int = Field(default=DEFAULT_ZONE_CONFIG["silver"])
    zone_bronze: int = Field(default=DEFAULT_ZONE_CONFIG["bronze"])


class Group(SQLModel, table=True):
    """A group/division of a championship. Each group gets its own standings table."""
    __tablename__ = "championship_group"

    id: Optional[int] = Field(default=None, primary_key=True)
    championship_id: int = Field(foreign_key="championship.id")
    name: str
