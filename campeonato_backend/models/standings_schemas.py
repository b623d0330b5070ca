# standings_schemas.py
# Pydantic value objects consumed and produced by the standings engine and ranking boards.

from typing import Optional, Dict, List
from enum import Enum
from pydantic import BaseModel, Field


class Zone(str, Enum):
    """Classification zone of a table position"""
    PROMOTION = "promotion"
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    RELEGATION = "relegation"
    NEUTRAL = "neutral"


class ZoneConfig(BaseModel):
    """Zone sizes. Promotion and tiers count from the top, relegation from the bottom."""
    promotion: int = Field(default=0, ge=0)
    relegation: int = Field(default=0, ge=0)
    gold: int = Field(default=0, ge=0)
    silver: int = Field(default=0, ge=0)
    bronze: int = Field(default=0, ge=0)


class PointsConfig(BaseModel):
    """Points awarded per result."""
    win: int = 3
    draw: int = 1
    loss: int = 0


class TeamStats(BaseModel):
    """
    One row of a standings table.
    Built fresh on every computation, never persisted.
    """
    team_id: int
    name: str
    short_name: Optional[str] = None
    logo_url: Optional[str] = None

    points: int = 0
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_diff: int = 0
    efficiency: int = 0          # % of the maximum points available
    yellow_cards: int = 0
    red_cards: int = 0

    # Filled in once the table is ordered
    position: Optional[int] = None
    zone: Optional[Zone] = None


class StandingsTable(BaseModel):
    """A ranked table, optionally scoped to one group of the championship."""
    group_id: Optional[int] = None
    group_name: Optional[str] = None
    rows: List[TeamStats]


class RankedPlayer(BaseModel):
    """Top scorers board entry."""
    player_id: int
    name: str
    team_short_name: Optional[str] = None
    goals: int


class RankedKeeper(BaseModel):
    """Least-beaten goalkeepers board entry. Figures are the keeper's team totals."""
    player_id: int
    name: str
    team_short_name: Optional[str] = None
    goals_conceded: int
    games_played: int
    average: str                 # "0.75"


# -------------------------------
# Request bodies
# -------------------------------
class SimulatedScore(BaseModel):
    """A hypothetical score typed into the simulator. Blank sides are ignored."""
    home: Optional[int] = Field(default=None, ge=0)
    away: Optional[int] = Field(default=None, ge=0)


class SimulationRequest(BaseModel):
    scores: Dict[int, SimulatedScore] = Field(default_factory=dict)
