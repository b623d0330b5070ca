# match_model.py
# Defines the Match model (fixtures and results) and MatchEvent (goals, cards, substitutions...)

from typing import Optional
from datetime import datetime, timezone
from enum import Enum
from sqlmodel import SQLModel, Field


class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    FINISHED = "finished"      # Only finished matches count for the table
    POSTPONED = "postponed"


class MatchStage(str, Enum):
    GROUP_STAGE = "group_stage"
    ROUND_16 = "round_16"
    QUARTER_FINALS = "quarter_finals"
    SEMI_FINALS = "semi_finals"
    FINAL = "final"


class MatchEventType(str, Enum):
    GOAL = "goal"
    YELLOW_CARD = "yellow_card"
    RED_CARD = "red_card"
    SUBSTITUTION = "substitution"
    MATCH_START = "match_start"
    MATCH_END = "match_end"


class MatchBase(SQLModel):
    """
    Fields shared by the Match table and its detached copies
    (the result simulator works on copies, never on rows).
    """
    # Foreign keys
    championship_id: int = Field(foreign_key="championship.id")
    group_id: Optional[int] = Field(default=None, foreign_key="championship_group.id")
    home_team_id: Optional[int] = Field(default=None, foreign_key="team.id")   # Empty slot until drawn
    away_team_id: Optional[int] = Field(default=None, foreign_key="team.id")

    # Match details
    round_number: int = 1
    stage: MatchStage = Field(default=MatchStage.GROUP_STAGE)
    start_time: Optional[datetime] = None
    location: Optional[str] = None

    # Result
    status: MatchStatus = Field(default=MatchStatus.SCHEDULED)
    home_score: int = 0
    away_score: int = 0

    # Knockout disambiguation only, never used for table points
    penalty_home_score: Optional[int] = None
    penalty_away_score: Optional[int] = None

    # W.O. still counts with whatever score was recorded
    is_wo: bool = False
    wo_winner_team_id: Optional[int] = Field(default=None, foreign_key="team.id")


class Match(MatchBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)


class MatchSnapshot(MatchBase):
    """Detached copy of a Match (no session, safe to modify)."""
    id: Optional[int] = None


class MatchEvent(SQLModel, table=True):
    """A single timeline entry recorded during a match."""
    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: int = Field(foreign_key="match.id")
    player_id: Optional[int] = Field(default=None, foreign_key="player.id")
    team_id: Optional[int] = Field(default=None, foreign_key="team.id")

    type: MatchEventType
    minute: int = 0
    extra_info: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
