# team_model.py
# Defines the Team model. Teams belong to a championship and optionally to one of its groups.

from typing import Optional
from sqlmodel import SQLModel, Field


class Team(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    championship_id: int = Field(foreign_key="championship.id")
    group_id: Optional[int] = Field(default=None, foreign_key="championship_group.id")

    name: str
    short_name: str                        # e.g. "FLA", shown on ranking boards
    logo_url: Optional[str] = None
    coach_name: Optional[str] = None
    category: Optional[str] = None
