# campeonato_backend/models/player_model.py
from typing import Optional
from sqlmodel import SQLModel, Field


class Player(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="team.id")

    name: str
    number: Optional[int] = None           # Shirt number
    position: Optional[str] = None         # Free text, e.g. "Goleiro", "Atacante"
    photo_url: Optional[str] = None
