# campeonato_backend/services/repository.py
# Read access to championship data. Services depend on the protocol, routes hand in the SQLModel version.

from typing import List, Optional, Protocol

from sqlmodel import Session, select

from campeonato_backend.models.championship_model import Championship, Group
from campeonato_backend.models.match_model import Match, MatchEvent
from campeonato_backend.models.player_model import Player
from campeonato_backend.models.team_model import Team


class ChampionshipRepository(Protocol):
    def get_championship(self, championship_id: int) -> Optional[Championship]: ...

    def get_team(self, team_id: int) -> Optional[Team]: ...

    def list_groups(self, championship_id: int) -> List[Group]: ...

    def list_teams(self, championship_id: int) -> List[Team]: ...

    def list_matches(self, championship_id: int) -> List[Match]: ...

    def list_players(self, championship_id: int) -> List[Player]: ...

    def list_events(self, championship_id: int) -> List[MatchEvent]: ...


class SQLModelChampionshipRepository:
    """ChampionshipRepository backed by a SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    def get_championship(self, championship_id: int) -> Optional[Championship]:
        return self.session.get(Championship, championship_id)

    def get_team(self, team_id: int) -> Optional[Team]:
        return self.session.get(Team, team_id)

    def list_groups(self, championship_id: int) -> List[Group]:
        return self.session.exec(
            select(Group)
            .where(Group.championship_id == championship_id)
            .order_by(Group.name)
        ).all()

    def list_teams(self, championship_id: int) -> List[Team]:
        # Registration order is the tie order of the standings table
        return self.session.exec(
            select(Team)
            .where(Team.championship_id == championship_id)
            .order_by(Team.id)
        ).all()

    def list_matches(self, championship_id: int) -> List[Match]:
        return self.session.exec(
            select(Match)
            .where(Match.championship_id == championship_id)
            .order_by(Match.start_time, Match.id)
        ).all()

    def list_players(self, championship_id: int) -> List[Player]:
        return self.session.exec(
            select(Player)
            .join(Team, Team.id == Player.team_id)
            .where(Team.championship_id == championship_id)
            .order_by(Player.team_id, Player.number, Player.id)
        ).all()

    def list_events(self, championship_id: int) -> List[MatchEvent]:
        return self.session.exec(
            select(MatchEvent)
            .join(Match, Match.id == MatchEvent.match_id)
            .where(Match.championship_id == championship_id)
            .order_by(MatchEvent.match_id, MatchEvent.minute, MatchEvent.id)
        ).all()
