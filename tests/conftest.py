"""
Shared pytest fixtures.

- Factories for unsaved Team / Match / Player / MatchEvent objects (pure engine tests)
- In-memory SQLite engine + session (service tests)
- FastAPI TestClient wired to that session (route tests)
- `league`: a small persisted championship used across service and route tests
"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from campeonato_backend.core.database import get_session, init_db
from campeonato_backend.main import app
from campeonato_backend.models import (
    Championship,
    Match,
    MatchEvent,
    MatchEventType,
    MatchStage,
    MatchStatus,
    Player,
    Team,
)


# ============================================================================
# OBJECT FACTORIES (no database)
# ============================================================================

@pytest.fixture
def make_team():
    def _make(team_id, name=None, short_name=None, group_id=None, championship_id=1):
        return Team(
            id=team_id,
            championship_id=championship_id,
            group_id=group_id,
            name=name or f"Team {team_id}",
            short_name=short_name or f"T{team_id}",
        )
    return _make


@pytest.fixture
def make_match():
    ids = count(1)

    def _make(home_id, away_id, home_score=0, away_score=0,
              status=MatchStatus.FINISHED, round_number=1,
              stage=MatchStage.GROUP_STAGE, match_id=None, championship_id=1):
        return Match(
            id=match_id if match_id is not None else next(ids),
            championship_id=championship_id,
            home_team_id=home_id,
            away_team_id=away_id,
            home_score=home_score,
            away_score=away_score,
            status=status,
            round_number=round_number,
            stage=stage,
        )
    return _make


@pytest.fixture
def make_player():
    def _make(player_id, team_id, name=None, position=None):
        return Player(id=player_id, team_id=team_id, name=name or f"Player {player_id}", position=position)
    return _make


@pytest.fixture
def make_event():
    ids = count(1)

    def _make(event_type, team_id, player_id=None, match_id=1, minute=10):
        return MatchEvent(
            id=next(ids),
            match_id=match_id,
            team_id=team_id,
            player_id=player_id,
            type=event_type,
            minute=minute,
        )
    return _make


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
def db_engine():
    """Fresh in-memory database per test (StaticPool keeps one shared connection)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def client(session):
    """TestClient using the test session. The lifespan (auto-seed) only runs inside a `with` block."""
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def league(session):
    """
    Three teams, three rounds:
        Round 1: Alpha 2-1 Beta   (finished)
        Round 2: Beta 0-0 Gamma   (finished)
        Round 3: Alpha vs Gamma   (scheduled)

    Zones: promotion 1, relegation 1 (traditional mode).
    """
    championship = Championship(
        name="Liga Teste",
        slug="liga-teste",
        zone_promotion=1,
        zone_relegation=1,
    )
    session.add(championship)
    session.commit()
    session.refresh(championship)

    alpha = Team(championship_id=championship.id, name="Alpha FC", short_name="ALP")
    beta = Team(championship_id=championship.id, name="Beta EC", short_name="BET")
    gamma = Team(championship_id=championship.id, name="Gamma SC", short_name="GAM")
    session.add_all([alpha, beta, gamma])
    session.commit()
    for team in (alpha, beta, gamma):
        session.refresh(team)

    players = {
        "alpha_keeper": Player(team_id=alpha.id, name="Ana", number=1, position="Goleiro"),
        "alpha_striker": Player(team_id=alpha.id, name="Artur", number=9, position="Atacante"),
        "beta_keeper": Player(team_id=beta.id, name="Bruno", number=1, position="goalkeeper"),
        "beta_striker": Player(team_id=beta.id, name="Beto", number=9, position="Atacante"),
        "gamma_keeper": Player(team_id=gamma.id, name="Caio", number=1, position="GK"),
        "gamma_midfielder": Player(team_id=gamma.id, name="Ciro", number=8, position="Meia"),
    }
    session.add_all(players.values())
    session.commit()
    for player in players.values():
        session.refresh(player)

    kickoff = datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc)
    matches = {
        "round_1": Match(
            championship_id=championship.id, home_team_id=alpha.id, away_team_id=beta.id,
            round_number=1, start_time=kickoff,
            status=MatchStatus.FINISHED, home_score=2, away_score=1,
        ),
        "round_2": Match(
            championship_id=championship.id, home_team_id=beta.id, away_team_id=gamma.id,
            round_number=2, start_time=kickoff + timedelta(weeks=1),
            status=MatchStatus.FINISHED, home_score=0, away_score=0,
        ),
        "round_3": Match(
            championship_id=championship.id, home_team_id=alpha.id, away_team_id=gamma.id,
            round_number=3, start_time=kickoff + timedelta(weeks=2),
        ),
    }
    session.add_all(matches.values())
    session.commit()
    for match in matches.values():
        session.refresh(match)

    round_1 = matches["round_1"].id
    session.add_all([
        MatchEvent(match_id=round_1, team_id=alpha.id, player_id=players["alpha_striker"].id,
                   type=MatchEventType.GOAL, minute=12),
        MatchEvent(match_id=round_1, team_id=beta.id, player_id=players["beta_striker"].id,
                   type=MatchEventType.GOAL, minute=30),
        MatchEvent(match_id=round_1, team_id=beta.id, player_id=players["beta_striker"].id,
                   type=MatchEventType.YELLOW_CARD, minute=44),
        MatchEvent(match_id=round_1, team_id=alpha.id, player_id=players["alpha_striker"].id,
                   type=MatchEventType.GOAL, minute=81),
        MatchEvent(match_id=matches["round_2"].id, team_id=gamma.id, player_id=players["gamma_midfielder"].id,
                   type=MatchEventType.YELLOW_CARD, minute=55),
    ])
    session.commit()

    return {
        "championship": championship,
        "teams": {"alpha": alpha, "beta": beta, "gamma": gamma},
        "players": players,
        "matches": matches,
    }
