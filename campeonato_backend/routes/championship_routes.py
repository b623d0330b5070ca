# championship_routes.py
# Public read API of a championship: standings, result simulator, ranking boards and statistics.

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from campeonato_backend.core.championship_config import TOP_BOARD_LIMIT
from campeonato_backend.core.database import get_session
from campeonato_backend.models.standings_schemas import SimulationRequest
from campeonato_backend.services.repository import SQLModelChampionshipRepository
from campeonato_backend.services.standings_service import NotFoundError, StandingsService

router = APIRouter()


def get_standings_service(session: Session = Depends(get_session)) -> StandingsService:
    return StandingsService(SQLModelChampionshipRepository(session))


def _not_found(error: NotFoundError):
    return HTTPException(status_code=404, detail=str(error))


# =========================================
# GET STANDINGS
# =========================================
@router.get("/{championship_id}/standings")
def get_standings(championship_id: int, service: StandingsService = Depends(get_standings_service)):
    """
    Current standings of a championship.
    One table per group (or a single table when the championship has no groups),
    each row carrying its position and classification zone.
    """
    try:
        tables = service.get_standings(championship_id)
    except NotFoundError as e:
        raise _not_found(e)

    return {"championship_id": championship_id, "tables": tables}


# =========================================
# RESULT SIMULATOR
# =========================================
@router.post("/{championship_id}/simulate")
def simulate_standings(
    championship_id: int,
    data: SimulationRequest,
    service: StandingsService = Depends(get_standings_service),
):
    """
    Projected standings with hypothetical scores for unplayed fixtures.
    - Body: {"scores": {"<match_id>": {"home": 2, "away": 1}}}
    - Scores with a blank side and scores for finished matches are ignored.
    - Nothing is saved.
    """
    try:
        tables = service.simulate(championship_id, data.scores)
    except NotFoundError as e:
        raise _not_found(e)

    return {"championship_id": championship_id, "simulated": True, "tables": tables}


@router.get("/{championship_id}/simulator/rounds")
def get_simulator_rounds(championship_id: int, service: StandingsService = Depends(get_standings_service)):
    """Rounds that still have fixtures to simulate."""
    try:
        rounds = service.get_simulator_rounds(championship_id)
    except NotFoundError as e:
        raise _not_found(e)

    return {"championship_id": championship_id, "rounds": rounds}


@router.get("/{championship_id}/simulator/fixtures")
def get_simulator_fixtures(
    championship_id: int,
    round: Optional[str] = Query(default=None, description="e.g. 'Round 3' or 'final'"),
    service: StandingsService = Depends(get_standings_service),
):
    """
    Fixtures of a round that can be simulated (not finished, both teams drawn).
    Defaults to the first round with pending fixtures.
    """
    try:
        result = service.get_simulator_fixtures(championship_id, round)
        teams = {t.id: t for t in service.repository.list_teams(championship_id)}
    except NotFoundError as e:
        raise _not_found(e)

    # Build a lightweight, frontend-friendly payload
    fixtures_payload = []
    for fx in result["fixtures"]:
        home_team = teams.get(fx.home_team_id)
        away_team = teams.get(fx.away_team_id)
        fixtures_payload.append({
            "match_id": fx.id,
            "round_number": fx.round_number,
            "stage": fx.stage,
            "start_time": fx.start_time,
            "home_team_id": fx.home_team_id,
            "home_team_name": home_team.name if home_team else None,
            "away_team_id": fx.away_team_id,
            "away_team_name": away_team.name if away_team else None,
        })

    return {
        "championship_id": championship_id,
        "round": result["round"],
        "fixtures": fixtures_payload,
    }


# =========================================
# RANKING BOARDS
# =========================================
@router.get("/{championship_id}/top-scorers")
def get_top_scorers(
    championship_id: int,
    limit: int = Query(default=TOP_BOARD_LIMIT, ge=1),
    service: StandingsService = Depends(get_standings_service),
):
    try:
        scorers = service.get_top_scorers(championship_id, limit=limit)
    except NotFoundError as e:
        raise _not_found(e)

    return {"championship_id": championship_id, "scorers": scorers}


@router.get("/{championship_id}/top-goalkeepers")
def get_top_goalkeepers(
    championship_id: int,
    limit: int = Query(default=TOP_BOARD_LIMIT, ge=1),
    service: StandingsService = Depends(get_standings_service),
):
    """Least-beaten goalkeepers (team goals conceded, fewest first)."""
    try:
        keepers = service.get_top_goalkeepers(championship_id, limit=limit)
    except NotFoundError as e:
        raise _not_found(e)

    return {"championship_id": championship_id, "goalkeepers": keepers}


# =========================================
# STATISTICS
# =========================================
@router.get("/{championship_id}/statistics")
def get_statistics(
    championship_id: int,
    round: Optional[str] = Query(default=None),
    service: StandingsService = Depends(get_standings_service),
):
    """Totals, goals per game (overall and for one round) and team/player highlights."""
    try:
        stats = service.get_statistics(championship_id, round)
    except NotFoundError as e:
        raise _not_found(e)

    return {"championship_id": championship_id, **stats}
