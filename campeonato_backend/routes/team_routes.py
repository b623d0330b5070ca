# team_routes.py
# Public team page data.

from fastapi import APIRouter, Depends, HTTPException

from campeonato_backend.routes.championship_routes import get_standings_service
from campeonato_backend.services.standings_service import NotFoundError, StandingsService

router = APIRouter()


@router.get("/{team_id}/scorers")
def get_team_scorers(team_id: int, service: StandingsService = Depends(get_standings_service)):
    """All scorers of a team, most goals first."""
    try:
        scorers = service.get_team_scorers(team_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"team_id": team_id, "scorers": scorers}
