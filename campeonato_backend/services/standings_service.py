# campeonato_backend/services/standings_service.py
# Loads a championship through the repository and runs the pure standings/ranking code on it.

import logging
from typing import Dict, List, Mapping, Optional

from campeonato_backend.core.championship_config import TOP_BOARD_LIMIT, ZONE_MODE_SERIES
from campeonato_backend.core.rankings import team_scorers, top_goalkeepers, top_scorers
from campeonato_backend.core.simulator import (
    apply_simulated_scores,
    available_rounds,
    pending_matches,
)
from campeonato_backend.core.standings_engine import build_standings_table
from campeonato_backend.core.statistics import championship_highlights, round_summary, summarize_matches
from campeonato_backend.models.championship_model import Championship
from campeonato_backend.models.standings_schemas import (
    PointsConfig,
    RankedKeeper,
    RankedPlayer,
    SimulatedScore,
    StandingsTable,
    ZoneConfig,
)
from campeonato_backend.services.repository import ChampionshipRepository

logger = logging.getLogger(__name__)


class NotFoundError(ValueError):
    """Unknown championship or team."""


def _zone_size(championship: Championship, column: str) -> int:
    size = getattr(championship, column) or 0
    if size < 0:
        logger.warning("⚠️ Championship %s has %s=%s, using 0", championship.id, column, size)
        return 0
    return size


def zone_config_for(championship: Championship) -> ZoneConfig:
    """
    Zone sizes of a championship.
    Gold/silver/bronze series only exist in "series" mode.
    Negative stored sizes count as 0.
    """
    series = championship.zone_mode == ZONE_MODE_SERIES
    return ZoneConfig(
        promotion=_zone_size(championship, "zone_promotion"),
        relegation=_zone_size(championship, "zone_relegation"),
        gold=_zone_size(championship, "zone_gold") if series else 0,
        silver=_zone_size(championship, "zone_silver") if series else 0,
        bronze=_zone_size(championship, "zone_bronze") if series else 0,
    )


def points_config_for(championship: Championship) -> PointsConfig:
    return PointsConfig(
        win=championship.points_win,
        draw=championship.points_draw,
        loss=championship.points_loss,
    )


class StandingsService:
    """
    Public standings, simulator, ranking boards and statistics of a championship.

    All figures are recomputed from the stored matches on every call.
    """

    def __init__(self, repository: ChampionshipRepository):
        self.repository = repository

    def _get_championship(self, championship_id: int) -> Championship:
        championship = self.repository.get_championship(championship_id)
        if not championship:
            raise NotFoundError(f"Championship {championship_id} not found.")
        return championship

    # =========================================
    # STANDINGS
    # =========================================
    def _build_tables(self, championship: Championship, matches: List) -> List[StandingsTable]:
        teams = self.repository.list_teams(championship.id)
        groups = self.repository.list_groups(championship.id)
        events = self.repository.list_events(championship.id)

        zone_config = zone_config_for(championship)
        points = points_config_for(championship)

        def table_for(group_teams):
            return build_standings_table(
                matches,
                group_teams,
                zone_config=zone_config,
                points=points,
                tiebreakers=championship.tiebreakers,
                events=events,
            )

        # No groups: one table with every team
        if not groups:
            return [StandingsTable(rows=table_for(teams))]

        return [
            StandingsTable(
                group_id=group.id,
                group_name=group.name,
                rows=table_for([t for t in teams if t.group_id == group.id]),
            )
            for group in groups
        ]

    def get_standings(self, championship_id: int) -> List[StandingsTable]:
        championship = self._get_championship(championship_id)
        matches = self.repository.list_matches(championship_id)
        return self._build_tables(championship, matches)

    # =========================================
    # SIMULATOR
    # =========================================
    def simulate(self, championship_id: int, scores: Mapping[int, SimulatedScore]) -> List[StandingsTable]:
        """Projected tables if the typed-in scores were the real results."""
        championship = self._get_championship(championship_id)
        matches = self.repository.list_matches(championship_id)

        simulated = {match_id: (score.home, score.away) for match_id, score in scores.items()}
        projected = apply_simulated_scores(matches, simulated)
        logger.debug("Simulating %d scores for championship %s", len(simulated), championship_id)

        return self._build_tables(championship, projected)

    def get_simulator_rounds(self, championship_id: int) -> List[str]:
        self._get_championship(championship_id)
        return available_rounds(self.repository.list_matches(championship_id), pending_only=True)

    def get_simulator_fixtures(self, championship_id: int, round_label: Optional[str] = None) -> Dict:
        """
        Fixtures that can still be simulated in one round.
        Defaults to the first round with pending fixtures.
        """
        self._get_championship(championship_id)
        matches = self.repository.list_matches(championship_id)

        if round_label is None:
            rounds = available_rounds(matches, pending_only=True)
            round_label = rounds[0] if rounds else None

        fixtures = pending_matches(matches, round_label) if round_label else []
        return {"round": round_label, "fixtures": fixtures}

    # =========================================
    # RANKING BOARDS
    # =========================================
    def get_top_scorers(self, championship_id: int, limit: int = TOP_BOARD_LIMIT) -> List[RankedPlayer]:
        self._get_championship(championship_id)
        return top_scorers(
            self.repository.list_events(championship_id),
            self.repository.list_players(championship_id),
            self.repository.list_teams(championship_id),
            limit=limit,
        )

    def get_top_goalkeepers(self, championship_id: int, limit: int = TOP_BOARD_LIMIT) -> List[RankedKeeper]:
        self._get_championship(championship_id)
        return top_goalkeepers(
            self.repository.list_matches(championship_id),
            self.repository.list_players(championship_id),
            self.repository.list_teams(championship_id),
            limit=limit,
        )

    def get_team_scorers(self, team_id: int) -> List[RankedPlayer]:
        team = self.repository.get_team(team_id)
        if not team:
            raise NotFoundError(f"Team {team_id} not found.")
        return team_scorers(
            self.repository.list_events(team.championship_id),
            self.repository.list_players(team.championship_id),
            team,
        )

    # =========================================
    # STATISTICS
    # =========================================
    def get_statistics(self, championship_id: int, round_label: Optional[str] = None) -> Dict:
        championship = self._get_championship(championship_id)
        matches = self.repository.list_matches(championship_id)
        teams = self.repository.list_teams(championship_id)

        return {
            "summary": summarize_matches(matches),
            "round": round_summary(matches, round_label) if round_label else None,
            "highlights": championship_highlights(
                matches,
                teams,
                self.repository.list_events(championship_id),
                self.repository.list_players(championship_id),
                points=points_config_for(championship),
            ),
        }
