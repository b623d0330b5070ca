# campeonato_backend/core/standings_engine.py
"""
standings_engine.py
-------------------
Builds a championship table from matches and teams.

Pure calculation - no database access, no side effects. The same functions
back the public table, the result simulator and the statistics board, and
they never raise on half-entered data: matches without both teams, matches
against teams outside the table and unfinished matches are simply left out.

Inputs are read by attribute only, so SQLModel rows, snapshots or any other
objects with the same fields can be passed in.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from campeonato_backend.core.tiebreakers import order_standings
from campeonato_backend.models.match_model import MatchEventType, MatchStatus
from campeonato_backend.models.standings_schemas import (
    PointsConfig,
    TeamStats,
    Zone,
    ZoneConfig,
)

logger = logging.getLogger(__name__)


def is_countable(match, table: Dict[int, TeamStats]) -> bool:
    """A match counts only when it is finished and both sides belong to this table."""
    return (
        match.status == MatchStatus.FINISHED
        and match.home_team_id in table
        and match.away_team_id in table
    )


def calculate_efficiency(points: int, played: int, points_per_win: int = 3) -> int:
    """
    Points earned as a percentage of the points available, rounded half up.

    Returns 0 for teams that have not played yet.
    """
    max_points = played * points_per_win
    if max_points <= 0:
        return 0
    # round(points / max_points * 100) with halves rounded up, in integer math
    return (200 * points + max_points) // (2 * max_points)


def _new_row(team) -> TeamStats:
    return TeamStats(
        team_id=team.id,
        name=team.name,
        short_name=getattr(team, "short_name", None),
        logo_url=getattr(team, "logo_url", None),
    )


def _apply_result(home: TeamStats, away: TeamStats, home_score: int, away_score: int, points: PointsConfig):
    home.played += 1
    away.played += 1

    home.goals_for += home_score
    home.goals_against += away_score
    away.goals_for += away_score
    away.goals_against += home_score

    # Recomputed from the totals, never accumulated
    home.goal_diff = home.goals_for - home.goals_against
    away.goal_diff = away.goals_for - away.goals_against

    if home_score > away_score:
        home.wins += 1
        home.points += points.win
        away.losses += 1
        away.points += points.loss
    elif home_score < away_score:
        away.wins += 1
        away.points += points.win
        home.losses += 1
        home.points += points.loss
    else:
        home.draws += 1
        away.draws += 1
        home.points += points.draw
        away.points += points.draw


def _count_cards(table: Dict[int, TeamStats], events: Iterable):
    for event in events:
        row = table.get(event.team_id)
        if row is None:
            continue
        if event.type == MatchEventType.YELLOW_CARD:
            row.yellow_cards += 1
        elif event.type == MatchEventType.RED_CARD:
            row.red_cards += 1


# =========================================
# AGGREGATION
# =========================================
def compute_standings(
    matches: Iterable,
    teams: Iterable,
    points: Optional[PointsConfig] = None,
    tiebreakers: Optional[Iterable[str]] = None,
    events: Optional[Iterable] = None,
) -> List[TeamStats]:
    """
    Aggregate finished matches into an ordered standings table.

    Args:
        matches: Matches of the championship (any status)
        teams: Exact set of teams to rank. Pass a group's teams for a group table.
        points: Points per win/draw/loss (3/1/0 when omitted)
        tiebreakers: Ordered tiebreaker keys applied after points.
                     None keeps the fixed order: wins, then goal difference.
        events: Optional match events, used for card counts

    Returns:
        List of TeamStats, best team first
    """
    points = points or PointsConfig()

    # 1. One zeroed row per team, in input order
    table: Dict[int, TeamStats] = {}
    for team in teams:
        if team.id not in table:
            table[team.id] = _new_row(team)

    # 2. Fold in finished matches between known teams
    counted = []
    for match in matches:
        if not is_countable(match, table):
            logger.debug("Skipping match %s (status=%s)", getattr(match, "id", None), match.status)
            continue
        _apply_result(
            table[match.home_team_id],
            table[match.away_team_id],
            match.home_score or 0,
            match.away_score or 0,
            points,
        )
        counted.append(match)

    # 3. Efficiency once all results are in
    for row in table.values():
        row.efficiency = calculate_efficiency(row.points, row.played, points.win)

    if events is not None:
        _count_cards(table, events)

    # 4. Points, then tiebreakers (stable)
    return order_standings(list(table.values()), tiebreakers, counted, points)


# =========================================
# ZONES
# =========================================
def classify_zone(rank: int, total_teams: int, config: ZoneConfig) -> Zone:
    """
    Zone for a zero-based table position.

    Priority order:
    1) promotion: the top `promotion` places
    2) relegation: the bottom `relegation` places (beats any series below)
    3) gold / silver / bronze: consecutive ranges right after promotion
    4) neutral: everyone else

    Oversized zones simply run out of teams, nothing here raises.
    """
    if rank < config.promotion:
        return Zone.PROMOTION

    if config.relegation > 0 and rank >= total_teams - config.relegation:
        return Zone.RELEGATION

    gold_end = config.promotion + config.gold
    if rank < gold_end:
        return Zone.GOLD

    silver_end = gold_end + config.silver
    if rank < silver_end:
        return Zone.SILVER

    bronze_end = silver_end + config.bronze
    if rank < bronze_end:
        return Zone.BRONZE

    return Zone.NEUTRAL


def assign_zones(rows: Sequence[TeamStats], config: ZoneConfig) -> List[TeamStats]:
    """Stamp position (1-based) and zone onto already ordered rows."""
    total = len(rows)
    for rank, row in enumerate(rows):
        row.position = rank + 1
        row.zone = classify_zone(rank, total, config)
    return list(rows)


def build_standings_table(
    matches: Iterable,
    teams: Iterable,
    zone_config: Optional[ZoneConfig] = None,
    points: Optional[PointsConfig] = None,
    tiebreakers: Optional[Iterable[str]] = None,
    events: Optional[Iterable] = None,
) -> List[TeamStats]:
    """compute_standings + positions and zones, ready to render."""
    rows = compute_standings(matches, teams, points=points, tiebreakers=tiebreakers, events=events)
    return assign_zones(rows, zone_config or ZoneConfig())
