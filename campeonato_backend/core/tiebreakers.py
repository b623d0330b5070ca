# campeonato_backend/core/tiebreakers.py
"""
Ordering of a standings table.

Points always come first. Teams level on points are separated by the
championship's tiebreaker list, criterion by criterion: each criterion only
reorders the teams still tied after the previous ones. Teams tied on every
criterion keep the order they were given in.
"""

import logging
from itertools import groupby
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from campeonato_backend.core.championship_config import (
    AVAILABLE_TIEBREAKERS,
    ENGINE_TIEBREAKERS,
    TIEBREAKER_FEWEST_RED,
    TIEBREAKER_FEWEST_YELLOW,
    TIEBREAKER_GOAL_DIFF,
    TIEBREAKER_GOALS_FOR,
    TIEBREAKER_HEAD_TO_HEAD,
    TIEBREAKER_WINS,
)
from campeonato_backend.models.match_model import MatchStatus
from campeonato_backend.models.standings_schemas import PointsConfig, TeamStats

logger = logging.getLogger(__name__)

_POINTS = "points"

# Higher value ranks first
_SORT_KEYS: Dict[str, Callable[[TeamStats], int]] = {
    _POINTS: lambda row: row.points,
    TIEBREAKER_WINS: lambda row: row.wins,
    TIEBREAKER_GOAL_DIFF: lambda row: row.goal_diff,
    TIEBREAKER_GOALS_FOR: lambda row: row.goals_for,
    TIEBREAKER_FEWEST_YELLOW: lambda row: -row.yellow_cards,
    TIEBREAKER_FEWEST_RED: lambda row: -row.red_cards,
}


def normalize_tiebreakers(tiebreakers: Optional[Iterable[str]]) -> List[str]:
    """
    Clean up a configured tiebreaker list.

    - None means the engine default (wins, then goal difference).
    - Unknown keys are dropped with a warning, duplicates keep their first slot.
    """
    if tiebreakers is None:
        return list(ENGINE_TIEBREAKERS)

    criteria = []
    for key in tiebreakers:
        if key not in AVAILABLE_TIEBREAKERS:
            logger.warning("Ignoring unknown tiebreaker %r", key)
            continue
        if key not in criteria:
            criteria.append(key)
    return criteria


def head_to_head_points(
    team_ids: Iterable[int],
    matches: Iterable,
    points: Optional[PointsConfig] = None,
) -> Dict[int, int]:
    """
    Points each team earned in finished matches played among the given teams only.
    """
    points = points or PointsConfig()
    mini_table = {team_id: 0 for team_id in team_ids}

    for match in matches:
        home_id, away_id = match.home_team_id, match.away_team_id
        if match.status != MatchStatus.FINISHED:
            continue
        if home_id not in mini_table or away_id not in mini_table:
            continue

        home_score = match.home_score or 0
        away_score = match.away_score or 0
        if home_score > away_score:
            mini_table[home_id] += points.win
            mini_table[away_id] += points.loss
        elif home_score < away_score:
            mini_table[away_id] += points.win
            mini_table[home_id] += points.loss
        else:
            mini_table[home_id] += points.draw
            mini_table[away_id] += points.draw

    return mini_table


def _rank_block(
    block: List[TeamStats],
    criteria: Sequence[str],
    matches: Sequence,
    points: PointsConfig,
) -> List[TeamStats]:
    if len(block) < 2 or not criteria:
        return block

    criterion, remaining = criteria[0], criteria[1:]
    if criterion == TIEBREAKER_HEAD_TO_HEAD:
        mini_table = head_to_head_points([row.team_id for row in block], matches, points)
        key = lambda row: mini_table[row.team_id]
    else:
        key = _SORT_KEYS[criterion]

    # sorted() stays stable with reverse=True
    ordered = sorted(block, key=key, reverse=True)

    result = []
    for _, tied in groupby(ordered, key=key):
        result.extend(_rank_block(list(tied), remaining, matches, points))
    return result


def order_standings(
    rows: Sequence[TeamStats],
    tiebreakers: Optional[Iterable[str]] = None,
    matches: Sequence = (),
    points: Optional[PointsConfig] = None,
) -> List[TeamStats]:
    """
    Sort standings rows best to worst.

    Args:
        rows: Aggregated rows in input (team list) order
        tiebreakers: Ordered tiebreaker keys, None for the engine default
        matches: Matches used for head-to-head comparisons
        points: Points per result, used for head-to-head mini tables

    Returns:
        New list, best team first
    """
    criteria = [_POINTS] + normalize_tiebreakers(tiebreakers)
    return _rank_block(list(rows), criteria, list(matches), points or PointsConfig())
