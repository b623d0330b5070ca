# campeonato_backend/core/rankings.py
"""
Player ranking boards: top scorers and least-beaten goalkeepers.
Pure calculation over in-memory events, matches, players and teams.
"""

from typing import Dict, Iterable, List, Optional

from campeonato_backend.core.championship_config import GOALKEEPER_POSITIONS, TOP_BOARD_LIMIT
from campeonato_backend.models.match_model import MatchEventType, MatchStatus
from campeonato_backend.models.standings_schemas import RankedKeeper, RankedPlayer

UNKNOWN_PLAYER = "Unknown"


def _index_by_id(items: Iterable) -> Dict:
    index = {}
    for item in items:
        index.setdefault(item.id, item)
    return index


def is_goalkeeper(player) -> bool:
    position = (getattr(player, "position", None) or "").strip().lower()
    return position in GOALKEEPER_POSITIONS


def _count_goals(events: Iterable, team_id: Optional[int] = None) -> Dict[int, int]:
    # Dict keeps first-goal order, which breaks ties on the boards
    counts: Dict[int, int] = {}
    for event in events:
        if event.type != MatchEventType.GOAL or event.player_id is None:
            continue
        if team_id is not None and event.team_id != team_id:
            continue
        counts[event.player_id] = counts.get(event.player_id, 0) + 1
    return counts


def top_scorers(
    events: Iterable,
    players: Iterable,
    teams: Iterable,
    limit: int = TOP_BOARD_LIMIT,
) -> List[RankedPlayer]:
    """
    Players with the most goals.

    Built from goal events only, so players who never scored never show up.

    Args:
        events: Match events (only goals with a player are counted)
        players: Roster used to resolve names and teams
        teams: Teams used to resolve short names
        limit: Board size (5 by default)

    Returns:
        Up to `limit` entries, most goals first
    """
    players_by_id = _index_by_id(players)
    teams_by_id = _index_by_id(teams)

    board = []
    for player_id, goals in _count_goals(events).items():
        player = players_by_id.get(player_id)
        team = teams_by_id.get(player.team_id) if player else None
        board.append(RankedPlayer(
            player_id=player_id,
            name=player.name if player else UNKNOWN_PLAYER,
            team_short_name=team.short_name if team else None,
            goals=goals,
        ))

    board.sort(key=lambda entry: entry.goals, reverse=True)
    return board[:limit]


def team_scorers(events: Iterable, players: Iterable, team) -> List[RankedPlayer]:
    """Every scorer of one team (goal events credited to that team), no cap."""
    players_by_id = _index_by_id(players)

    board = []
    for player_id, goals in _count_goals(events, team_id=team.id).items():
        player = players_by_id.get(player_id)
        board.append(RankedPlayer(
            player_id=player_id,
            name=player.name if player else UNKNOWN_PLAYER,
            team_short_name=team.short_name,
            goals=goals,
        ))

    board.sort(key=lambda entry: entry.goals, reverse=True)
    return board


def goals_conceded_by_team(matches: Iterable, teams: Iterable) -> Dict[int, Dict[str, int]]:
    """
    Goals conceded and games played per team, from finished matches.

    Returns:
        {team_id: {"goals": conceded, "games": played}} for every team given
    """
    conceded = {team.id: {"goals": 0, "games": 0} for team in teams}

    for match in matches:
        if match.status != MatchStatus.FINISHED:
            continue
        if match.home_team_id is None or match.away_team_id is None:
            continue

        if match.home_team_id in conceded:
            conceded[match.home_team_id]["goals"] += match.away_score or 0
            conceded[match.home_team_id]["games"] += 1
        if match.away_team_id in conceded:
            conceded[match.away_team_id]["goals"] += match.home_score or 0
            conceded[match.away_team_id]["games"] += 1

    return conceded


def format_average(goals: int, games: int) -> str:
    if games <= 0:
        return "0.00"
    return f"{goals / games:.2f}"


def top_goalkeepers(
    matches: Iterable,
    players: Iterable,
    teams: Iterable,
    limit: int = TOP_BOARD_LIMIT,
) -> List[RankedKeeper]:
    """
    Least-beaten goalkeepers.

    Events don't say which keeper was in goal, so every goalkeeper of a team
    carries that team's totals. Ordered by goals conceded (fewest first), then
    games played (most first). Keepers whose team hasn't played are left out.
    """
    teams = list(teams)
    teams_by_id = _index_by_id(teams)
    conceded = goals_conceded_by_team(matches, teams)

    board = []
    for player in players:
        if not is_goalkeeper(player):
            continue
        team = teams_by_id.get(player.team_id)
        stats = conceded.get(player.team_id) if team else None
        stats = stats or {"goals": 0, "games": 0}
        board.append(RankedKeeper(
            player_id=player.id,
            name=player.name,
            team_short_name=team.short_name if team else None,
            goals_conceded=stats["goals"],
            games_played=stats["games"],
            average=format_average(stats["goals"], stats["games"]),
        ))

    board = [entry for entry in board if entry.games_played > 0]
    board.sort(key=lambda entry: (entry.goals_conceded, -entry.games_played))
    return board[:limit]
