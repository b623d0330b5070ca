# campeonato_backend/core/statistics.py
"""
Championship statistics board: totals, averages and team/player highlights.
"""

from typing import Dict, Iterable, List, Optional

from campeonato_backend.core.simulator import round_label
from campeonato_backend.core.standings_engine import compute_standings
from campeonato_backend.models.match_model import MatchEventType, MatchStatus
from campeonato_backend.models.standings_schemas import PointsConfig, TeamStats

_CARD_TYPES = (MatchEventType.YELLOW_CARD, MatchEventType.RED_CARD)


def summarize_matches(matches: Iterable) -> Dict:
    """
    Games played, goals scored and goals per game over finished matches.
    """
    finished = [m for m in matches if m.status == MatchStatus.FINISHED]
    total_games = len(finished)
    total_goals = sum((m.home_score or 0) + (m.away_score or 0) for m in finished)
    average_goals = f"{total_goals / total_games:.2f}" if total_games else "0"

    return {
        "total_games": total_games,
        "total_goals": total_goals,
        "average_goals": average_goals,
    }


def round_summary(matches: Iterable, label: str) -> Dict:
    """summarize_matches restricted to one round ('Round 2', 'final', ...)."""
    summary = summarize_matches(m for m in matches if round_label(m) == label)
    summary["round"] = label
    return summary


def _highlight(row: Optional[TeamStats], value) -> Optional[Dict]:
    if row is None:
        return None
    return {"team_id": row.team_id, "name": row.name, "value": value}


def _cards(row: TeamStats) -> int:
    return row.yellow_cards + row.red_cards


def team_highlights(rows: List[TeamStats]) -> Dict[str, Optional[Dict]]:
    """
    Best/worst teams by category. Ties go to the team listed first.
    Teams that haven't played are ignored for per-game categories.
    """
    played = [row for row in rows if row.played > 0]

    best_attack = max(rows, key=lambda r: r.goals_for, default=None)
    best_defense = min(played, key=lambda r: r.goals_against / r.played, default=None)
    best_efficiency = max(played, key=lambda r: r.points / r.played, default=None)
    most_wins = max(rows, key=lambda r: r.wins, default=None)
    most_draws = max(rows, key=lambda r: r.draws, default=None)
    fair_play = min(rows, key=_cards, default=None)
    most_cards = max(rows, key=_cards, default=None)

    return {
        "best_attack": _highlight(best_attack, best_attack and best_attack.goals_for),
        "best_defense": _highlight(
            best_defense,
            best_defense and round(best_defense.goals_against / best_defense.played, 2),
        ),
        "best_efficiency": _highlight(best_efficiency, best_efficiency and best_efficiency.efficiency),
        "most_wins": _highlight(most_wins, most_wins and most_wins.wins),
        "most_draws": _highlight(most_draws, most_draws and most_draws.draws),
        "fair_play": _highlight(fair_play, fair_play and _cards(fair_play)),
        "most_cards": _highlight(most_cards, most_cards and _cards(most_cards)),
    }


def most_booked_player(events: Iterable, players: Iterable, team_ids: Iterable[int]) -> Optional[Dict]:
    """Player with the most cards among the given teams, or None if nobody was booked."""
    team_ids = set(team_ids)
    counts: Dict[int, int] = {}
    for event in events:
        if event.type not in _CARD_TYPES or event.team_id not in team_ids:
            continue
        if event.player_id is None:
            continue
        counts[event.player_id] = counts.get(event.player_id, 0) + 1

    if not counts:
        return None

    player_id = max(counts, key=counts.get)
    player = next((p for p in players if p.id == player_id), None)
    return {
        "player_id": player_id,
        "name": player.name if player else None,
        "cards": counts[player_id],
    }


def championship_highlights(
    matches: Iterable,
    teams: Iterable,
    events: Iterable,
    players: Iterable,
    points: Optional[PointsConfig] = None,
) -> Dict:
    """Team highlights plus the most booked player, for the statistics page."""
    teams = list(teams)
    events = list(events)
    rows = compute_standings(matches, teams, points=points, events=events)

    highlights = team_highlights(rows)
    highlights["most_booked_player"] = most_booked_player(events, players, [t.id for t in teams])
    return highlights
