# generate_fixtures.py
# Service for generating round-robin fixtures for a championship (or one of its groups).

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence, Tuple

from sqlmodel import Session

from campeonato_backend.models.match_model import Match, MatchStage, MatchStatus

logger = logging.getLogger(__name__)


def round_robin_pairings(team_ids: Sequence[int], double_round: bool = False) -> List[List[Tuple[int, int]]]:
    """
    Pairings per round using the "circle method".

    Args:
        team_ids: Teams to schedule
        double_round: Add the return leg (home/away swapped)

    Returns:
        [[(home_id, away_id), ...] per round]
    """
    ids: List[Optional[int]] = list(team_ids)
    if len(ids) < 2:
        return []
    if len(ids) % 2 != 0:
        ids.append(None)  # Dummy "bye" if odd number of teams

    half = len(ids) // 2
    rounds = []

    cycles = 2 if double_round else 1
    for cycle in range(cycles):
        rotated = ids[:]
        for _ in range(len(ids) - 1):
            round_pairs = []
            for i in range(half):
                home = rotated[i]
                away = rotated[-i - 1]

                if home is None or away is None:
                    continue  # Skip bye

                # Swap home/away in second cycle
                if cycle == 1:
                    home, away = away, home

                round_pairs.append((home, away))
            rounds.append(round_pairs)

            # Rotate teams (keep the first team fixed)
            rotated = [rotated[0]] + [rotated[-1]] + rotated[1:-1]

    return rounds


def generate_fixtures(
    session: Session,
    championship_id: int,
    team_ids: Sequence[int],
    group_id: Optional[int] = None,
    start_time: Optional[datetime] = None,
    double_round: bool = False,
) -> List[Match]:
    """
    Creates scheduled group-stage matches for the given teams, one round per week.
    """
    if len(team_ids) < 2:
        raise ValueError("Not enough teams to generate fixtures.")

    kickoff = start_time or datetime.now(timezone.utc).replace(hour=10, minute=0, second=0, microsecond=0)

    fixtures = []
    for round_number, round_pairs in enumerate(round_robin_pairings(team_ids, double_round), start=1):
        round_time = kickoff + timedelta(weeks=round_number - 1)
        for home_id, away_id in round_pairs:
            match = Match(
                championship_id=championship_id,
                group_id=group_id,
                home_team_id=home_id,
                away_team_id=away_id,
                round_number=round_number,
                stage=MatchStage.GROUP_STAGE,
                status=MatchStatus.SCHEDULED,
                start_time=round_time,
            )
            session.add(match)
            fixtures.append(match)

    session.commit()
    for match in fixtures:
        session.refresh(match)

    logger.info("✅ Fixtures generated for championship %s (%d matches total)", championship_id, len(fixtures))
    return fixtures
