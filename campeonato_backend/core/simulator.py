# campeonato_backend/core/simulator.py
"""
"What-if" result simulator.

Users type hypothetical scores for fixtures that haven't been played; the
simulator folds them into the match list as finished results so the regular
standings engine can project the table. Real matches are never modified.
"""

import re
from typing import Iterable, List, Mapping, Optional, Tuple

from campeonato_backend.core.championship_config import GROUP_STAGE, ROUND_LABEL_PREFIX
from campeonato_backend.models.match_model import MatchSnapshot, MatchStatus

ScorePair = Tuple[Optional[int], Optional[int]]

_NUMBERED_ROUND = re.compile(rf"^{ROUND_LABEL_PREFIX} (\d+)$")


def round_label(match) -> Optional[str]:
    """'Round 3' for group-stage matches, otherwise the knockout stage name."""
    stage = getattr(match, "stage", None) or GROUP_STAGE
    if stage == GROUP_STAGE:
        return f"{ROUND_LABEL_PREFIX} {match.round_number}"
    return getattr(stage, "value", stage)


def _round_sort_key(label: str):
    numbered = _NUMBERED_ROUND.match(label)
    if numbered:
        return (0, int(numbered.group(1)), "")
    return (1, 0, label)


def is_simulatable(match) -> bool:
    """Only fixtures still to be played, with both teams drawn, can be simulated."""
    return (
        match.status != MatchStatus.FINISHED
        and match.home_team_id is not None
        and match.away_team_id is not None
    )


def available_rounds(matches: Iterable, pending_only: bool = False) -> List[str]:
    """
    Distinct round labels: numbered rounds in numeric order, then knockout stages.

    Args:
        matches: Championship matches
        pending_only: Only rounds that still have simulatable fixtures
    """
    labels = set()
    for match in matches:
        if pending_only and not is_simulatable(match):
            continue
        label = round_label(match)
        if label:
            labels.add(label)
    return sorted(labels, key=_round_sort_key)


def pending_matches(matches: Iterable, label: str) -> List:
    """Simulatable fixtures of one round, in input order."""
    return [m for m in matches if is_simulatable(m) and round_label(m) == label]


def apply_simulated_scores(matches: Iterable, simulated: Mapping[int, ScorePair]) -> List:
    """
    Merge hypothetical scores into the match list.

    A fixture that is not finished, has both teams, and has both sides of its
    score filled in is replaced by a finished copy carrying that score.
    Everything else (including finished matches) is passed through untouched.

    Args:
        matches: Real matches
        simulated: {match_id: (home_score, away_score)}; None means left blank

    Returns:
        New list, same order as `matches`
    """
    projected = []
    for match in matches:
        score = simulated.get(match.id)
        if score is None or not is_simulatable(match):
            projected.append(match)
            continue

        home, away = score
        if home is None or away is None:
            projected.append(match)
            continue

        snapshot = MatchSnapshot.model_validate(match, from_attributes=True)
        snapshot.status = MatchStatus.FINISHED
        snapshot.home_score = int(home)
        snapshot.away_score = int(away)
        projected.append(snapshot)

    return projected
