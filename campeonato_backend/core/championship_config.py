# campeonato_backend/core/championship_config.py
"""
championship_config.py
----------------------
Default competition rules applied to every new championship, plus the
labels the standings engine and ranking boards recognize.

Organizers can override points, tiebreakers and zones per championship;
these are only the starting values (and the engine's fallbacks).
"""

# ==========================================
# 🏆 POINTS
# ==========================================
DEFAULT_POINTS = {
    "win": 3,
    "draw": 1,
    "loss": 0,
}

# ==========================================
# ⚖️ TIEBREAKERS
# ==========================================
# Applied in order once points are level.
TIEBREAKER_WINS = "wins"
TIEBREAKER_GOAL_DIFF = "goal_diff"
TIEBREAKER_GOALS_FOR = "goals_for"
TIEBREAKER_HEAD_TO_HEAD = "head_to_head"
TIEBREAKER_FEWEST_YELLOW = "fewest_yellow"
TIEBREAKER_FEWEST_RED = "fewest_red"

AVAILABLE_TIEBREAKERS = {
    TIEBREAKER_WINS: "Number of wins",
    TIEBREAKER_GOAL_DIFF: "Goal difference",
    TIEBREAKER_GOALS_FOR: "Goals scored",
    TIEBREAKER_HEAD_TO_HEAD: "Head-to-head",
    TIEBREAKER_FEWEST_YELLOW: "Fewest yellow cards",
    TIEBREAKER_FEWEST_RED: "Fewest red cards",
}

# What a new championship gets
DEFAULT_TIEBREAKERS = [TIEBREAKER_WINS, TIEBREAKER_GOAL_DIFF, TIEBREAKER_GOALS_FOR]

# What the engine uses when the caller gives no list at all
ENGINE_TIEBREAKERS = [TIEBREAKER_WINS, TIEBREAKER_GOAL_DIFF]

# ==========================================
# 🟩🟥 CLASSIFICATION ZONES
# ==========================================
ZONE_MODE_TRADITIONAL = "traditional"  # promotion + relegation only
ZONE_MODE_SERIES = "series"            # adds gold / silver / bronze series

DEFAULT_ZONE_CONFIG = {
    "mode": ZONE_MODE_TRADITIONAL,
    "promotion": 4,     # G-4
    "relegation": 1,    # Z-1
    "gold": 0,
    "silver": 0,
    "bronze": 0,
}

# ==========================================
# 🧤 RANKING BOARDS
# ==========================================
TOP_BOARD_LIMIT = 5

# Matched case-insensitively against Player.position
GOALKEEPER_POSITIONS = {"goleiro", "gol", "goalkeeper", "gk"}

# ==========================================
# 🗓️ ROUND LABELS
# ==========================================
GROUP_STAGE = "group_stage"
ROUND_LABEL_PREFIX = "Round"
