# campeonato_backend/models/__init__.py
# Centralized imports for all database models and schemas

# Championship & groups
from .championship_model import Championship, ChampionshipStatus, Group

# Teams and players
from .team_model import Team
from .player_model import Player

# Matches and timeline events
from .match_model import (
    Match, MatchBase, MatchSnapshot, MatchEvent,
    MatchStatus, MatchStage, MatchEventType
)

# Standings / ranking value objects
from .standings_schemas import (
    Zone, ZoneConfig, PointsConfig, TeamStats, StandingsTable,
    RankedPlayer, RankedKeeper, SimulatedScore, SimulationRequest
)
