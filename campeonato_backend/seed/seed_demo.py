"""
seed_demo.py
------------
Seeds a demo championship: two groups of four teams, squads with a
goalkeeper each, a double round-robin per group and the first rounds
already played (with goals and cards on the timeline).

✅ Safe to run multiple times: skips if the demo championship exists.

Usage:
    python -m campeonato_backend.seed.seed_demo
"""

import logging
import random
from datetime import datetime, timezone

from sqlmodel import Session, select

from campeonato_backend.core.championship_config import ZONE_MODE_SERIES
from campeonato_backend.models.championship_model import Championship, ChampionshipStatus, Group
from campeonato_backend.models.match_model import MatchEvent, MatchEventType, MatchStatus
from campeonato_backend.models.player_model import Player
from campeonato_backend.models.team_model import Team
from campeonato_backend.services.generate_fixtures import generate_fixtures

logger = logging.getLogger(__name__)

DEMO_SLUG = "copa-demo"
PLAYED_ROUNDS = 4

DEMO_GROUPS = {
    "Group A": [
        ("Atlético Vila Nova", "AVN"),
        ("Esporte Clube Ponte", "ECP"),
        ("União Operária", "UOP"),
        ("Real Bairro Alto", "RBA"),
    ],
    "Group B": [
        ("Grêmio Recreativo Sol", "GRS"),
        ("Independente da Serra", "IDS"),
        ("Estrela do Norte", "EDN"),
        ("Cruzeiro da Várzea", "CDV"),
    ],
}

SQUAD_POSITIONS = ["Goleiro", "Zagueiro", "Lateral", "Volante", "Meia", "Atacante"]


def _seed_squad(session: Session, team: Team) -> list:
    squad = []
    for number, position in enumerate(SQUAD_POSITIONS, start=1):
        player = Player(
            team_id=team.id,
            name=f"{team.short_name} {position} {number}",
            number=number,
            position=position,
        )
        session.add(player)
        squad.append(player)
    session.commit()
    for player in squad:
        session.refresh(player)
    return squad


def _play_match(session: Session, match, squads: dict, rng: random.Random):
    match.home_score = rng.randint(0, 4)
    match.away_score = rng.randint(0, 3)
    match.status = MatchStatus.FINISHED
    session.add(match)

    # Goals credited to outfield players of the scoring side
    for team_id, goals in ((match.home_team_id, match.home_score), (match.away_team_id, match.away_score)):
        outfield = [p for p in squads[team_id] if p.position != "Goleiro"]
        for _ in range(goals):
            session.add(MatchEvent(
                match_id=match.id,
                player_id=rng.choice(outfield).id,
                team_id=team_id,
                type=MatchEventType.GOAL,
                minute=rng.randint(1, 90),
            ))

        # A booking now and then
        if rng.random() < 0.5:
            session.add(MatchEvent(
                match_id=match.id,
                player_id=rng.choice(squads[team_id]).id,
                team_id=team_id,
                type=MatchEventType.YELLOW_CARD,
                minute=rng.randint(1, 90),
            ))
        if rng.random() < 0.1:
            session.add(MatchEvent(
                match_id=match.id,
                player_id=rng.choice(outfield).id,
                team_id=team_id,
                type=MatchEventType.RED_CARD,
                minute=rng.randint(46, 90),
            ))


def seed_demo(session: Session, seed: int = 42) -> Championship:
    existing = session.exec(select(Championship).where(Championship.slug == DEMO_SLUG)).first()
    if existing:
        logger.info("✅ Demo championship already exists: %s", existing.name)
        return existing

    rng = random.Random(seed)

    logger.info("🏆 Creating demo championship...")
    championship = Championship(
        name="Copa Demo",
        slug=DEMO_SLUG,
        season=str(datetime.now(timezone.utc).year),
        status=ChampionshipStatus.PUBLISHED,
        zone_mode=ZONE_MODE_SERIES,
        zone_promotion=1,
        zone_gold=1,
        zone_silver=1,
        zone_relegation=1,
    )
    session.add(championship)
    session.commit()
    session.refresh(championship)

    for group_name, team_specs in DEMO_GROUPS.items():
        group = Group(championship_id=championship.id, name=group_name)
        session.add(group)
        session.commit()
        session.refresh(group)

        teams = []
        for name, short_name in team_specs:
            team = Team(championship_id=championship.id, group_id=group.id, name=name, short_name=short_name)
            session.add(team)
            teams.append(team)
        session.commit()

        squads = {}
        for team in teams:
            session.refresh(team)
            squads[team.id] = _seed_squad(session, team)
        logger.info("   ⚽ %s: %d teams", group_name, len(teams))

        fixtures = generate_fixtures(
            session,
            championship.id,
            [team.id for team in teams],
            group_id=group.id,
            double_round=True,
        )
        for match in fixtures:
            if match.round_number <= PLAYED_ROUNDS:
                _play_match(session, match, squads, rng)
        session.commit()

    logger.info("✅ Demo championship seeded: %s", championship.name)
    return championship


if __name__ == "__main__":
    from campeonato_backend.core.database import get_sync_session, init_db

    logging.basicConfig(level=logging.INFO)
    init_db()
    with get_sync_session() as session:
        seed_demo(session)
