"""
Service tests against an in-memory SQLite database.
"""

import pytest

from campeonato_backend.core.championship_config import ZONE_MODE_SERIES
from campeonato_backend.models import (
    Championship,
    Group,
    Match,
    MatchEvent,
    MatchEventType,
    MatchStatus,
    SimulatedScore,
    Team,
    Zone,
)
from campeonato_backend.services.repository import SQLModelChampionshipRepository
from campeonato_backend.services.standings_service import StandingsService, zone_config_for


@pytest.fixture
def service(session):
    return StandingsService(SQLModelChampionshipRepository(session))


class TestStandings:

    def test_single_table_without_groups(self, service, league):
        tables = service.get_standings(league["championship"].id)

        assert len(tables) == 1
        table = tables[0]
        assert table.group_id is None
        assert [row.name for row in table.rows] == ["Alpha FC", "Gamma SC", "Beta EC"]
        assert [row.zone for row in table.rows] == [Zone.PROMOTION, Zone.NEUTRAL, Zone.RELEGATION]
        assert [row.efficiency for row in table.rows] == [100, 33, 17]

    def test_cards_come_from_the_timeline(self, service, league):
        rows = {row.name: row for row in service.get_standings(league["championship"].id)[0].rows}
        assert rows["Beta EC"].yellow_cards == 1
        assert rows["Gamma SC"].yellow_cards == 1
        assert rows["Alpha FC"].yellow_cards == 0

    def test_unknown_championship(self, service):
        with pytest.raises(ValueError, match="not found"):
            service.get_standings(999)

    def test_championship_points_are_used(self, service, league, session):
        championship = league["championship"]
        championship.points_win = 2
        session.add(championship)
        session.commit()

        rows = service.get_standings(championship.id)[0].rows
        assert rows[0].points == 2

    def test_negative_zone_sizes_count_as_zero(self, service, league, session):
        championship = league["championship"]
        championship.zone_relegation = -1
        session.add(championship)
        session.commit()

        rows = service.get_standings(championship.id)[0].rows
        assert [row.zone for row in rows] == [Zone.PROMOTION, Zone.NEUTRAL, Zone.NEUTRAL]

        config = zone_config_for(championship)
        assert (config.promotion, config.relegation) == (1, 0)

    def test_championship_tiebreakers_are_used(self, service, session):
        championship = Championship(name="Copa", slug="copa", tiebreakers=["fewest_yellow"])
        session.add(championship)
        session.commit()
        session.refresh(championship)

        first = Team(championship_id=championship.id, name="First", short_name="FST")
        second = Team(championship_id=championship.id, name="Second", short_name="SND")
        session.add_all([first, second])
        session.commit()
        session.refresh(first)
        session.refresh(second)

        match = Match(
            championship_id=championship.id, home_team_id=first.id, away_team_id=second.id,
            status=MatchStatus.FINISHED, home_score=1, away_score=1,
        )
        session.add(match)
        session.commit()
        session.refresh(match)

        session.add(MatchEvent(match_id=match.id, team_id=first.id, type=MatchEventType.YELLOW_CARD))
        session.commit()

        rows = service.get_standings(championship.id)[0].rows
        assert [row.name for row in rows] == ["Second", "First"]


class TestGroups:

    @pytest.fixture
    def grouped(self, session):
        championship = Championship(
            name="Copa Grupos", slug="copa-grupos",
            zone_mode=ZONE_MODE_SERIES, zone_promotion=1, zone_gold=1, zone_relegation=0,
        )
        session.add(championship)
        session.commit()
        session.refresh(championship)

        group_a = Group(championship_id=championship.id, name="Group A")
        group_b = Group(championship_id=championship.id, name="Group B")
        session.add_all([group_a, group_b])
        session.commit()
        session.refresh(group_a)
        session.refresh(group_b)

        teams = [
            Team(championship_id=championship.id, group_id=group_a.id, name="A1", short_name="A1"),
            Team(championship_id=championship.id, group_id=group_a.id, name="A2", short_name="A2"),
            Team(championship_id=championship.id, group_id=group_b.id, name="B1", short_name="B1"),
            Team(championship_id=championship.id, group_id=group_b.id, name="B2", short_name="B2"),
            Team(championship_id=championship.id, group_id=None, name="Loose", short_name="LSE"),
        ]
        session.add_all(teams)
        session.commit()
        for team in teams:
            session.refresh(team)

        a1, a2, b1, b2, _ = teams
        session.add_all([
            Match(championship_id=championship.id, group_id=group_a.id, home_team_id=a1.id,
                  away_team_id=a2.id, status=MatchStatus.FINISHED, home_score=0, away_score=1),
            Match(championship_id=championship.id, group_id=group_b.id, home_team_id=b1.id,
                  away_team_id=b2.id, status=MatchStatus.FINISHED, home_score=3, away_score=0),
            # Cross-group friendly never counts for either table
            Match(championship_id=championship.id, home_team_id=a1.id,
                  away_team_id=b2.id, status=MatchStatus.FINISHED, home_score=5, away_score=0),
        ])
        session.commit()
        return championship

    def test_one_table_per_group(self, service, grouped):
        tables = service.get_standings(grouped.id)

        assert [t.group_name for t in tables] == ["Group A", "Group B"]
        assert [row.name for row in tables[0].rows] == ["A2", "A1"]
        assert [row.name for row in tables[1].rows] == ["B1", "B2"]
        assert all(row.played == 1 for t in tables for row in t.rows)

    def test_teams_without_group_are_left_out(self, service, grouped):
        names = {row.name for t in service.get_standings(grouped.id) for row in t.rows}
        assert "Loose" not in names

    def test_series_mode_enables_tiers(self, service, grouped):
        tables = service.get_standings(grouped.id)
        assert [row.zone for row in tables[0].rows] == [Zone.PROMOTION, Zone.GOLD]

    def test_traditional_mode_ignores_tiers(self, grouped):
        grouped.zone_mode = "traditional"
        config = zone_config_for(grouped)
        assert (config.promotion, config.gold, config.silver, config.bronze) == (1, 0, 0, 0)


class TestSimulator:

    def test_simulated_table(self, service, league, session):
        round_3 = league["matches"]["round_3"]
        tables = service.simulate(league["championship"].id, {round_3.id: SimulatedScore(home=0, away=3)})

        assert [row.name for row in tables[0].rows] == ["Gamma SC", "Alpha FC", "Beta EC"]

        session.refresh(round_3)
        assert round_3.status == MatchStatus.SCHEDULED
        assert (round_3.home_score, round_3.away_score) == (0, 0)

    def test_blank_score_changes_nothing(self, service, league):
        round_3 = league["matches"]["round_3"]
        real = service.get_standings(league["championship"].id)
        simulated = service.simulate(league["championship"].id, {round_3.id: SimulatedScore(home=1)})
        assert [r.model_dump() for r in simulated[0].rows] == [r.model_dump() for r in real[0].rows]

    def test_rounds_and_fixtures(self, service, league):
        championship_id = league["championship"].id
        assert service.get_simulator_rounds(championship_id) == ["Round 3"]

        result = service.get_simulator_fixtures(championship_id)
        assert result["round"] == "Round 3"
        assert [m.id for m in result["fixtures"]] == [league["matches"]["round_3"].id]

        assert service.get_simulator_fixtures(championship_id, "Round 1")["fixtures"] == []

    def test_no_pending_rounds(self, service, league, session):
        round_3 = league["matches"]["round_3"]
        round_3.status = MatchStatus.FINISHED
        session.add(round_3)
        session.commit()

        assert service.get_simulator_fixtures(league["championship"].id) == {"round": None, "fixtures": []}


class TestBoards:

    def test_top_scorers(self, service, league):
        board = service.get_top_scorers(league["championship"].id)
        assert [(e.name, e.goals, e.team_short_name) for e in board] == [
            ("Artur", 2, "ALP"),
            ("Beto", 1, "BET"),
        ]

    def test_top_goalkeepers(self, service, league):
        board = service.get_top_goalkeepers(league["championship"].id)
        assert [(e.name, e.goals_conceded, e.games_played, e.average) for e in board] == [
            ("Caio", 0, 1, "0.00"),
            ("Ana", 1, 1, "1.00"),
            ("Bruno", 2, 2, "1.00"),
        ]

    def test_team_scorers(self, service, league):
        board = service.get_team_scorers(league["teams"]["alpha"].id)
        assert [(e.name, e.goals) for e in board] == [("Artur", 2)]

    def test_team_scorers_unknown_team(self, service):
        with pytest.raises(ValueError, match="Team 404 not found"):
            service.get_team_scorers(404)


class TestStatistics:

    def test_statistics(self, service, league):
        stats = service.get_statistics(league["championship"].id, "Round 1")

        assert stats["summary"] == {"total_games": 2, "total_goals": 3, "average_goals": "1.50"}
        assert stats["round"]["total_goals"] == 3
        assert stats["highlights"]["best_attack"]["name"] == "Alpha FC"
        assert stats["highlights"]["most_booked_player"]["cards"] == 1

    def test_round_is_optional(self, service, league):
        assert service.get_statistics(league["championship"].id)["round"] is None
