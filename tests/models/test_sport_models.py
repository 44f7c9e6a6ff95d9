"""
Domain model tests

Covers:
1. Team full name and favourite flag
2. Status display text and derived live/final flags
3. Game invariants
4. Card helpers (winner, time label)
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from scoreboard.models.sport import Game, GameStatus, League, SportType, Team


class TestTeam:

    def test_full_name(self, sample_league):
        team = Team(
            name="49ers",
            abbreviation="SF",
            location="San Francisco",
            primary_color="#AA0000",
            league_id=sample_league.id,
        )
        assert team.full_name == "San Francisco 49ers"
        assert team.is_favorite is False

    def test_only_favorite_flag_is_mutable(self, make_team):
        team = make_team()
        team.is_favorite = True
        assert team.is_favorite

        with pytest.raises(ValidationError):
            team.name = "Renamed"


class TestLeague:

    def test_league_is_immutable(self, sample_league):
        with pytest.raises(ValidationError):
            sample_league.abbreviation = "XX"

    def test_sport_icon(self):
        league = League(name="National Hockey League", sport=SportType.HOCKEY, abbreviation="NHL")
        assert league.sport.icon_name == "hockey.puck.fill"
        assert SportType.SOCCER.icon_name == "soccerball"


class TestGameStatus:

    def test_display_text(self):
        assert GameStatus.SCHEDULED.display_text == "Upcoming"
        assert GameStatus.IN_PROGRESS.display_text == "LIVE"
        assert GameStatus.FINAL.display_text == "Final"
        assert GameStatus.POSTPONED.display_text == "Postponed"

    @pytest.mark.parametrize("status", list(GameStatus))
    def test_live_and_final_follow_status(self, make_game, status):
        scored = status in (GameStatus.IN_PROGRESS, GameStatus.FINAL)
        game = make_game(
            status=status,
            home_score=1 if scored else None,
            away_score=0 if scored else None,
        )
        assert game.is_live == (status == GameStatus.IN_PROGRESS)
        assert game.is_final == (status == GameStatus.FINAL)


class TestGameInvariants:

    def test_scheduled_game_cannot_have_score(self, make_game):
        with pytest.raises(ValidationError, match="cannot carry a score"):
            make_game(status=GameStatus.SCHEDULED, home_score=3, away_score=1)

    def test_postponed_game_cannot_have_score(self, make_game):
        with pytest.raises(ValidationError):
            make_game(status=GameStatus.POSTPONED, home_score=0)

    def test_team_from_other_league_rejected(self, make_game, foreign_league_id):
        outsider = Team(
            name="Outsiders",
            abbreviation="OUT",
            location="Elsewhere",
            primary_color="#FFFFFF",
            league_id=foreign_league_id,
        )
        with pytest.raises(ValidationError, match="belongs to league"):
            make_game(away=outsider)

    def test_same_team_on_both_sides_rejected(self, make_game, make_team):
        team = make_team()
        with pytest.raises(ValidationError, match="different teams"):
            make_game(home=team, away=team)

    def test_negative_score_rejected(self, make_game):
        with pytest.raises(ValidationError):
            make_game(status=GameStatus.FINAL, home_score=-1, away_score=2)

    def test_naive_datetime_rejected(self, make_team, sample_league):
        with pytest.raises(ValidationError):
            Game(
                home_team=make_team("A", "A"),
                away_team=make_team("B", "B"),
                status=GameStatus.SCHEDULED,
                scheduled_time=datetime(2025, 3, 12, 19, 30),
                league_id=sample_league.id,
            )


class TestGameHelpers:

    def test_is_winning(self, make_game):
        game = make_game(status=GameStatus.IN_PROGRESS, home_score=21, away_score=17)
        assert game.is_winning(game.home_team)
        assert not game.is_winning(game.away_team)

    def test_tied_game_has_no_winner(self, make_game):
        game = make_game(status=GameStatus.FINAL, home_score=7, away_score=7)
        assert not game.is_winning(game.home_team)
        assert not game.is_winning(game.away_team)

    def test_no_winner_without_scores(self, make_game):
        game = make_game(status=GameStatus.SCHEDULED)
        assert not game.is_winning(game.home_team)

    def test_time_label(self, make_game):
        kickoff = datetime(2025, 3, 12, 19, 30, tzinfo=timezone.utc)
        assert make_game(status=GameStatus.SCHEDULED, scheduled_time=kickoff).time_label == "19:30"
        assert make_game(status=GameStatus.IN_PROGRESS, home_score=0, away_score=0).time_label == "In Progress"
        assert make_game(status=GameStatus.FINAL, home_score=1, away_score=0).time_label == "Final"
        assert make_game(status=GameStatus.POSTPONED).time_label == "Postponed"

    def test_default_ids_are_unique(self, make_game):
        assert make_game().id != make_game().id
