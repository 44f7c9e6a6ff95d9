"""game_filters tests: subset semantics, ordering, tie handling"""
from datetime import datetime, timedelta, timezone

from scoreboard.models.sport import GameStatus
from scoreboard.services import game_filters

T0 = datetime(2025, 3, 12, 18, 0, tzinfo=timezone.utc)


def test_filter_without_criteria_returns_everything(make_game):
    games = [make_game(), make_game()]
    assert game_filters.filter_games(games) == games


def test_filter_by_league(make_game, sample_league, foreign_league_id):
    games = [make_game(), make_game()]
    assert game_filters.filter_games(games, league_id=sample_league.id) == games
    assert game_filters.filter_games(games, league_id=foreign_league_id) == []


def test_search_matches_location_or_name(make_game, make_team):
    warriors = make_team("Warriors", "GSW", "Golden State")
    game = make_game(home=warriors)

    assert game_filters.filter_games([game], search_text="golden") == [game]
    assert game_filters.filter_games([game], search_text="WARRIORS") == [game]
    assert game_filters.filter_games([game], search_text="State Warr") == [game]
    assert game_filters.filter_games([game], search_text="Lakers") == []


def test_search_matches_away_team(make_game, make_team):
    game = make_game(away=make_team("Heat", "MIA", "Miami"))
    assert game_filters.matches_search(game, "miami heat")


def test_filter_preserves_input_order(make_game):
    games = [make_game(scheduled_time=T0 + timedelta(hours=h)) for h in (3, 1, 2)]
    assert game_filters.filter_games(games) == games


def test_upcoming_ascending_with_stable_ties(make_game):
    a = make_game(scheduled_time=T0 + timedelta(hours=2))
    b = make_game(scheduled_time=T0)
    c = make_game(scheduled_time=T0 + timedelta(hours=2))
    live = make_game(status=GameStatus.IN_PROGRESS, home_score=0, away_score=0, scheduled_time=T0)

    assert game_filters.upcoming_games([a, b, live, c]) == [b, a, c]


def test_final_descending_with_stable_ties(make_game):
    def final(hours):
        return make_game(status=GameStatus.FINAL, home_score=1, away_score=0,
                         scheduled_time=T0 - timedelta(hours=hours))

    a, b, c = final(1), final(3), final(1)
    assert game_filters.final_games([b, a, c]) == [a, c, b]


def test_postponed_games_are_in_no_section(make_game):
    postponed = make_game(status=GameStatus.POSTPONED)
    games = [postponed]

    assert game_filters.live_games(games) == []
    assert game_filters.upcoming_games(games) == []
    assert game_filters.final_games(games) == []
    assert game_filters.group_by_status(games) == {GameStatus.POSTPONED: [postponed]}


def test_live_games(make_game):
    live = make_game(status=GameStatus.IN_PROGRESS, home_score=3, away_score=2)
    scheduled = make_game()
    assert game_filters.live_games([scheduled, live]) == [live]
