"""
Print the scoreboard (live / upcoming / final) from the mock data service
"""
import asyncio
import os
import sys
sys.path.append(os.getcwd())

from scoreboard.models.sport import Game
from scoreboard.services.view_model import SportsViewModel
from scoreboard.shared.log_config import setup_logging


def format_game(game: Game) -> str:
    away, home = game.away_team, game.home_team
    if game.home_score is None or game.away_score is None:
        score = "  -  "
    else:
        score = f"{game.away_score:>2} - {game.home_score:<2}"
    return f"  {away.abbreviation:>4} {score} {home.abbreviation:<4}  {game.time_label}"


async def show_scores(league: str = None, search: str = "") -> int:
    view_model = SportsViewModel()
    await view_model.load_data()

    if view_model.error_message:
        print(view_model.error_message)
        return 1

    if league:
        view_model.selected_league = next(
            (l for l in view_model.leagues if l.abbreviation.casefold() == league.casefold()),
            None,
        )
        if view_model.selected_league is None:
            print(f"Unknown league: {league}")
            return 1
    view_model.search_text = search

    sections = [
        ("Live Now", view_model.live_games),
        ("Upcoming", view_model.upcoming_games),
        ("Final", view_model.final_games),
    ]

    print("=" * 40)
    for title, games in sections:
        if not games:
            continue
        print(title)
        print("-" * 40)
        for game in games:
            print(format_game(game))
        print()

    if not view_model.filtered_games:
        print("No Games Found")

    print("Favorites: " + ", ".join(t.full_name for t in view_model.favorite_teams))
    print("=" * 40)
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Scoreboard viewer")
    parser.add_argument("--league", type=str, help="League abbreviation, e.g. NFL")
    parser.add_argument("--search", type=str, default="", help="Filter by team name")
    parser.add_argument("--log-level", type=str, default="WARNING")

    args = parser.parse_args()
    setup_logging(args.log_level)
    sys.exit(asyncio.run(show_scores(args.league, args.search)))
