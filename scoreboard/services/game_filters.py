"""
Game filtering and derivation

Pure functions over an in-memory list of games. Every result is a subset of
the input; nothing here mutates its arguments.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional
from uuid import UUID

from scoreboard.models.sport import Game, GameStatus


def matches_search(game: Game, search_text: str) -> bool:
    """Case-insensitive substring match against either team's full name"""
    needle = search_text.casefold()
    return (
        needle in game.home_team.full_name.casefold()
        or needle in game.away_team.full_name.casefold()
    )


def filter_games(
    games: Iterable[Game],
    league_id: Optional[UUID] = None,
    search_text: str = "",
) -> List[Game]:
    """
    Restrict games by league and by team-name search

    Args:
        games: base collection
        league_id: keep only this league's games (None = all leagues)
        search_text: keep games where a team's full name contains it (empty = no filter)

    Returns:
        matching games, in input order
    """
    filtered = list(games)

    if league_id is not None:
        filtered = [g for g in filtered if g.league_id == league_id]

    if search_text:
        filtered = [g for g in filtered if matches_search(g, search_text)]

    return filtered


def group_by_status(games: Iterable[Game]) -> Dict[GameStatus, List[Game]]:
    grouped: Dict[GameStatus, List[Game]] = {}
    for game in games:
        grouped.setdefault(game.status, []).append(game)
    return grouped


def live_games(games: Iterable[Game]) -> List[Game]:
    return [g for g in games if g.is_live]


def upcoming_games(games: Iterable[Game]) -> List[Game]:
    """Scheduled games, soonest first"""
    return sorted(
        (g for g in games if g.status == GameStatus.SCHEDULED),
        key=lambda g: g.scheduled_time,
    )


def final_games(games: Iterable[Game]) -> List[Game]:
    """Finished games, most recent first"""
    # reverse=True keeps ties in input order
    return sorted(
        (g for g in games if g.is_final),
        key=lambda g: g.scheduled_time,
        reverse=True,
    )
