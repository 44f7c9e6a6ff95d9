"""Domain models."""
from scoreboard.models.sport import Game, GameStatus, League, SportType, Team

__all__ = [
    "Game",
    "GameStatus",
    "League",
    "SportType",
    "Team",
]
