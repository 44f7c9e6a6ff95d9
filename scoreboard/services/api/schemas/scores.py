"""Scores API schemas."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from scoreboard.models.sport import Game, GameStatus, League, SportType, Team
from scoreboard.shared.colors import parse_hex_color


class LeagueItem(BaseModel):
    id: UUID
    name: str
    sport: SportType
    abbreviation: str
    icon_name: str

    @classmethod
    def from_league(cls, league: League) -> "LeagueItem":
        return cls(
            id=league.id,
            name=league.name,
            sport=league.sport,
            abbreviation=league.abbreviation,
            icon_name=league.sport.icon_name,
        )


class TeamItem(BaseModel):
    id: UUID
    name: str
    abbreviation: str
    location: str
    full_name: str
    primary_color: str
    # (r, g, b, a); None when the colour tag does not parse, clients render grey
    color_rgba: Optional[List[int]] = None
    league_id: UUID
    is_favorite: bool

    @classmethod
    def from_team(cls, team: Team, is_favorite: Optional[bool] = None) -> "TeamItem":
        rgba = parse_hex_color(team.primary_color)
        return cls(
            id=team.id,
            name=team.name,
            abbreviation=team.abbreviation,
            location=team.location,
            full_name=team.full_name,
            primary_color=team.primary_color,
            color_rgba=list(rgba) if rgba else None,
            league_id=team.league_id,
            is_favorite=team.is_favorite if is_favorite is None else is_favorite,
        )


class GameItem(BaseModel):
    id: UUID
    league_id: UUID
    home_team: TeamItem
    away_team: TeamItem
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    status: GameStatus
    status_text: str
    time_label: str
    scheduled_time: datetime
    is_live: bool
    is_final: bool
    home_winning: bool
    away_winning: bool

    @classmethod
    def from_game(cls, game: Game, favorite_ids: frozenset = frozenset()) -> "GameItem":
        return cls(
            id=game.id,
            league_id=game.league_id,
            home_team=TeamItem.from_team(game.home_team, game.home_team.id in favorite_ids),
            away_team=TeamItem.from_team(game.away_team, game.away_team.id in favorite_ids),
            home_score=game.home_score,
            away_score=game.away_score,
            status=game.status,
            status_text=game.status.display_text,
            time_label=game.time_label,
            scheduled_time=game.scheduled_time,
            is_live=game.is_live,
            is_final=game.is_final,
            home_winning=game.is_winning(game.home_team),
            away_winning=game.is_winning(game.away_team),
        )


class GamesResponse(BaseModel):
    live: List[GameItem] = Field(default_factory=list)
    upcoming: List[GameItem] = Field(default_factory=list)
    final: List[GameItem] = Field(default_factory=list)
    total: int = 0


class FavoriteTeamItem(TeamItem):
    league_abbreviation: Optional[str] = None


class ToggleFavoriteResponse(BaseModel):
    team_id: UUID
    is_favorite: bool


class RefreshResponse(BaseModel):
    status: str
    games: int
    error: Optional[str] = None


TeamsByLeague = Dict[str, List[TeamItem]]
