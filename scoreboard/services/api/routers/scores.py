"""Scores API routes: leagues, games, favourites."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from scoreboard.services import game_filters
from scoreboard.services.api.dependencies import get_data_service, get_view_model
from scoreboard.services.api.schemas.scores import (
    FavoriteTeamItem,
    GameItem,
    GamesResponse,
    LeagueItem,
    RefreshResponse,
    TeamItem,
    TeamsByLeague,
    ToggleFavoriteResponse,
)
from scoreboard.services.data_service import SportsDataService
from scoreboard.services.view_model import SportsViewModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scores", tags=["Scores"])

_load_lock = asyncio.Lock()


async def _ensure_loaded(view_model: SportsViewModel) -> SportsViewModel:
    """Load the view model on first use; 503 if the data source failed."""
    if not view_model.has_loaded:
        async with _load_lock:
            if not view_model.has_loaded:
                await view_model.load_data()

    if not view_model.has_loaded:
        raise HTTPException(status_code=503, detail=view_model.error_message or "Data not loaded")
    return view_model


def _favorite_ids(view_model: SportsViewModel) -> frozenset:
    return frozenset(team.id for team in view_model.favorite_teams)


@router.get("/leagues", response_model=list[LeagueItem])
async def list_leagues(
    view_model: SportsViewModel = Depends(get_view_model),
) -> list[LeagueItem]:
    await _ensure_loaded(view_model)
    return [LeagueItem.from_league(league) for league in view_model.leagues]


@router.get("/teams", response_model=TeamsByLeague)
async def list_teams(
    view_model: SportsViewModel = Depends(get_view_model),
    data_service: SportsDataService = Depends(get_data_service),
) -> TeamsByLeague:
    """Every team, grouped by league abbreviation."""
    await _ensure_loaded(view_model)
    favorites = _favorite_ids(view_model)
    return {
        abbreviation: [TeamItem.from_team(team, team.id in favorites) for team in teams]
        for abbreviation, teams in data_service.teams_by_league().items()
    }


@router.get("/games", response_model=GamesResponse)
async def list_games(
    league: Optional[str] = Query(None, description="League abbreviation or ID"),
    search: str = Query("", description="Case-insensitive match on team names"),
    view_model: SportsViewModel = Depends(get_view_model),
    data_service: SportsDataService = Depends(get_data_service),
) -> GamesResponse:
    """
    Games split into live / upcoming / final sections

    - live: in-progress games
    - upcoming: scheduled games, soonest first
    - final: finished games, most recent first
    """
    await _ensure_loaded(view_model)

    league_id = None
    if league:
        resolved = data_service.get_league(league)
        if resolved is None:
            raise HTTPException(status_code=404, detail=f"League not found: {league}")
        league_id = resolved.id

    filtered = game_filters.filter_games(view_model.games, league_id, search)
    favorites = _favorite_ids(view_model)

    def items(games):
        return [GameItem.from_game(game, favorites) for game in games]

    return GamesResponse(
        live=items(game_filters.live_games(filtered)),
        upcoming=items(game_filters.upcoming_games(filtered)),
        final=items(game_filters.final_games(filtered)),
        total=len(filtered),
    )


@router.get("/games/{game_id}", response_model=GameItem)
async def get_game(
    game_id: UUID,
    view_model: SportsViewModel = Depends(get_view_model),
) -> GameItem:
    await _ensure_loaded(view_model)
    game = view_model.get_game(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail=f"Game not found: {game_id}")
    return GameItem.from_game(game, _favorite_ids(view_model))


@router.get("/favorites", response_model=list[FavoriteTeamItem])
async def list_favorites(
    view_model: SportsViewModel = Depends(get_view_model),
) -> list[FavoriteTeamItem]:
    await _ensure_loaded(view_model)

    result = []
    for team in view_model.favorite_teams:
        league = view_model.league_for(team)
        result.append(
            FavoriteTeamItem(
                **TeamItem.from_team(team).model_dump(),
                league_abbreviation=league.abbreviation if league else None,
            )
        )
    return result


@router.post("/favorites/{team}/toggle", response_model=ToggleFavoriteResponse)
async def toggle_favorite(
    team: str,
    view_model: SportsViewModel = Depends(get_view_model),
    data_service: SportsDataService = Depends(get_data_service),
) -> ToggleFavoriteResponse:
    """Toggle a team (abbreviation or ID) in or out of the favourites."""
    await _ensure_loaded(view_model)

    resolved = data_service.get_team(team)
    if resolved is None:
        raise HTTPException(status_code=404, detail=f"Team not found: {team}")

    is_favorite = view_model.toggle_favorite(resolved)
    return ToggleFavoriteResponse(team_id=resolved.id, is_favorite=is_favorite)


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(
    view_model: SportsViewModel = Depends(get_view_model),
) -> RefreshResponse:
    """
    Reload from the data source. Favourites reset to the source's list.

    A failed reload keeps the previous data and reports status "error".
    """
    await view_model.refresh()
    if view_model.error_message:
        logger.warning(f"Refresh failed: {view_model.error_message}")

    return RefreshResponse(
        status="error" if view_model.error_message else "success",
        games=len(view_model.games),
        error=view_model.error_message,
    )
