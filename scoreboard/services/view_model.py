"""
SportsViewModel - screen state for the scores app

Responsibilities:
1. Load games, leagues and favourite teams from SportsDataService
2. Hold the user's filters (selected league, search text)
3. Derive live / upcoming / final game lists from the filters
4. Track favourite teams

Favourites are tracked by team ID. Every team handed out (in games or in
`favorite_teams`) is the canonical record with `is_favorite` set from that
membership, so the flag never disagrees with `is_favorite(team)`.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional
from uuid import UUID

from scoreboard.models.sport import Game, GameStatus, League, Team
from scoreboard.services import game_filters
from scoreboard.services.data_service import SportsDataService, sports_data_service

logger = logging.getLogger(__name__)


class SportsViewModel:
    """Main view model of the scores app"""

    def __init__(self, data_service: Optional[SportsDataService] = None):
        self._data_service = data_service or sports_data_service

        self._games: List[Game] = []
        self._leagues: List[League] = []
        self._favorite_ids: List[UUID] = []
        self._teams_by_id: Dict[UUID, Team] = {}
        self._is_loading = False
        self._has_loaded = False
        self._error_message: Optional[str] = None

        self.selected_league: Optional[League] = None
        self.search_text: str = ""

    # ==================== State ====================

    @property
    def games(self) -> List[Game]:
        return [self._with_favorites(game) for game in self._games]

    @property
    def leagues(self) -> List[League]:
        return list(self._leagues)

    @property
    def favorite_teams(self) -> List[Team]:
        return [
            self._team_view(self._teams_by_id[team_id]) for team_id in self._favorite_ids
        ]

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def has_loaded(self) -> bool:
        return self._has_loaded

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    # ==================== Derived ====================

    @property
    def filtered_games(self) -> List[Game]:
        """Games matching the selected league and the search text"""
        league_id = self.selected_league.id if self.selected_league else None
        return game_filters.filter_games(self.games, league_id, self.search_text)

    @property
    def games_by_status(self) -> Dict[GameStatus, List[Game]]:
        return game_filters.group_by_status(self.filtered_games)

    @property
    def live_games(self) -> List[Game]:
        return game_filters.live_games(self.filtered_games)

    @property
    def upcoming_games(self) -> List[Game]:
        return game_filters.upcoming_games(self.filtered_games)

    @property
    def final_games(self) -> List[Game]:
        return game_filters.final_games(self.filtered_games)

    def get_game(self, game_id: UUID) -> Optional[Game]:
        return next((g for g in self.games if g.id == game_id), None)

    def league_for(self, team: Team) -> Optional[League]:
        """League the team plays in, among the loaded leagues"""
        return next((league for league in self._leagues if league.id == team.league_id), None)

    # ==================== Loading ====================

    async def load_data(self) -> None:
        """
        Load games, leagues and favourites concurrently

        A failed fetch is reported through `error_message`; the previously
        loaded data stays in place.
        """
        self._is_loading = True
        self._error_message = None

        try:
            games, leagues, favorites = await asyncio.gather(
                self._data_service.fetch_games(),
                self._data_service.fetch_leagues(),
                self._data_service.fetch_favorite_teams(),
            )
        except Exception as e:
            logger.error(f"Failed to load data: {e}", exc_info=True)
            self._error_message = f"Failed to load data: {e}"
        else:
            self._games = games
            self._leagues = leagues
            self._teams_by_id = {}
            for game in games:
                self._register_team(game.home_team)
                self._register_team(game.away_team)
            for team in favorites:
                self._register_team(team)
            self._favorite_ids = [team.id for team in favorites]
            self._has_loaded = True
            logger.info(
                f"Loaded {len(games)} games, {len(leagues)} leagues, "
                f"{len(favorites)} favorite teams"
            )
        finally:
            self._is_loading = False

    async def refresh(self) -> None:
        await self.load_data()

    # ==================== Favourites ====================

    def _register_team(self, team: Team) -> None:
        self._teams_by_id.setdefault(team.id, team.model_copy(update={"is_favorite": False}))

    def _team_view(self, team: Team) -> Team:
        """Canonical record of `team` flagged with its current membership"""
        canonical = self._teams_by_id.get(team.id, team)
        return canonical.model_copy(update={"is_favorite": team.id in self._favorite_ids})

    def _with_favorites(self, game: Game) -> Game:
        return game.model_copy(update={
            "home_team": self._team_view(game.home_team),
            "away_team": self._team_view(game.away_team),
        })

    def toggle_favorite(self, team: Team) -> bool:
        """
        Flip the team's favourite membership

        Returns:
            True if the team is a favourite after the call
        """
        self._register_team(team)

        if team.id in self._favorite_ids:
            self._favorite_ids.remove(team.id)
            logger.info(f"Removed favorite: {team.full_name}")
            return False

        self._favorite_ids.append(team.id)
        logger.info(f"Added favorite: {team.full_name}")
        return True

    def is_favorite(self, team: Team) -> bool:
        return team.id in self._favorite_ids
