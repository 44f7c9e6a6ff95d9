"""
SportsDataService - mock data access layer

Responsibilities:
1. Own the static fixtures (leagues, teams, games)
2. Expose async fetches that simulate network latency
3. Resolve leagues/teams by abbreviation or ID for the API layer

Notes:
- Everything is in memory; nothing is persisted
- Callers always receive copies, so mutating a result never touches the fixtures
- A production build would swap this for a real provider client
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from scoreboard.models.sport import Game, GameStatus, League, SportType, Team
from scoreboard.services.config import DataConfig, data_config

logger = logging.getLogger(__name__)

# Game IDs are derived from the matchup so they stay stable across fetches
_GAME_NAMESPACE = uuid.UUID("6f1c3a52-2d7e-4b8a-9a51-3f0e4c1d2b77")


class SportsDataService:
    """
    Mock sports data service

    Fixture leagues and teams are built once per instance; games are
    rebuilt on every call so their times track the current clock.
    """

    def __init__(self, config: Optional[DataConfig] = None):
        self._config = config or data_config
        self._leagues = self._build_leagues()
        self._teams = self._build_teams()

    # ==================== Fixtures ====================

    @staticmethod
    def _build_leagues() -> List[League]:
        return [
            League(name="National Football League", sport=SportType.FOOTBALL, abbreviation="NFL"),
            League(name="National Basketball Association", sport=SportType.BASKETBALL, abbreviation="NBA"),
            League(name="Major League Baseball", sport=SportType.BASEBALL, abbreviation="MLB"),
            League(name="National Hockey League", sport=SportType.HOCKEY, abbreviation="NHL"),
            League(name="Major League Soccer", sport=SportType.SOCCER, abbreviation="MLS"),
        ]

    def _build_teams(self) -> List[Team]:
        nfl = self._league_by_abbreviation("NFL")
        nba = self._league_by_abbreviation("NBA")

        return [
            # NFL
            Team(name="49ers", abbreviation="SF", location="San Francisco",
                 primary_color="#AA0000", league_id=nfl.id, is_favorite=True),
            Team(name="Chiefs", abbreviation="KC", location="Kansas City",
                 primary_color="#E31837", league_id=nfl.id),
            Team(name="Cowboys", abbreviation="DAL", location="Dallas",
                 primary_color="#003594", league_id=nfl.id),
            Team(name="Eagles", abbreviation="PHI", location="Philadelphia",
                 primary_color="#004C54", league_id=nfl.id),
            # NBA
            Team(name="Warriors", abbreviation="GSW", location="Golden State",
                 primary_color="#1D428A", league_id=nba.id, is_favorite=True),
            Team(name="Lakers", abbreviation="LAL", location="Los Angeles",
                 primary_color="#552583", league_id=nba.id),
            Team(name="Celtics", abbreviation="BOS", location="Boston",
                 primary_color="#007A33", league_id=nba.id),
            Team(name="Heat", abbreviation="MIA", location="Miami",
                 primary_color="#98002E", league_id=nba.id),
        ]

    def _league_by_abbreviation(self, abbreviation: str) -> League:
        return next(league for league in self._leagues if league.abbreviation == abbreviation)

    def _team_by_abbreviation(self, abbreviation: str) -> Team:
        return next(team for team in self._teams if team.abbreviation == abbreviation)

    def _game(
        self,
        league: str,
        home: str,
        away: str,
        status: GameStatus,
        scheduled_time: datetime,
        home_score: Optional[int] = None,
        away_score: Optional[int] = None,
    ) -> Game:
        home_team = self._team_by_abbreviation(home)
        away_team = self._team_by_abbreviation(away)
        return Game(
            id=uuid.uuid5(_GAME_NAMESPACE, f"{league}:{home}:{away}"),
            home_team=home_team.model_copy(),
            away_team=away_team.model_copy(),
            home_score=home_score,
            away_score=away_score,
            status=status,
            scheduled_time=scheduled_time,
            league_id=self._league_by_abbreviation(league).id,
        )

    def games(self, now: Optional[datetime] = None) -> List[Game]:
        """
        Build the sample games relative to `now`

        Args:
            now: reference time (timezone-aware), defaults to the current UTC time

        Returns:
            fresh list of games
        """
        now = now or datetime.now(timezone.utc)

        return [
            # NFL
            self._game("NFL", "SF", "KC", GameStatus.IN_PROGRESS, now - timedelta(hours=1),
                       home_score=21, away_score=17),
            self._game("NFL", "PHI", "DAL", GameStatus.FINAL, now - timedelta(hours=3),
                       home_score=28, away_score=24),
            # NBA
            self._game("NBA", "GSW", "LAL", GameStatus.IN_PROGRESS, now - timedelta(minutes=45),
                       home_score=95, away_score=89),
            self._game("NBA", "BOS", "MIA", GameStatus.SCHEDULED, now + timedelta(hours=2)),
        ]

    # ==================== Async fetches ====================

    @staticmethod
    async def _simulate_latency(delay_ms: int) -> None:
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)

    async def fetch_games(self) -> List[Game]:
        """Fetch games (simulated network call)"""
        await self._simulate_latency(self._config.GAMES_DELAY_MS)
        games = self.games()
        logger.debug(f"Fetched {len(games)} games")
        return games

    async def fetch_leagues(self) -> List[League]:
        """Fetch all leagues"""
        await self._simulate_latency(self._config.LEAGUES_DELAY_MS)
        logger.debug(f"Fetched {len(self._leagues)} leagues")
        return list(self._leagues)

    async def fetch_teams(self) -> List[Team]:
        """Fetch every team across leagues"""
        await self._simulate_latency(self._config.TEAMS_DELAY_MS)
        logger.debug(f"Fetched {len(self._teams)} teams")
        return [team.model_copy() for team in self._teams]

    async def fetch_favorite_teams(self) -> List[Team]:
        """Fetch teams flagged as favourites"""
        await self._simulate_latency(self._config.FAVORITES_DELAY_MS)
        favorites = [team.model_copy() for team in self._teams if team.is_favorite]
        logger.debug(f"Fetched {len(favorites)} favorite teams")
        return favorites

    # ==================== Lookups ====================

    def get_league(self, abbreviation_or_id: str) -> Optional[League]:
        """
        Resolve a league by abbreviation (case-insensitive) or ID

        Returns:
            the league, or None when nothing matches
        """
        key = abbreviation_or_id.strip().casefold()
        for league in self._leagues:
            if league.abbreviation.casefold() == key or str(league.id) == key:
                return league
        return None

    def get_team(self, abbreviation_or_id: str) -> Optional[Team]:
        """
        Resolve a team by abbreviation (case-insensitive) or ID

        Returns:
            a copy of the team, or None when nothing matches
        """
        key = abbreviation_or_id.strip().casefold()
        for team in self._teams:
            if team.abbreviation.casefold() == key or str(team.id) == key:
                return team.model_copy()
        return None

    def teams_by_league(self) -> Dict[str, List[Team]]:
        """Teams grouped by league abbreviation (leagues without teams map to [])"""
        grouped: Dict[str, List[Team]] = {league.abbreviation: [] for league in self._leagues}
        by_id = {league.id: league.abbreviation for league in self._leagues}
        for team in self._teams:
            grouped[by_id[team.league_id]].append(team.model_copy())
        return grouped


# Global singleton
sports_data_service = SportsDataService()
