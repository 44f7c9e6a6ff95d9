"""
Pytest configuration

Shared fixtures:
1. Zero-latency data service and view model
2. Loaded view model
3. HTTP client against the FastAPI app
4. Sample domain objects
"""
import os
from datetime import datetime, timezone
from typing import AsyncGenerator
from uuid import uuid4

import pytest
import pytest_asyncio

os.environ.setdefault("SCOREBOARD_ENVIRONMENT", "test")

from scoreboard.models.sport import Game, GameStatus, League, SportType, Team
from scoreboard.services.config import DataConfig
from scoreboard.services.data_service import SportsDataService
from scoreboard.services.view_model import SportsViewModel


# ============ Services ============

@pytest.fixture
def data_service() -> SportsDataService:
    """Data service without simulated latency"""
    return SportsDataService(
        DataConfig(GAMES_DELAY_MS=0, LEAGUES_DELAY_MS=0, FAVORITES_DELAY_MS=0, TEAMS_DELAY_MS=0)
    )


@pytest.fixture
def view_model(data_service: SportsDataService) -> SportsViewModel:
    return SportsViewModel(data_service)


@pytest_asyncio.fixture
async def loaded_view_model(view_model: SportsViewModel) -> SportsViewModel:
    await view_model.load_data()
    return view_model


# ============ HTTP client ============

@pytest_asyncio.fixture
async def client(data_service: SportsDataService) -> AsyncGenerator:
    """
    FastAPI test client

    The app's singletons are replaced by a fresh zero-latency view model per test.
    """
    from httpx import AsyncClient, ASGITransport
    from scoreboard.services.api.dependencies import get_data_service, get_view_model
    from scoreboard.services.api.main import app

    view_model = SportsViewModel(data_service)
    app.dependency_overrides[get_data_service] = lambda: data_service
    app.dependency_overrides[get_view_model] = lambda: view_model

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


# ============ Sample data ============

@pytest.fixture
def sample_league() -> League:
    return League(name="Test League", sport=SportType.FOOTBALL, abbreviation="TL")


@pytest.fixture
def make_team(sample_league: League):
    """Factory for teams in the sample league"""
    def _make(name: str = "Test Team", abbreviation: str = "TT", location: str = "Test City") -> Team:
        return Team(
            name=name,
            abbreviation=abbreviation,
            location=location,
            primary_color="#000000",
            league_id=sample_league.id,
        )
    return _make


@pytest.fixture
def make_game(sample_league: League, make_team):
    """Factory for games in the sample league"""
    def _make(
        status: GameStatus = GameStatus.SCHEDULED,
        scheduled_time: datetime = None,
        home_score: int = None,
        away_score: int = None,
        home: Team = None,
        away: Team = None,
    ) -> Game:
        return Game(
            home_team=home or make_team("Home", "HOM", "Home City"),
            away_team=away or make_team("Away", "AWY", "Away City"),
            home_score=home_score,
            away_score=away_score,
            status=status,
            scheduled_time=scheduled_time or datetime.now(timezone.utc),
            league_id=sample_league.id,
        )
    return _make


@pytest.fixture
def foreign_league_id():
    return uuid4()
