"""
Service-layer configuration

Tunables of the service layer, kept here instead of hard-coded.
"""
from dataclasses import dataclass

from scoreboard.shared.config import get_settings


@dataclass
class DataConfig:
    """Mock data service configuration"""

    # Simulated fetch latency (milliseconds)
    GAMES_DELAY_MS: int = 500
    LEAGUES_DELAY_MS: int = 300
    FAVORITES_DELAY_MS: int = 200
    TEAMS_DELAY_MS: int = 200


def _data_config_from_settings() -> DataConfig:
    source = get_settings().service.data_source
    return DataConfig(
        GAMES_DELAY_MS=source.games_delay_ms,
        LEAGUES_DELAY_MS=source.leagues_delay_ms,
        FAVORITES_DELAY_MS=source.favorites_delay_ms,
        TEAMS_DELAY_MS=source.teams_delay_ms,
    )


# Global config instance
data_config = _data_config_from_settings()
