"""Global configuration loading and typed settings.

Reads YAML files from the config/ directory and maps them onto Pydantic
models. Missing files fall back to the defaults declared here.
"""
from __future__ import annotations

import functools
import pathlib
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root
BASE_DIR = pathlib.Path(__file__).resolve().parents[2]
CONFIG_DIR = BASE_DIR / "config"


def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from CONFIG_DIR, {} when absent"""
    path = CONFIG_DIR / filename
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


# --- Service Config Model ---
class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    enable_docs: bool = True


class DataSourceConfig(BaseModel):
    """Artificial latency of the mock data source, in milliseconds"""
    games_delay_ms: int = Field(default=500, ge=0)
    leagues_delay_ms: int = Field(default=300, ge=0)
    favorites_delay_ms: int = Field(default=200, ge=0)
    teams_delay_ms: int = Field(default=200, ge=0)


class ServiceConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    data_source: DataSourceConfig = Field(default_factory=DataSourceConfig)


# --- Settings aggregate ---
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCOREBOARD_", env_nested_delimiter="__")

    app_name: str = "Scoreboard"
    app_version: str = "0.1.0"
    environment: str = "dev"

    service: ServiceConfig = Field(default_factory=lambda: ServiceConfig(**_load_yaml("service.yaml")))


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings singleton."""
    return Settings()
