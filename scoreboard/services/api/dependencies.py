"""FastAPI dependencies: lifetime of service instances."""
from __future__ import annotations

from scoreboard.services.data_service import SportsDataService, sports_data_service
from scoreboard.services.view_model import SportsViewModel

# Process-wide view model so favourites survive between requests
_view_model = SportsViewModel(sports_data_service)


# 1. Data service (global singleton)
def get_data_service() -> SportsDataService:
    return sports_data_service


# 2. View model (global singleton)
def get_view_model() -> SportsViewModel:
    """
    Shared view model

    Loaded lazily by the scores router on first use.
    """
    return _view_model
