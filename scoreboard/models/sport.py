"""Domain entities: leagues, teams, games.

All entities are built once from fixtures and never persisted. The only
mutable state is a team's favourite flag.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator


class SportType(str, Enum):
    """Sports categories available in the app"""
    FOOTBALL = "Football"
    BASKETBALL = "Basketball"
    BASEBALL = "Baseball"
    HOCKEY = "Hockey"
    SOCCER = "Soccer"

    @property
    def icon_name(self) -> str:
        return _SPORT_ICONS[self]


_SPORT_ICONS = {
    SportType.FOOTBALL: "football.fill",
    SportType.BASKETBALL: "basketball.fill",
    SportType.BASEBALL: "baseball.fill",
    SportType.HOCKEY: "hockey.puck.fill",
    SportType.SOCCER: "soccerball",
}


class GameStatus(str, Enum):
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "Live"
    FINAL = "Final"
    POSTPONED = "Postponed"

    @property
    def display_text(self) -> str:
        return _STATUS_DISPLAY[self]


_STATUS_DISPLAY = {
    GameStatus.SCHEDULED: "Upcoming",
    GameStatus.IN_PROGRESS: "LIVE",
    GameStatus.FINAL: "Final",
    GameStatus.POSTPONED: "Postponed",
}

# Only started games may carry a score
_SCORED_STATUSES = (GameStatus.IN_PROGRESS, GameStatus.FINAL)


class League(BaseModel):
    """A sports organization grouping teams (NFL, NBA, ...)"""
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    sport: SportType
    abbreviation: str


class Team(BaseModel):
    """A franchise belonging to exactly one league"""
    id: UUID = Field(default_factory=uuid4, frozen=True)
    name: str = Field(frozen=True)
    abbreviation: str = Field(frozen=True)
    location: str = Field(frozen=True)
    primary_color: str = Field(frozen=True)
    league_id: UUID = Field(frozen=True)
    is_favorite: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.location} {self.name}"


class Game(BaseModel):
    """
    A scheduled or completed match between two teams

    Invariants (checked on construction):
    - both teams belong to the game's league
    - home and away are different teams
    - scores only appear once the game has started
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    home_team: Team
    away_team: Team
    home_score: Optional[int] = Field(default=None, ge=0)
    away_score: Optional[int] = Field(default=None, ge=0)
    status: GameStatus
    scheduled_time: AwareDatetime
    league_id: UUID

    @model_validator(mode="after")
    def check_consistency(self) -> "Game":
        if self.home_team.id == self.away_team.id:
            raise ValueError("home_team and away_team must be different teams")

        for side, team in (("home_team", self.home_team), ("away_team", self.away_team)):
            if team.league_id != self.league_id:
                raise ValueError(
                    f"{side} {team.abbreviation} belongs to league {team.league_id}, "
                    f"not {self.league_id}"
                )

        has_score = self.home_score is not None or self.away_score is not None
        if has_score and self.status not in _SCORED_STATUSES:
            raise ValueError(f"a {self.status.value} game cannot carry a score")

        return self

    @property
    def is_live(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    @property
    def is_final(self) -> bool:
        return self.status == GameStatus.FINAL

    def is_winning(self, team: Team) -> bool:
        """True when both scores are known and `team`'s side is ahead."""
        if self.home_score is None or self.away_score is None:
            return False

        if team.id == self.home_team.id:
            return self.home_score > self.away_score
        return self.away_score > self.home_score

    @property
    def time_label(self) -> str:
        """Short label shown on a game card: kickoff time or current state."""
        if self.status == GameStatus.SCHEDULED:
            return self.scheduled_time.strftime("%H:%M")
        if self.status == GameStatus.IN_PROGRESS:
            return "In Progress"
        return self.status.display_text
