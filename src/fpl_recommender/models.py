"""Typed views of the FPL API payloads consumed by the recommender.

Only the fields the service reads are declared; anything else the API sends
is ignored. Nullable fields mirror what the API actually returns for
unscheduled or unplayed fixtures.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

BADGE_URL = "https://resources.premierleague.com/premierleague/badges/50/t{code}.png"

POSITION_MAP = {1: "GK", 2: "DEF", 3: "MID", 4: "FWD"}


class FPLModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class FPLTeam(FPLModel):
    id: int
    name: str
    short_name: str
    code: int | None = None


class FPLEvent(FPLModel):
    id: int
    is_current: bool = False
    is_next: bool = False


class FPLPlayer(FPLModel):
    id: int
    web_name: str
    team: int
    element_type: int
    now_cost: int = 0
    form: str | float | None = None
    total_points: int = 0
    status: str = "a"
    news: str = ""
    chance_of_playing_next_round: int | None = None
    code: int | None = None
    goals_scored: int = 0
    assists: int = 0
    clean_sheets: int = 0
    expected_goals: str | float | None = None
    expected_assists: str | float | None = None


class FPLFixture(FPLModel):
    id: int | None = None
    event: int | None = None
    team_h: int
    team_a: int
    finished: bool = False
    team_h_score: int | None = None
    team_a_score: int | None = None
    team_h_difficulty: int | None = None
    team_a_difficulty: int | None = None


class Bootstrap(FPLModel):
    """The ``bootstrap-static`` payload: teams, players and gameweeks."""

    events: list[FPLEvent]
    teams: list[FPLTeam]
    elements: list[FPLPlayer]

    @property
    def current_gameweek(self) -> int:
        cur = next((e for e in self.events if e.is_current), None)
        return cur.id if cur else 1


def badge_url(team: FPLTeam | None) -> str:
    """Badge image for a team, or an empty string when it cannot be resolved."""
    if team is None or not team.code:
        return ""
    return BADGE_URL.format(code=team.code)
