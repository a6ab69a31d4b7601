"""Upcoming fixture rows with a heuristic clean-sheet probability."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from fpl_recommender.analytics.team_stats import TeamStats
from fpl_recommender.models import FPLFixture, FPLTeam, badge_url

DEFAULT_CS_PROB = 25
MIN_CS_PROB = 5
MAX_CS_PROB = 55
UNKNOWN_TEAM = "?"


@dataclass(frozen=True)
class EnrichedFixture:
    """One team's view of an upcoming fixture."""
    team_id: int
    gw: int
    opp: str
    opp_badge: str
    is_home: bool
    fdr: int | None
    cs: int

    def to_json(self) -> dict:
        return {
            "teamId": self.team_id,
            "gw": self.gw,
            "opp": self.opp,
            "oppBadge": self.opp_badge,
            "isHome": self.is_home,
            "fdr": self.fdr,
            "cs": self.cs,
        }


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def clean_sheet_probability(
    team_id: int,
    opponent_id: int,
    stats: Mapping[int, TeamStats],
) -> int:
    """Clean-sheet chance in percent, scaled by how often the opponent scores.

    Falls back to 25 when either team has no stats.
    """
    team = stats.get(team_id)
    opp = stats.get(opponent_id)
    if team is None or opp is None:
        return DEFAULT_CS_PROB

    prob = team.cs_rate * 100
    if opp.goals_per_game > 2:
        prob *= 0.6
    elif opp.goals_per_game > 1.5:
        prob *= 0.75
    elif opp.goals_per_game < 0.8:
        prob *= 1.2
    return _round_half_up(max(MIN_CS_PROB, min(MAX_CS_PROB, prob)))


def in_window(fixture: FPLFixture, current_gw: int, weeks: int) -> bool:
    """True for scheduled fixtures with ``current_gw <= event < current_gw + weeks``."""
    if not fixture.event:
        return False
    return current_gw <= fixture.event < current_gw + weeks


def enrich_fixtures(
    fixtures: Iterable[FPLFixture],
    stats: Mapping[int, TeamStats],
    teams_by_id: Mapping[int, FPLTeam],
    current_gw: int,
    weeks: int,
) -> list[EnrichedFixture]:
    """Two rows per upcoming fixture, home side first."""
    rows: list[EnrichedFixture] = []
    for f in fixtures:
        if not in_window(f, current_gw, weeks):
            continue
        home = teams_by_id.get(f.team_h)
        away = teams_by_id.get(f.team_a)
        rows.append(EnrichedFixture(
            team_id=f.team_h,
            gw=f.event,
            opp=away.short_name if away else UNKNOWN_TEAM,
            opp_badge=badge_url(away),
            is_home=True,
            fdr=f.team_h_difficulty,
            cs=clean_sheet_probability(f.team_h, f.team_a, stats),
        ))
        rows.append(EnrichedFixture(
            team_id=f.team_a,
            gw=f.event,
            opp=home.short_name if home else UNKNOWN_TEAM,
            opp_badge=badge_url(home),
            is_home=False,
            fdr=f.team_a_difficulty,
            cs=clean_sheet_probability(f.team_a, f.team_h, stats),
        ))
    return rows
