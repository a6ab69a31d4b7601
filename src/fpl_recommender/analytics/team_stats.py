"""Rolling per-team statistics from finished fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from fpl_recommender.models import FPLFixture, FPLTeam

WINDOW = 10  # most recent finished fixtures per team
FORM_WINDOW = 5  # fixtures that count towards momentum
# Five wins weighted 5,4,3,2,1 at 3 points each
MAX_FORM_POINTS = 3 * sum(range(1, FORM_WINDOW + 1))


@dataclass(frozen=True)
class TeamStats:
    """Recent-form summary for one team."""
    cs_rate: float = 0.0
    goals_per_game: float = 0.0
    conceded_per_game: float = 0.0
    momentum: float = 0.0

    def to_json(self) -> dict:
        return {
            "csRate": self.cs_rate,
            "goalsPerGame": self.goals_per_game,
            "concededPerGame": self.conceded_per_game,
            "momentum": self.momentum,
        }


def recent_finished(fixtures: Iterable[FPLFixture]) -> list[FPLFixture]:
    """Finished fixtures, most recent gameweek first (unscheduled counts as GW 0)."""
    finished = [f for f in fixtures if f.finished]
    return sorted(finished, key=lambda f: f.event or 0, reverse=True)


def result_points(scored: int, conceded: int) -> int:
    if scored > conceded:
        return 3
    if scored == conceded:
        return 1
    return 0


def calculate_team_stats(team_id: int, finished: list[FPLFixture]) -> TeamStats:
    """Stats for one team over its last ``WINDOW`` games.

    ``finished`` must already be ordered most recent first, see
    :func:`recent_finished`. A missing score counts as 0 goals but never as a
    clean sheet.
    """
    games = [f for f in finished if team_id in (f.team_h, f.team_a)][:WINDOW]
    if not games:
        return TeamStats()

    cs = scored = conceded = form = 0
    for i, f in enumerate(games):
        is_home = f.team_h == team_id
        gf = f.team_h_score if is_home else f.team_a_score
        ga = f.team_a_score if is_home else f.team_h_score
        if ga == 0:
            cs += 1
        scored += gf or 0
        conceded += ga or 0
        if i < FORM_WINDOW:
            form += result_points(gf or 0, ga or 0) * (FORM_WINDOW - i)

    n = len(games)
    return TeamStats(
        cs_rate=cs / n,
        goals_per_game=scored / n,
        conceded_per_game=conceded / n,
        momentum=form / MAX_FORM_POINTS,
    )


def compute_team_stats(
    teams: Iterable[FPLTeam],
    fixtures: Iterable[FPLFixture],
) -> dict[int, TeamStats]:
    """Build the stats table for every team from the full fixture list."""
    finished = recent_finished(fixtures)
    return {team.id: calculate_team_stats(team.id, finished) for team in teams}
