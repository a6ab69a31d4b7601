"""Derived team and fixture statistics."""

from .team_stats import (
    TeamStats,
    calculate_team_stats,
    compute_team_stats,
    recent_finished,
)
from .fixtures import (
    EnrichedFixture,
    clean_sheet_probability,
    enrich_fixtures,
    in_window,
)
from .players import get_top_players

__all__ = [
    # Team stats
    "TeamStats",
    "calculate_team_stats",
    "compute_team_stats",
    "recent_finished",
    # Fixtures
    "EnrichedFixture",
    "clean_sheet_probability",
    "enrich_fixtures",
    "in_window",
    # Players
    "get_top_players",
]
