"""Player summaries shown alongside team stats."""

from __future__ import annotations

from typing import Iterable

from fpl_recommender.models import POSITION_MAP, FPLPlayer

TOP_PLAYERS = 3


def get_top_players(
    players: Iterable[FPLPlayer],
    team_id: int,
    limit: int = TOP_PLAYERS,
) -> list[dict]:
    """Available players of a team with the most total points."""
    available = [p for p in players if p.team == team_id and p.status == "a"]
    available.sort(key=lambda p: p.total_points, reverse=True)
    return [
        {
            "name": p.web_name,
            "points": p.total_points,
            "pos": POSITION_MAP.get(p.element_type, ""),
        }
        for p in available[:limit]
    ]
