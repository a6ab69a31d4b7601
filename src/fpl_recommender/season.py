"""Season snapshot: everything the API serves, rebuilt once per cache window."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from fpl_recommender.analytics import (
    TeamStats,
    compute_team_stats,
    enrich_fixtures,
    get_top_players,
)
from fpl_recommender.fpl_api import BOOTSTRAP_PATH, FIXTURES_PATH, FPLClient
from fpl_recommender.models import Bootstrap, FPLFixture, FPLPlayer, FPLTeam, badge_url

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "season:snapshot"


@dataclass(frozen=True)
class SeasonSnapshot:
    """Immutable view of one bootstrap + fixtures pair and the stats derived from it."""
    bootstrap: Bootstrap
    fixtures: tuple[FPLFixture, ...]
    teams_by_id: Mapping[int, FPLTeam]
    team_stats: Mapping[int, TeamStats]

    @property
    def current_gameweek(self) -> int:
        return self.bootstrap.current_gameweek

    @property
    def players(self) -> list[FPLPlayer]:
        return self.bootstrap.elements


def build_snapshot(bootstrap: Bootstrap, fixtures: list[FPLFixture]) -> SeasonSnapshot:
    teams_by_id = {t.id: t for t in bootstrap.teams}
    stats = compute_team_stats(bootstrap.teams, fixtures)
    return SeasonSnapshot(
        bootstrap=bootstrap,
        fixtures=tuple(fixtures),
        teams_by_id=MappingProxyType(teams_by_id),
        team_stats=MappingProxyType(stats),
    )


class SeasonService:
    """Hands out the current snapshot, rebuilding it as soon as either upstream response expires."""

    def __init__(self, client: FPLClient) -> None:
        self.client = client

    async def snapshot(self) -> SeasonSnapshot:
        cached = self.client.cache.get(SNAPSHOT_KEY)
        if cached is not None:
            return cached

        bootstrap = await self.client.bootstrap()
        fixtures = await self.client.fixtures()
        snap = build_snapshot(bootstrap, fixtures)
        logger.info(
            f"Season snapshot rebuilt: GW{snap.current_gameweek}, "
            f"{len(snap.teams_by_id)} teams, {len(snap.fixtures)} fixtures"
        )
        # Never outlive the older of the two responses it was built from
        expiries = [self.client.expires_at(BOOTSTRAP_PATH), self.client.expires_at(FIXTURES_PATH)]
        if None not in expiries:
            self.client.cache.set_until(SNAPSHOT_KEY, snap, min(expiries))
        return snap


def _team_identity(team: FPLTeam) -> dict:
    return {
        "id": team.id,
        "name": team.name,
        "shortName": team.short_name,
        "badge": badge_url(team),
    }


def _player_row(p: FPLPlayer) -> dict:
    return {
        "id": p.id,
        "webName": p.web_name,
        "teamId": p.team,
        "position": p.element_type,
        "cost": p.now_cost,
        "form": p.form,
        "totalPoints": p.total_points,
        "status": p.status,
        "news": p.news,
        "chanceOfPlaying": p.chance_of_playing_next_round,
        "photoCode": p.code,
        "goals": p.goals_scored,
        "assists": p.assists,
        "cleanSheets": p.clean_sheets,
        "xG": p.expected_goals,
        "xA": p.expected_assists,
    }


def bootstrap_payload(snap: SeasonSnapshot) -> dict:
    """Body of ``GET /api/bootstrap``."""
    return {
        "players": [_player_row(p) for p in snap.players],
        "teams": [_team_identity(t) for t in snap.bootstrap.teams],
        "currentGameweek": snap.current_gameweek,
    }


def fixtures_payload(snap: SeasonSnapshot, weeks: int) -> dict:
    """Body of ``GET /api/fixtures``."""
    teams = []
    for team in snap.teams_by_id.values():
        stats = snap.team_stats.get(team.id)
        teams.append({
            **_team_identity(team),
            "stats": stats.to_json() if stats else {},
            "topPlayers": get_top_players(snap.players, team.id),
        })

    current_gw = snap.current_gameweek
    rows = enrich_fixtures(snap.fixtures, snap.team_stats, snap.teams_by_id, current_gw, weeks)
    return {
        "teams": teams,
        "fixtures": [r.to_json() for r in rows],
        "currentGW": current_gw,
    }
