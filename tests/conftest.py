"""Shared FPL payloads and client fixtures."""

from __future__ import annotations

import httpx
import pytest

from fpl_recommender.cache import TTLCache
from fpl_recommender.config import Settings
from fpl_recommender.fpl_api import FPLClient

API_BASE = "https://fpl.test/api"


def make_fixture(team_h, team_a, event=None, finished=False, h=None, a=None, hd=3, ad=3, fid=None) -> dict:
    return {
        "id": fid,
        "event": event,
        "team_h": team_h,
        "team_a": team_a,
        "finished": finished,
        "team_h_score": h,
        "team_a_score": a,
        "team_h_difficulty": hd,
        "team_a_difficulty": ad,
    }


def make_player(pid, name, team, pos, points, status="a", cost=50) -> dict:
    return {
        "id": pid,
        "web_name": name,
        "team": team,
        "element_type": pos,
        "now_cost": cost,
        "form": "5.0",
        "total_points": points,
        "status": status,
        "news": "" if status == "a" else "Knee injury",
        "chance_of_playing_next_round": None if status == "a" else 0,
        "code": 1000 + pid,
        "goals_scored": 1,
        "assists": 2,
        "clean_sheets": 3,
        "expected_goals": "1.20",
        "expected_assists": "0.80",
        "selected_by_percent": "12.3",
    }


def bootstrap_data() -> dict:
    return {
        "events": [
            {"id": 1, "is_current": False, "is_next": False, "finished": True},
            {"id": 2, "is_current": True, "is_next": False, "finished": False},
            {"id": 3, "is_current": False, "is_next": True, "finished": False},
        ],
        "teams": [
            {"id": 1, "name": "Arsenal", "short_name": "ARS", "code": 3, "strength": 5},
            {"id": 2, "name": "Chelsea", "short_name": "CHE", "code": 8},
            {"id": 3, "name": "Liverpool", "short_name": "LIV", "code": 14},
        ],
        "elements": [
            make_player(1, "Saka", 1, 3, 100),
            make_player(2, "Raya", 1, 1, 80),
            make_player(3, "Odegaard", 1, 3, 120, status="i"),
            make_player(4, "Havertz", 1, 4, 60),
            make_player(5, "White", 1, 2, 50),
            make_player(6, "Palmer", 2, 3, 130, cost=105),
        ],
    }


def fixtures_data() -> list[dict]:
    return [
        make_fixture(1, 2, event=1, finished=True, h=2, a=0, hd=3, ad=4, fid=1),
        make_fixture(2, 3, event=2, hd=2, ad=3, fid=2),
        make_fixture(3, 1, event=3, hd=4, ad=2, fid=3),
        make_fixture(1, 2, event=8, fid=4),
        make_fixture(1, 3, event=None, fid=5),
    ]


class FakeFPL:
    """Serves canned payloads and records every request."""

    def __init__(self, bootstrap=None, fixtures=None, status_code=200):
        self.bootstrap = bootstrap if bootstrap is not None else bootstrap_data()
        self.fixtures = fixtures if fixtures is not None else fixtures_data()
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"detail": "down"})
        if request.url.path.endswith("/bootstrap-static/"):
            return httpx.Response(200, json=self.bootstrap)
        if request.url.path.endswith("/fixtures/"):
            return httpx.Response(200, json=self.fixtures)
        return httpx.Response(404)

    def count(self, suffix: str) -> int:
        return sum(1 for r in self.requests if r.url.path.endswith(suffix))


@pytest.fixture
def settings() -> Settings:
    return Settings(fpl_api_base=API_BASE, cache_ttl_seconds=300, default_weeks=6)


@pytest.fixture
def fake_fpl() -> FakeFPL:
    return FakeFPL()


@pytest.fixture
def client(settings, fake_fpl) -> FPLClient:
    return FPLClient(settings, cache=TTLCache(settings.cache_ttl_seconds), transport=httpx.MockTransport(fake_fpl))


@pytest.fixture
def frozen_time(monkeypatch):
    """Controllable clock for the TTL cache."""
    t = {"now": 1_000_000.0}
    monkeypatch.setattr("fpl_recommender.cache.time.time", lambda: t["now"])
    return t
