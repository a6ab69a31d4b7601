from __future__ import annotations

import logging
import re
from importlib import resources

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route
import uvicorn

from fpl_recommender.config import Settings, get_settings
from fpl_recommender.fpl_api import FPLClient
from fpl_recommender.season import SeasonService, bootstrap_payload, fixtures_payload

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)


def parse_weeks(raw: str | None, default: int) -> int:
    """Leading integer of ``raw``; ``default`` when absent, unparsable or zero."""
    if not raw:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    return int(m.group(1)) or default


def _index_html() -> str:
    return resources.files("fpl_recommender").joinpath("static/index.html").read_text(encoding="utf-8")


# --------------------
# Routes
# --------------------


async def index(request: Request) -> Response:
    return HTMLResponse(request.app.state.index_html)


async def health(_: Request) -> Response:
    return JSONResponse({"status": "ok"})


async def api_bootstrap(request: Request) -> Response:
    """GET /api/bootstrap: players, teams and the current gameweek."""
    service: SeasonService = request.app.state.season
    try:
        snap = await service.snapshot()
        return JSONResponse(bootstrap_payload(snap))
    except Exception as e:
        logger.error(f"Bootstrap request failed: {e}", exc_info=True)
        return JSONResponse({"error": "FPL API unavailable"}, status_code=503)


async def api_fixtures(request: Request) -> Response:
    """GET /api/fixtures?weeks=N: team stats plus enriched fixtures for N gameweeks."""
    service: SeasonService = request.app.state.season
    settings: Settings = request.app.state.settings
    try:
        weeks = parse_weeks(request.query_params.get("weeks"), settings.default_weeks)
        snap = await service.snapshot()
        return JSONResponse(fixtures_payload(snap, weeks))
    except Exception as e:
        logger.error(f"Fixtures request failed: {e}", exc_info=True)
        return JSONResponse({"error": "Failed"}, status_code=500)


# --------------------
# App factory
# --------------------


def create_app(settings: Settings | None = None, client: FPLClient | None = None) -> Starlette:
    settings = settings or get_settings()
    client = client or FPLClient(settings)

    app = Starlette(
        debug=settings.debug,
        routes=[
            Route("/", index, methods=["GET"]),
            Route("/health", health, methods=["GET"]),
            Route("/api/bootstrap", api_bootstrap, methods=["GET"]),
            Route("/api/fixtures", api_fixtures, methods=["GET"]),
        ],
    )
    app.state.settings = settings
    app.state.season = SeasonService(client)
    app.state.index_html = _index_html()
    return app


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("=" * 60)
    logger.info(f"FPL Recommender running on http://localhost:{settings.port}")
    logger.info(f"Upstream {settings.fpl_api_base}, cache TTL {settings.cache_ttl_seconds}s")
    logger.info("=" * 60)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
