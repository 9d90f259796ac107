"""Health check routes."""

from datetime import datetime, timezone

from aiohttp import web

from userlookup.presentation.keys import DATABASE_KEY


async def handle_health(request: web.Request) -> web.Response:
    """GET /health: liveness with a timestamp."""
    return web.json_response(
        {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


async def handle_ready(request: web.Request) -> web.Response:
    """GET /ready: 200 when the database answers, 503 otherwise."""
    database_ok = await request.app[DATABASE_KEY].is_healthy()
    status = 200 if database_ok else 503
    return web.json_response({"ready": database_ok, "database": database_ok}, status=status)


def register_health_routes(app: web.Application) -> None:
    """Register /health and /ready.

    /ready is only registered when the application holds a database.
    """
    app.router.add_get("/health", handle_health)
    if DATABASE_KEY in app:
        app.router.add_get("/ready", handle_ready)
