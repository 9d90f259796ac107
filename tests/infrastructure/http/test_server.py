"""Tests for ApiServer."""

import aiohttp
import pytest
from aiohttp import web

from userlookup.infrastructure.http import ApiServer


class TestApiServer:
    """ApiServer lifecycle tests."""

    async def test_server_starts_and_stops(self, app: web.Application) -> None:
        """Test that server can start and stop."""
        server = ApiServer(app, host="127.0.0.1", port=0)

        await server.start()
        assert server.is_running is True
        assert server.port > 0

        await server.stop()
        assert server.is_running is False

    async def test_start_twice_raises(self, app: web.Application) -> None:
        """Test that starting a running server is rejected."""
        server = ApiServer(app, host="127.0.0.1", port=0)
        await server.start()
        try:
            with pytest.raises(RuntimeError):
                await server.start()
        finally:
            await server.stop()

    def test_app_is_read_only(self, app: web.Application) -> None:
        """Test that the application handle cannot be replaced."""
        server = ApiServer(app)

        assert server.app is app
        with pytest.raises(AttributeError):
            server.app = web.Application()  # type: ignore[misc]

    async def test_serves_users_on_one_port(self, app: web.Application) -> None:
        """Test that REST and GraphQL are served by the same listener."""
        server = ApiServer(app, host="127.0.0.1", port=0)
        await server.start()
        try:
            base_url = f"http://127.0.0.1:{server.port}"
            headers = {"Host": "localhost:3000"}
            async with aiohttp.ClientSession() as session:
                async with session.get(f"{base_url}/users/user1", headers=headers) as resp:
                    assert resp.status == 200
                    assert await resp.json() == {"id": "user1", "name": "John Doe"}

                async with session.post(
                    f"{base_url}/graphql",
                    json={"query": '{ user(id: "user1") { name } }'},
                    headers=headers,
                ) as resp:
                    assert resp.status == 200
                    data = await resp.json()
                    assert data == {"data": {"user": {"name": "John Doe"}}}
        finally:
            await server.stop()

    async def test_request_from_unlisted_host_is_forbidden(
        self, app: web.Application
    ) -> None:
        """Test that the real listener applies the admission policy."""
        server = ApiServer(app, host="127.0.0.1", port=0)
        await server.start()
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    f"http://127.0.0.1:{server.port}/health",
                    headers={"Host": "evil.com"},
                ) as resp:
                    assert resp.status == 403
        finally:
            await server.stop()

    async def test_routes_can_be_attached_before_start(
        self, app: web.Application
    ) -> None:
        """Test that extra routes can be added through the exposed app."""

        async def handle_extra(request: web.Request) -> web.Response:
            return web.json_response({"extra": True})

        server = ApiServer(app, host="127.0.0.1", port=0)
        server.app.router.add_get("/extra", handle_extra)
        await server.start()
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    f"http://127.0.0.1:{server.port}/extra",
                    headers={"Host": "127.0.0.1:3000"},
                ) as resp:
                    assert resp.status == 200
        finally:
            await server.stop()
