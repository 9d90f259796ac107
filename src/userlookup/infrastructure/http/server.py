"""HTTP server hosting the API application."""

from __future__ import annotations

import logging

from aiohttp import web

logger = logging.getLogger(__name__)


class ApiServer:
    """Runs one aiohttp application on one listening port.

    The application is built once by the caller and handed in; the server
    exposes it read-only so further routes can be attached through its
    router before start, but the application itself cannot be swapped.
    """

    def __init__(self, app: web.Application, host: str = "0.0.0.0", port: int = 3000) -> None:
        """Initialize the server.

        Args:
            app: Configured application.
            host: Interface to bind.
            port: Port to listen on. Use 0 for any available port.
        """
        self._app = app
        self._host = host
        self._port = port
        self._actual_port = port
        self._runner: web.AppRunner | None = None
        self._site: web.TCPSite | None = None
        self._running = False

    @property
    def app(self) -> web.Application:
        """The served application."""
        return self._app

    @property
    def is_running(self) -> bool:
        """Check if the server is running."""
        return self._running

    @property
    def port(self) -> int:
        """Get the port the server is listening on."""
        return self._actual_port

    async def start(self) -> None:
        """Start the HTTP server.

        Raises:
            RuntimeError: The server is already running.
        """
        if self._running:
            raise RuntimeError("Server is already running")

        self._runner = web.AppRunner(self._app)
        await self._runner.setup()

        self._site = web.TCPSite(self._runner, self._host, self._port)
        await self._site.start()

        # Get actual port (useful when port=0 for dynamic allocation)
        if self._site._server is not None:
            sockets = self._site._server.sockets  # type: ignore[union-attr]
            if sockets:
                self._actual_port = sockets[0].getsockname()[1]

        self._running = True
        logger.info("API server started on %s:%d", self._host, self.port)
        logger.info("REST endpoint at http://localhost:%d/users/{id}", self.port)
        logger.info("GraphQL endpoint at http://localhost:%d/graphql", self.port)

    async def stop(self) -> None:
        """Stop the HTTP server."""
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
            self._site = None

        self._running = False
        logger.info("API server stopped")
