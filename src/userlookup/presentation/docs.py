"""Interactive API documentation routes."""

import logging
from pathlib import Path
from typing import Any

import yaml
from aiohttp import web

from userlookup.presentation.keys import OPENAPI_DOCUMENT_KEY

logger = logging.getLogger(__name__)

DEFAULT_OPENAPI_PATH = Path(__file__).parent / "openapi.yaml"

_SWAGGER_UI_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>User Lookup API</title>
    <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
    <div id="swagger-ui"></div>
    <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
    <script>
        window.onload = () => {
            SwaggerUIBundle({url: "/api-docs/openapi.json", dom_id: "#swagger-ui"});
        };
    </script>
</body>
</html>
"""


def load_openapi_document(path: str | Path | None = None) -> dict[str, Any] | None:
    """Load the OpenAPI document from YAML.

    Documentation is optional, so a missing or broken file only logs a
    warning.

    Args:
        path: YAML file to load. Defaults to the bundled openapi.yaml.

    Returns:
        Parsed document, or None if it could not be loaded.
    """
    path = Path(path) if path is not None else DEFAULT_OPENAPI_PATH
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("API documentation not loaded from %s: %s", path, e)
        return None

    if not isinstance(document, dict):
        logger.warning("API documentation in %s is not a mapping", path)
        return None
    return document


async def handle_docs_page(request: web.Request) -> web.Response:
    """GET /api-docs: Swagger UI page."""
    return web.Response(text=_SWAGGER_UI_HTML, content_type="text/html")


async def handle_openapi_document(request: web.Request) -> web.Response:
    """GET /api-docs/openapi.json: the OpenAPI document as JSON."""
    return web.json_response(request.app[OPENAPI_DOCUMENT_KEY])


def register_docs_routes(app: web.Application, document: dict[str, Any] | None) -> None:
    """Register the documentation routes if a document is available.

    Args:
        app: Application to attach the routes to.
        document: Loaded OpenAPI document, or None to skip the routes.
    """
    if document is None:
        return
    app[OPENAPI_DOCUMENT_KEY] = document
    app.router.add_get("/api-docs", handle_docs_page)
    app.router.add_get("/api-docs/openapi.json", handle_openapi_document)
