"""aiohttp application assembly."""

from typing import Any

from aiohttp import web

from userlookup.application.services import UserLookupService
from userlookup.infrastructure.persistence import DatabaseManager
from userlookup.presentation.admission import AdmissionPolicy, admission_middleware
from userlookup.presentation.docs import register_docs_routes
from userlookup.presentation.errors import error_middleware
from userlookup.presentation.graphql_handler import register_graphql_routes
from userlookup.presentation.graphql_schema import create_schema
from userlookup.presentation.health_handlers import register_health_routes
from userlookup.presentation.keys import (
    DATABASE_KEY,
    GRAPHQL_SCHEMA_KEY,
    USER_SERVICE_KEY,
)
from userlookup.presentation.rest_handlers import register_user_routes


def create_app(
    user_service: UserLookupService,
    admission_policy: AdmissionPolicy,
    db_manager: DatabaseManager | None = None,
    openapi_document: dict[str, Any] | None = None,
) -> web.Application:
    """Create the aiohttp application serving both API surfaces.

    The admission middleware runs first, so denied requests never reach
    the error middleware or any handler.

    Args:
        user_service: Lookup service shared by REST and GraphQL.
        admission_policy: Host allow-list policy.
        db_manager: Database used by /ready (optional).
        openapi_document: OpenAPI document for /api-docs (optional).

    Returns:
        Configured application.
    """
    app = web.Application(
        middlewares=[admission_middleware(admission_policy), error_middleware]
    )
    app[USER_SERVICE_KEY] = user_service
    app[GRAPHQL_SCHEMA_KEY] = create_schema()
    if db_manager is not None:
        app[DATABASE_KEY] = db_manager

    register_docs_routes(app, openapi_document)
    register_user_routes(app)
    register_graphql_routes(app)
    register_health_routes(app)

    return app
