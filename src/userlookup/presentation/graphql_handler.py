"""GraphQL HTTP endpoint."""

import logging
from typing import Any

from aiohttp import web
from graphql import ExecutionResult, GraphQLError, graphql

from userlookup.domain.exceptions import InvalidUserIdError
from userlookup.presentation.keys import GRAPHQL_SCHEMA_KEY, USER_SERVICE_KEY

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Errors raised by resolvers whose message is safe to show to callers
_PUBLIC_ERRORS: tuple[type[Exception], ...] = (GraphQLError, InvalidUserIdError)


def format_error(error: GraphQLError) -> dict[str, Any]:
    """Format a GraphQL error, masking unexpected resolver failures.

    Parse and validation errors and invalid-input errors keep their
    message. Any other resolver exception is logged with its traceback
    and reported with a generic message.
    """
    formatted: dict[str, Any] = dict(error.formatted)
    original = error.original_error
    if original is not None and not isinstance(original, _PUBLIC_ERRORS):
        logger.error(
            "GraphQL resolver failed at %s",
            error.path,
            exc_info=(type(original), original, original.__traceback__),
        )
        formatted["message"] = INTERNAL_ERROR_MESSAGE
    return formatted


def format_result(result: ExecutionResult) -> dict[str, Any]:
    """Convert an execution result to the response envelope."""
    response: dict[str, Any] = {}
    if result.errors:
        response["errors"] = [format_error(error) for error in result.errors]
    if result.data is not None or not result.errors:
        response["data"] = result.data
    return response


def _bad_request(message: str) -> web.Response:
    return web.json_response({"errors": [{"message": message}]}, status=400)


async def handle_graphql(request: web.Request) -> web.Response:
    """POST /graphql: execute a GraphQL operation.

    The body is ``{"query": ..., "variables": ..., "operationName": ...}``.
    Execution errors are returned in ``errors`` with status 200. Requests
    that cannot be executed at all (malformed body, syntax or validation
    errors) get status 400.
    """
    try:
        payload = await request.json()
    except (ValueError, LookupError):
        # Undecodable bytes or an unknown charset also land here
        return _bad_request("Request body must be valid JSON")

    if not isinstance(payload, dict):
        return _bad_request("Request body must be a JSON object")

    query = payload.get("query")
    if not isinstance(query, str) or not query.strip():
        return _bad_request("Request body must contain a 'query' string")

    variables = payload.get("variables")
    if variables is not None and not isinstance(variables, dict):
        return _bad_request("'variables' must be a JSON object")

    operation_name = payload.get("operationName")
    if operation_name is not None and not isinstance(operation_name, str):
        return _bad_request("'operationName' must be a string")

    result = await graphql(
        request.app[GRAPHQL_SCHEMA_KEY],
        query,
        variable_values=variables,
        operation_name=operation_name,
        context_value={"user_service": request.app[USER_SERVICE_KEY]},
    )

    status = 400 if result.data is None and result.errors else 200
    return web.json_response(format_result(result), status=status)


def register_graphql_routes(app: web.Application) -> None:
    """Register the GraphQL endpoint.

    Args:
        app: Application to attach the route to.
    """
    app.router.add_post("/graphql", handle_graphql)
