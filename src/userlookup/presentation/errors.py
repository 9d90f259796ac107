"""REST error normalization."""

import logging
from http import HTTPStatus

from aiohttp import web
from aiohttp.typedefs import Handler

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


class ApiError(Exception):
    """Error carrying an explicit HTTP status for the REST surface.

    Attributes:
        status_code: HTTP status code to respond with.
        message: Message returned to the caller.
        error: Short error kind; defaults to the status reason phrase.
    """

    def __init__(self, status_code: int, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error or HTTPStatus(status_code).phrase


def error_response(status: int, message: str, error: str | None = None) -> web.Response:
    """Build a JSON error envelope ``{"error": ..., "message": ...}``."""
    return web.json_response(
        {"error": error or HTTPStatus(status).phrase, "message": message},
        status=status,
    )


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Convert failures raised by REST handlers into JSON error envelopes.

    - ApiError: its own status and message.
    - aiohttp HTTP errors (unknown route, wrong method): their status.
    - Anything else: 500 with a generic message; the detail is only logged.
    """
    try:
        return await handler(request)
    except ApiError as e:
        logger.warning(
            "%s %s failed with %d: %s",
            request.method,
            request.path,
            e.status_code,
            e.message,
        )
        return error_response(e.status_code, e.message, e.error)
    except web.HTTPException as e:
        if e.status < 400:
            raise
        return error_response(e.status, f"Cannot {request.method} {request.path}")
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response(500, INTERNAL_ERROR_MESSAGE)
