"""REST routes for user lookup."""

from aiohttp import web

from userlookup.domain.exceptions import InvalidUserIdError
from userlookup.domain.services import validate_user_id
from userlookup.presentation.errors import ApiError, error_response
from userlookup.presentation.keys import USER_SERVICE_KEY


async def handle_get_user(request: web.Request) -> web.Response:
    """GET /users/{id}: return a single user.

    Responds 200 with ``{"id", "name"}`` or 404 when no user has the ID.
    An invalid ID raises ApiError(400); lookup failures propagate to the
    error middleware.
    """
    try:
        user_id = validate_user_id(request.match_info.get("id"))
    except InvalidUserIdError as e:
        raise ApiError(400, str(e)) from e

    user = await request.app[USER_SERVICE_KEY].find_by_id(user_id)
    if user is None:
        return error_response(404, f"User with ID '{user_id}' not found")

    return web.json_response(user.to_dict())


def register_user_routes(app: web.Application) -> None:
    """Register the REST user routes.

    Args:
        app: Application to attach the routes to.
    """
    app.router.add_get("/users/{id}", handle_get_user)
