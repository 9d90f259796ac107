"""Host-based admission control.

Every request is checked against an allow-list of hosts before any route
handler runs. A request is admitted when its Host header, Origin header or
Referer header matches an allowed entry; otherwise it is answered with 403.

Two matching modes exist for Origin and Referer:

- ``strict`` parses the header as a URL and compares its authority
  (host plus non-default port) for equality or subdomain match, the same
  rule applied to the Host header.
- ``legacy`` keeps the substring checks of the previous deployment, which
  also admit values such as ``https://example.com.evil.org``.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable

from aiohttp import hdrs, web
from aiohttp.typedefs import Handler
from yarl import URL

from userlookup.config import ORIGIN_MATCHING_LEGACY, ORIGIN_MATCHING_STRICT
from userlookup.presentation.errors import error_response

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = (
    "Access denied. This API only accepts traffic from allowed domains."
)

Middleware = Callable[[web.Request, Handler], Awaitable[web.StreamResponse]]


class AdmissionPolicy:
    """Decides whether a request may proceed based on its headers.

    The policy is immutable after construction and holds no per-request
    state, so one instance is shared by all requests.
    """

    def __init__(
        self,
        allowed_hosts: Iterable[str],
        origin_matching: str = ORIGIN_MATCHING_STRICT,
    ) -> None:
        """Initialize the policy.

        Args:
            allowed_hosts: Allowed "host" or "host:port" entries.
            origin_matching: "strict" or "legacy" Origin/Referer matching.

        Raises:
            ValueError: The allow-list is empty or the mode is unknown.
        """
        hosts = tuple(host for host in allowed_hosts if host)
        if not hosts:
            raise ValueError("allowed_hosts must not be empty")
        if origin_matching not in (ORIGIN_MATCHING_STRICT, ORIGIN_MATCHING_LEGACY):
            raise ValueError(f"Unknown origin matching mode: {origin_matching!r}")

        self._origin_matching = origin_matching
        if origin_matching == ORIGIN_MATCHING_STRICT:
            hosts = tuple(host.lower() for host in hosts)
        self._allowed_hosts = hosts

    @property
    def allowed_hosts(self) -> tuple[str, ...]:
        """Allowed host entries."""
        return self._allowed_hosts

    @property
    def origin_matching(self) -> str:
        """Origin/Referer matching mode."""
        return self._origin_matching

    def is_allowed(self, host: str = "", origin: str = "", referer: str = "") -> bool:
        """Check whether any of the given header values is allowed.

        Args:
            host: Host header value, or empty string if absent.
            origin: Origin header value, or empty string if absent.
            referer: Referer header value, or empty string if absent.

        Returns:
            True if the request should be admitted.
        """
        if self._origin_matching == ORIGIN_MATCHING_LEGACY:
            return (
                self._host_matches(host)
                or self._legacy_origin_matches(origin)
                or self._legacy_referer_matches(referer)
            )

        return (
            self._host_matches(host.lower())
            or self._host_matches(_url_authority(origin))
            or self._host_matches(_url_authority(referer))
        )

    def _host_matches(self, host: str) -> bool:
        if not host:
            return False
        return any(
            host == allowed or host.endswith(f".{allowed}")
            for allowed in self._allowed_hosts
        )

    def _legacy_origin_matches(self, origin: str) -> bool:
        return any(
            allowed in origin
            or origin == f"http://{allowed}"
            or origin == f"https://{allowed}"
            for allowed in self._allowed_hosts
        )

    def _legacy_referer_matches(self, referer: str) -> bool:
        return any(
            allowed in referer
            or referer.startswith(f"http://{allowed}")
            or referer.startswith(f"https://{allowed}")
            for allowed in self._allowed_hosts
        )


def _url_authority(value: str) -> str:
    """Extract "host" or "host:port" from an http(s) URL header value.

    The port is kept only when it differs from the scheme's default.
    Returns an empty string for anything that is not an absolute
    http(s) URL, including the literal Origin value "null".
    """
    if not value:
        return ""
    try:
        url = URL(value)
        if url.scheme not in ("http", "https") or not url.raw_host:
            return ""
        host = url.raw_host.lower()
        port = url.port
        if port is None or url.is_default_port():
            return host
    except ValueError:
        return ""
    return f"{host}:{port}"


def admission_middleware(policy: AdmissionPolicy) -> Middleware:
    """Create a middleware that rejects requests not admitted by the policy.

    Args:
        policy: Admission policy to enforce.

    Returns:
        aiohttp middleware.
    """

    @web.middleware
    async def middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
        host = request.headers.get(hdrs.HOST, "")
        origin = request.headers.get(hdrs.ORIGIN, "")
        referer = request.headers.get(hdrs.REFERER, "")

        if not policy.is_allowed(host, origin, referer):
            logger.warning(
                "Rejected %s %s: host=%r origin=%r referer=%r",
                request.method,
                request.path,
                host,
                origin,
                referer,
            )
            return error_response(403, FORBIDDEN_MESSAGE)

        return await handler(request)

    return middleware
