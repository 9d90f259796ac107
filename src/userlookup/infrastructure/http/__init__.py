"""HTTP infrastructure."""

from userlookup.infrastructure.http.server import ApiServer

__all__ = ["ApiServer"]
