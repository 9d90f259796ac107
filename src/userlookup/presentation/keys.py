"""Typed keys for objects stored on the aiohttp application."""

from typing import Any

from aiohttp import web
from graphql import GraphQLSchema

from userlookup.application.services import UserLookupService
from userlookup.infrastructure.persistence import DatabaseManager

USER_SERVICE_KEY = web.AppKey("user_service", UserLookupService)
DATABASE_KEY = web.AppKey("database", DatabaseManager)
GRAPHQL_SCHEMA_KEY = web.AppKey("graphql_schema", GraphQLSchema)
OPENAPI_DOCUMENT_KEY: web.AppKey[dict[str, Any]] = web.AppKey("openapi_document", dict)
