"""GraphQL schema for user lookup.

Equivalent SDL::

    type User {
      id: String!
      name: String!
    }

    type Query {
      user(id: String!): User
    }
"""

from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
)

from userlookup.application.services import UserLookupService
from userlookup.domain.entities import User
from userlookup.domain.services import validate_user_id

USER_TYPE = GraphQLObjectType(
    "User",
    description="User type representing a user in the system",
    fields={
        "id": GraphQLField(
            GraphQLNonNull(GraphQLString),
            description="Unique identifier for the user",
        ),
        "name": GraphQLField(
            GraphQLNonNull(GraphQLString),
            description="The user's display name",
        ),
    },
)


async def resolve_user(root: Any, info: GraphQLResolveInfo, **args: Any) -> User | None:
    """Resolve ``Query.user``.

    A missing user resolves to null rather than an error. An invalid ID
    raises InvalidUserIdError, which GraphQL reports in ``errors``.
    """
    user_id = validate_user_id(args.get("id"))
    user_service: UserLookupService = info.context["user_service"]
    return await user_service.find_by_id(user_id)


def create_schema() -> GraphQLSchema:
    """Build the executable GraphQL schema."""
    query_type = GraphQLObjectType(
        "Query",
        fields={
            "user": GraphQLField(
                USER_TYPE,
                args={"id": GraphQLArgument(GraphQLNonNull(GraphQLString))},
                resolve=resolve_user,
                description="Retrieve a single user by their ID",
            ),
        },
    )
    return GraphQLSchema(query=query_type)
