"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import MaskErrors, SchemaExtension
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .context import GraphQLContext, get_context
from .errors import should_mask_error
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

MASKED_ERROR_MESSAGE = "Unexpected error."


class MaskUnexpectedErrors(MaskErrors):
    """Hide everything but domain and validation errors from clients."""

    def __init__(self) -> None:
        super().__init__(should_mask_error=should_mask_error, error_message=MASKED_ERROR_MESSAGE)


def build_schema(mask_errors: bool = True) -> strawberry.Schema:
    """Build the schema; Strawberry binds every field to its resolver here."""
    extensions: list[type[SchemaExtension]] = []
    if mask_errors:
        # Strawberry instantiates the extension for every operation
        extensions.append(MaskUnexpectedErrors)

    return strawberry.Schema(query=Query, mutation=Mutation, extensions=extensions)


# Create the GraphQL schema
schema = build_schema(mask_errors=settings.mask_errors)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast
    instead of erroring on the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router() -> GraphQLRouter[GraphQLContext, None]:
    """Create a GraphQL router for FastAPI."""

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.debug else None,
        context_getter=get_context,
    )
