"""Resolver package for the GraphQL schema.

Each module holds the resolvers of one entity. Every resolver takes the
explicit request context and returns a ``Result``; the Strawberry types,
queries and mutations unwrap it.
"""

# Intentionally empty; functions are defined in sibling modules.
