"""
Domain errors surfaced to GraphQL clients, and translation of backend failures
"""

from __future__ import annotations

from typing import Any

from graphql import GraphQLError
from sqlalchemy.exc import IntegrityError

# SQLSTATE for foreign_key_violation (PostgreSQL)
FOREIGN_KEY_VIOLATION = "23503"
SQLITE_FOREIGN_KEY_MESSAGE = "FOREIGN KEY constraint failed"


class DomainError(Exception):
    """Base class for errors whose message is meant for the client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgument(DomainError):
    """A query argument is outside of its allowed range."""

    def __init__(self, argument: str, value: int, minimum: int, maximum: int | None = None):
        self.argument = argument
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            message = f"Argument '{argument}' must be >= {minimum}, got {value}."
        else:
            message = f"Argument '{argument}' must be within [{minimum}, {maximum}], got {value}."
        super().__init__(message)


class InvalidReference(DomainError):
    """A comment was posted against a link that does not exist."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Cannot post comment on non-existing link with id '{reference}'.")


class NotFound(DomainError):
    """A relation that must always resolve points at a missing row."""

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} with id '{key}' not found.")


def is_foreign_key_violation(exc: BaseException) -> bool:
    """Check whether a persistence error is a foreign key violation.

    Understands psycopg (``sqlstate``), asyncpg through SQLAlchemy's
    adapter (``pgcode``/``sqlstate``) and SQLite (message text).
    """
    if not isinstance(exc, IntegrityError):
        return False

    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        if getattr(orig, attr, None) == FOREIGN_KEY_VIOLATION:
            return True

    cause = getattr(orig, "__cause__", None)
    if getattr(cause, "sqlstate", None) == FOREIGN_KEY_VIOLATION:
        return True

    return SQLITE_FOREIGN_KEY_MESSAGE in str(orig)


def translate_persistence_error(exc: BaseException, reference: str) -> DomainError | None:
    """Map a recognised persistence error onto the domain taxonomy.

    Returns None for anything unrecognised; the caller re-raises it as is.
    """
    if is_foreign_key_violation(exc):
        return InvalidReference(reference)
    return None


def should_mask_error(error: GraphQLError) -> bool:
    """Hide messages of unexpected failures from clients.

    Errors raised by the engine itself (parsing, validation) carry no
    original error and are left alone.
    """
    original = error.original_error
    if original is None:
        return False
    return not isinstance(original, DomainError)
