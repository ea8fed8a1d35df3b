"""
Resolver outcomes: either a value or a client-facing domain error.

Resolver functions return a Result instead of raising domain errors; the
GraphQL field that called them unwraps it. Unexpected exceptions are never
wrapped and keep propagating.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: DomainError


Result = Union[Ok[T], Err]


def unwrap(result: "Result[T]") -> T:
    """Return the carried value or raise the carried domain error."""
    if isinstance(result, Err):
        raise result.error
    return result.value
