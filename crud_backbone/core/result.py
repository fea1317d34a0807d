"""Result types for railway-oriented programming.

Repositories and custom validators report outcomes as values instead of
raising: a repository returns ``Success(value=client)`` or
``Failure(error=NotFoundError(...))``, a custom validator returns
``Success(value=...)`` or ``Failure(error="message")``.

Usage:
    result = await repository.delete(client_id)
    match result:
        case Success(value=deleted_id):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
