"""
Order error taxonomy and result type.

Repository and service operations return a Result instead of raising for
expected failures. Callers branch on ``result.error.kind``.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar


T = TypeVar("T")
U = TypeVar("U")


class OrderErrorKind(str, Enum):
    """Kinds of failure an order operation can report."""

    NOT_FOUND = "not_found"
    INVALID_RANGE = "invalid_range"
    INVALID_ORDER = "invalid_order"
    REPOSITORY_FAILURE = "repository_failure"
    UNEXPECTED = "unexpected"

    @property
    def is_client_error(self) -> bool:
        return self in (
            OrderErrorKind.NOT_FOUND,
            OrderErrorKind.INVALID_RANGE,
            OrderErrorKind.INVALID_ORDER,
        )


@dataclass(frozen=True)
class OrderError:
    """Failure description; ``cause`` keeps the original exception for diagnostics."""

    kind: OrderErrorKind
    message: str
    cause: Optional[BaseException] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class OrderRepositoryError(Exception):
    """Raised by Result.unwrap() for callers that prefer exceptions."""

    def __init__(self, error: OrderError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> OrderErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an OrderError, never both."""

    value: Optional[T] = None
    error: Optional[OrderError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: OrderErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> "Result[T]":
        return cls(error=OrderError(kind=kind, message=message, cause=cause))

    @classmethod
    def from_error(cls, error: OrderError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[OrderErrorKind]:
        return self.error.kind if self.error else None

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Transform the value of a successful result; failures pass through."""
        if self.error is not None:
            return Result.from_error(self.error)
        return Result.success(func(self.value))

    def unwrap(self) -> T:
        """
        Return the value or raise.

        Raises:
            OrderRepositoryError: chained to the original cause, if any
        """
        if self.error is not None:
            raise OrderRepositoryError(self.error) from self.error.cause
        return self.value
