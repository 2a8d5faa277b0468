"""Explicit success/failure results for data-layer queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from dashboard.backend.src.core.errors import DataFetchError

T = TypeVar("T")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Outcome of a query: either ``value`` or the ``error`` that prevented it.

    A successful result may still carry ``None`` as its value, for instance a
    lookup that matched no row.
    """

    operation: str
    value: T | None = None
    error: BaseException | None = None

    @classmethod
    def success(cls, operation: str, value: T) -> "QueryResult[T]":
        return cls(operation=operation, value=value)

    @classmethod
    def failure(cls, operation: str, error: BaseException) -> "QueryResult[T]":
        return cls(operation=operation, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self, message: str | None = None) -> T | None:
        """Return the value or raise :class:`DataFetchError` with ``message``."""

        if self.error is not None:
            raise DataFetchError(message or f"{self.operation} failed.") from self.error
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` when the query failed."""

        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


__all__ = ["QueryResult"]
