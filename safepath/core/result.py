"""Result wrapper for fallible operations.

Validation and filesystem operations never raise for expected failures.
They return a ``Result`` that carries either the successful value or a
structured error variant the caller is expected to branch on.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar('T')
E = TypeVar('E')
U = TypeVar('U')


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Success/failure outcome of an operation."""
    success: bool
    value: Optional[T] = None
    error: Optional[E] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        """Create a successful result.

        Args:
            value: The successful result value

        Returns:
            Successful Result instance
        """
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: E) -> "Result[T, E]":
        """Create a failed result.

        Args:
            error: Structured error describing the failure

        Returns:
            Failed Result instance
        """
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value if successful, otherwise raise an exception.

        Raises:
            ValueError: If the result is not successful
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error!r}")
        return self.value

    def unwrap_error(self) -> E:
        """Get the error if failed, otherwise raise an exception.

        Raises:
            ValueError: If the result is successful
        """
        if self.success:
            raise ValueError(f"Cannot unwrap error of successful result: {self.value!r}")
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Get the value if successful, otherwise return default."""
        return self.value if self.success else default

    def map(self, func: Callable[[T], U]) -> "Result[U, Any]":
        """Transform the value if successful, keeping the error untouched."""
        if self.success:
            return Result.ok(func(self.value))
        return Result.fail(self.error)
