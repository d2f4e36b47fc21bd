"""Success-or-error result for cipher operations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from cipherizy.exceptions import CipherError, ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class CipherResult(Generic[T]):
    """Outcome of a cipher operation: either a value or a CipherError."""

    value: Optional[T] = None
    error: Optional[CipherError] = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            msg = "CipherResult cannot hold both a value and an error"
            raise ValueError(msg)

    @classmethod
    def success(cls, value: T) -> CipherResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: CipherError) -> CipherResult[T]:
        return cls(error=error)

    @classmethod
    def capture(
        cls,
        operation: Callable[..., T],
        *args: Any,
        **kwargs: Any,
    ) -> CipherResult[T]:
        """Run ``operation`` and keep a raised CipherError as data.

        Only CipherError is captured; anything else propagates.
        """
        try:
            return cls.success(operation(*args, **kwargs))
        except CipherError as e:
            return cls.failure(e)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> Optional[ErrorCode]:
        return self.error.code if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]
