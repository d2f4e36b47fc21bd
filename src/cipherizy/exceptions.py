"""Cipher exceptions and error codes.

Every failure raised by this package is a CipherError. The kind of failure
is carried as data in ``code`` so callers can branch on it without catching
individual subclasses.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for cipher failures.

    These codes are part of the public API contract. Should not be changed.
    """

    INVALID_KEY_OR_SALT = "INVALID_KEY_OR_SALT"
    DECRYPTION_FAILURE = "DECRYPTION_FAILURE"
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"
    UNDERLYING_FAILURE = "UNDERLYING_FAILURE"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


class CipherError(Exception):
    """Base exception for all cipher errors.

    Attributes
    ----------
    message
        Human-readable error message (never contains key material)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (sizes, algorithm, paths)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNDERLYING_FAILURE,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class InvalidKeyOrSaltError(CipherError):
    """Raised when a key or salt fails the algorithm's length constraints."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_KEY_OR_SALT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class DecryptionError(CipherError):
    """Raised when ciphertext cannot be decrypted (length, padding, wrong key)."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DECRYPTION_FAILURE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidPayloadError(CipherError):
    """Raised when plaintext or ciphertext is not a bytes-like object."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_PAYLOAD,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UnsupportedAlgorithmError(CipherError):
    """Raised when no cipher is registered for an algorithm identifier."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNSUPPORTED_ALGORITHM,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UnderlyingCipherError(CipherError):
    """Raised when the crypto engine or file I/O fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNDERLYING_FAILURE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
