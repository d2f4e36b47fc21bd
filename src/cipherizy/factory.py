"""Cipher factory: one shared cipher instance per algorithm."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import ClassVar, Optional

from cipherizy.aes import AESCipher
from cipherizy.algorithm import Algorithm
from cipherizy.cipher import Cipher
from cipherizy.exceptions import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

# Implementations built by every new factory
DEFAULT_CIPHERS: Mapping[Algorithm, type[Cipher]] = {
    Algorithm.AES: AESCipher,
}


class CipherFactory:
    """Registry mapping algorithm identifiers to shared cipher instances.

    Every registered cipher is constructed eagerly in ``__init__``, so a
    factory built at startup can be handed to callers without any lazy
    initialization races. ``get_instance`` returns a process-wide factory
    for callers that do not inject one.
    """

    _instance: ClassVar[Optional[CipherFactory]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, ciphers: Optional[Mapping[Algorithm, type[Cipher]]] = None):
        ciphers = DEFAULT_CIPHERS if ciphers is None else ciphers
        self._ciphers: dict[Algorithm, Cipher] = {
            algorithm: cipher_cls() for algorithm, cipher_cls in ciphers.items()
        }
        logger.debug(
            "Cipher factory ready with %s",
            ", ".join(a.value for a in self._ciphers) or "no algorithms",
        )

    @classmethod
    def get_instance(cls) -> CipherFactory:
        """Return the shared factory, creating it at most once."""
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                instance = cls._instance
                if instance is None:
                    instance = cls()
                    cls._instance = instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared factory (useful for tests)."""
        with cls._instance_lock:
            cls._instance = None

    @property
    def algorithms(self) -> tuple[Algorithm, ...]:
        return tuple(self._ciphers)

    def get(self, algorithm: Algorithm | str) -> Cipher:
        """Return the shared cipher for ``algorithm``.

        Raises
        ------
        UnsupportedAlgorithmError
            If the identifier is unknown or has no registered cipher
        """
        try:
            resolved = Algorithm.parse(algorithm)
        except ValueError as e:
            msg = f"Unsupported algorithm: {algorithm!r}"
            raise UnsupportedAlgorithmError(
                msg,
                details={"algorithm": str(algorithm)},
            ) from e

        cipher = self._ciphers.get(resolved)
        if cipher is None:
            msg = f"No cipher registered for algorithm {resolved.value}"
            raise UnsupportedAlgorithmError(
                msg,
                details={"algorithm": resolved.value},
            )
        return cipher

    def register(self, algorithm: Algorithm, cipher: Cipher) -> None:
        """Add or replace the cipher used for ``algorithm`` on this factory."""
        if not isinstance(cipher, Cipher):
            msg = f"Expected a Cipher instance, got {type(cipher).__name__}"
            raise TypeError(msg)
        if cipher.algorithm is not algorithm:
            msg = (
                f"Cipher implements {cipher.algorithm!r}, "
                f"cannot register it as {algorithm.value}"
            )
            raise ValueError(msg)

        logger.info("Registering %s for %s", type(cipher).__name__, algorithm.value)
        self._ciphers[algorithm] = cipher


def get_cipher(algorithm: Algorithm | str) -> Cipher:
    """Shortcut for ``CipherFactory.get_instance().get(algorithm)``."""
    return CipherFactory.get_instance().get(algorithm)
