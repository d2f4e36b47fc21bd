"""Cipher contract shared by every symmetric algorithm."""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from cipherizy.algorithm import Algorithm
from cipherizy.exceptions import (
    DecryptionError,
    InvalidKeyOrSaltError,
    InvalidPayloadError,
    UnderlyingCipherError,
)
from cipherizy_config import get_settings

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
StrPath = Union[str, os.PathLike]

# Key and salt lengths must always be a multiple of this many bytes
KEY_LENGTH_MULTIPLE = 8


class Cipher(ABC):
    """Domain interface for symmetric encryption with caller-supplied key and salt.

    Implementations hold no per-call state, so one instance can be shared
    by any number of callers and threads. Only ``encrypt`` and ``decrypt``
    are algorithm specific; the string and file variants are thin
    conversions around them.
    """

    algorithm: Algorithm

    @property
    def key_size(self) -> int:
        return self.algorithm.key_size

    @property
    def salt_size(self) -> int:
        return self.algorithm.salt_size

    @property
    def block_size(self) -> int:
        return self.algorithm.block_size

    @abstractmethod
    def encrypt(self, key: BytesLike, salt: BytesLike, data: BytesLike) -> bytes:
        """
        Encrypt raw bytes.

        Parameters
        ----------
        key
            Secret key material, exactly ``key_size`` bytes
        salt
            Initialization vector, exactly ``salt_size`` bytes
        data
            Plaintext of any length

        Returns
        -------
        Ciphertext whose length is a multiple of ``block_size``

        Raises
        ------
        InvalidKeyOrSaltError
            If key or salt has the wrong type or length
        InvalidPayloadError
            If data is not bytes-like
        UnderlyingCipherError
            If the crypto engine cannot be initialized
        """

    @abstractmethod
    def decrypt(self, key: BytesLike, salt: BytesLike, data: BytesLike) -> bytes:
        """
        Decrypt raw bytes produced by ``encrypt``.

        Parameters
        ----------
        key
            The key used for encryption
        salt
            The salt used for encryption
        data
            Ciphertext

        Returns
        -------
        The original plaintext bytes

        Raises
        ------
        InvalidKeyOrSaltError
            If key or salt has the wrong type or length
        InvalidPayloadError
            If data is not bytes-like
        DecryptionError
            If the ciphertext length or padding is invalid (e.g. wrong key)
        UnderlyingCipherError
            If the crypto engine cannot be initialized
        """

    def validate_key_and_salt(self, key: BytesLike, salt: BytesLike) -> None:
        """Check key and salt before any cryptographic work is attempted."""
        self._validate_material("key", key, self.key_size)
        self._validate_material("salt", salt, self.salt_size)

    def _validate_material(self, name: str, value: object, expected: int) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            msg = f"{self.algorithm.value} {name} must be bytes, got {type(value).__name__}"
            raise InvalidKeyOrSaltError(
                msg,
                details={"algorithm": self.algorithm.value, "field": name},
            )

        length = memoryview(value).nbytes
        if length % KEY_LENGTH_MULTIPLE != 0 or length != expected:
            logger.warning(
                "Rejected %s %s of %d bytes (expected %d)",
                self.algorithm.value,
                name,
                length,
                expected,
            )
            msg = f"{self.algorithm.value} {name} must be {expected} bytes, got {length}"
            raise InvalidKeyOrSaltError(
                msg,
                details={
                    "algorithm": self.algorithm.value,
                    "field": name,
                    "length": length,
                    "expected": expected,
                },
            )

    def _payload(self, data: object) -> bytes:
        """Return ``data`` as bytes, rejecting anything that is not bytes-like."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            msg = f"{self.algorithm.value} data must be bytes, got {type(data).__name__}"
            raise InvalidPayloadError(
                msg,
                details={"algorithm": self.algorithm.value, "type": type(data).__name__},
            )
        return bytes(data)

    # String convenience

    def encrypt_from_string(self, key: BytesLike, salt: BytesLike, text: str) -> bytes:
        return self.encrypt(key, salt, text.encode("utf-8"))

    def decrypt_to_string(self, key: BytesLike, salt: BytesLike, data: BytesLike) -> str:
        plaintext = self.decrypt(key, salt, data)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = "Decryption failed: plaintext is not valid UTF-8"
            raise DecryptionError(
                msg,
                details={"algorithm": self.algorithm.value},
            ) from e

    # File convenience

    def encrypt_file(self, key: BytesLike, salt: BytesLike, source: StrPath) -> bytes:
        """Read the whole file at ``source`` and encrypt its content."""
        self.validate_key_and_salt(key, salt)
        path = Path(source)
        try:
            with path.open("rb") as f:
                data = f.read()
        except OSError as e:
            msg = f"Could not read file to encrypt: {path}"
            raise UnderlyingCipherError(msg, details={"path": str(path)}) from e

        logger.debug("Read %d bytes from %s for encryption", len(data), path)
        return self.encrypt(key, salt, data)

    def decrypt_to_file(self, key: BytesLike, salt: BytesLike, data: BytesLike) -> Path:
        """Decrypt ``data`` into a newly created temporary file.

        The file is created in ``Settings.temp_dir`` (system temp dir when
        unset). The caller owns the returned file and must delete it. No
        file is created when decryption fails.
        """
        plaintext = self.decrypt(key, salt, data)

        settings = get_settings()
        try:
            fd, name = tempfile.mkstemp(
                prefix=settings.temp_file_prefix,
                suffix=settings.temp_file_suffix,
                dir=settings.temp_dir,
            )
        except OSError as e:
            msg = "Could not create temporary file for decrypted data"
            raise UnderlyingCipherError(
                msg,
                details={"temp_dir": str(settings.temp_dir or tempfile.gettempdir())},
            ) from e

        path = Path(name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(plaintext)
        except OSError as e:
            path.unlink(missing_ok=True)
            msg = f"Could not write decrypted data to {path}"
            raise UnderlyingCipherError(msg, details={"path": str(path)}) from e

        logger.debug("Wrote %d decrypted bytes to %s", len(plaintext), path)
        return path
