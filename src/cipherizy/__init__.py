"""Pluggable symmetric encryption behind a single cipher contract.

Usage:
- ``CipherFactory.get_instance().get(Algorithm.AES)`` returns the shared AES cipher
- ``encrypt``/``decrypt`` work on bytes; string and file variants wrap them
- Every failure is a ``CipherError`` whose ``code`` tells what went wrong

Design notes:
- Keys and salts are supplied by the caller; nothing is derived or stored
- AES runs in CBC mode without authentication, so a wrong salt is not detected
"""

from cipherizy.aes import AESCipher
from cipherizy.algorithm import Algorithm
from cipherizy.cipher import Cipher
from cipherizy.exceptions import (
    CipherError,
    DecryptionError,
    ErrorCode,
    InvalidKeyOrSaltError,
    InvalidPayloadError,
    UnderlyingCipherError,
    UnsupportedAlgorithmError,
)
from cipherizy.factory import CipherFactory, get_cipher
from cipherizy.logging_config import configure_logging
from cipherizy.result import CipherResult

__all__ = [
    # Contract & implementations
    "AESCipher",
    "Algorithm",
    "Cipher",
    "CipherFactory",
    "get_cipher",
    # Errors
    "CipherError",
    "DecryptionError",
    "ErrorCode",
    "InvalidKeyOrSaltError",
    "InvalidPayloadError",
    "UnderlyingCipherError",
    "UnsupportedAlgorithmError",
    # Results
    "CipherResult",
    # Logging
    "configure_logging",
]
