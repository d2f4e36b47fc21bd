"""AES-128-CBC cipher implementation."""

from __future__ import annotations

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher as BlockCipher
from cryptography.hazmat.primitives.ciphers import algorithms, modes

from cipherizy.algorithm import Algorithm
from cipherizy.cipher import BytesLike, Cipher
from cipherizy.exceptions import DecryptionError, UnderlyingCipherError

logger = logging.getLogger(__name__)


class AESCipher(Cipher):
    """AES with a 128-bit key in CBC mode, the salt used as IV, PKCS#7 padding.

    Decrypting with the wrong key fails on the padding check. Decrypting with
    the wrong salt only garbles the first block and is not detected: there is
    no authentication tag.
    """

    algorithm = Algorithm.AES

    def encrypt(self, key: BytesLike, salt: BytesLike, data: BytesLike) -> bytes:
        self.validate_key_and_salt(key, salt)
        plaintext = self._payload(data)
        engine = self._engine(key, salt)

        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded_data = padder.update(plaintext) + padder.finalize()

        encryptor = engine.encryptor()
        ciphertext = encryptor.update(padded_data) + encryptor.finalize()
        logger.debug("AES encrypted %d bytes into %d", len(plaintext), len(ciphertext))
        return ciphertext

    def decrypt(self, key: BytesLike, salt: BytesLike, data: BytesLike) -> bytes:
        self.validate_key_and_salt(key, salt)
        ciphertext = self._payload(data)

        length = len(ciphertext)
        if length == 0 or length % self.block_size != 0:
            logger.warning("Rejected AES ciphertext of %d bytes", length)
            msg = (
                f"Decryption failed: ciphertext length {length} is not a "
                f"positive multiple of {self.block_size}"
            )
            raise DecryptionError(msg, details={"length": length})

        engine = self._engine(key, salt)
        try:
            decryptor = engine.decryptor()
            padded_data = decryptor.update(ciphertext) + decryptor.finalize()

            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(padded_data) + unpadder.finalize()
        except ValueError as e:
            logger.warning("AES decryption failed: %s", e)
            msg = "Decryption failed: invalid padding (wrong key or corrupted data)"
            raise DecryptionError(msg, details={"length": length}) from e

        logger.debug("AES decrypted %d bytes into %d", length, len(plaintext))
        return plaintext

    @staticmethod
    def _engine(key: BytesLike, salt: BytesLike) -> BlockCipher:
        try:
            return BlockCipher(algorithms.AES(bytes(key)), modes.CBC(bytes(salt)))
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            msg = f"Could not initialize AES engine: {e}"
            raise UnderlyingCipherError(msg, details={"algorithm": "AES"}) from e
