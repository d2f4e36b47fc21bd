"""Unit tests for the string and file variants of the Cipher contract."""

import os
from pathlib import Path

import pytest

from cipherizy import (
    Cipher,
    DecryptionError,
    ErrorCode,
    InvalidKeyOrSaltError,
    UnderlyingCipherError,
)

CREDIT_CARD_NUMBER_16 = "6516600011112222"
CREDIT_CARD_NUMBER_22 = "6062000011112222333355"


class TestStringVariants:
    """Test encrypt_from_string / decrypt_to_string."""

    def test_string_roundtrip(self, aes, key, salt):
        encrypted = aes.encrypt_from_string(key, salt, CREDIT_CARD_NUMBER_16)

        assert len(encrypted) % 16 == 0
        assert aes.decrypt_to_string(key, salt, encrypted) == CREDIT_CARD_NUMBER_16

    def test_string_matches_utf8_bytes(self, aes, key, salt):
        assert aes.encrypt_from_string(key, salt, "text") == aes.encrypt(key, salt, b"text")

    def test_empty_string(self, aes, key, salt):
        encrypted = aes.encrypt_from_string(key, salt, "")

        assert aes.decrypt_to_string(key, salt, encrypted) == ""

    def test_unicode(self, aes, key, salt):
        plaintext = "Passwörd_with_émoji_\U0001f512"

        encrypted = aes.encrypt_from_string(key, salt, plaintext)

        assert aes.decrypt_to_string(key, salt, encrypted) == plaintext

    def test_non_utf8_plaintext_raises_decryption_error(self, aes, key, salt):
        encrypted = aes.encrypt(key, salt, b"\xff\xfe\xfd")

        with pytest.raises(DecryptionError, match="not valid UTF-8") as exc_info:
            aes.decrypt_to_string(key, salt, encrypted)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestFileVariants:
    """Test encrypt_file / decrypt_to_file."""

    def test_file_roundtrip(self, aes, key, salt, tmp_path, temp_output_dir):
        original = tmp_path / "original.tmp"
        original.write_bytes(CREDIT_CARD_NUMBER_22.encode("utf-8"))

        encrypted = aes.encrypt_file(key, salt, original)
        assert len(encrypted) % 16 == 0

        decrypted_file = aes.decrypt_to_file(key, salt, encrypted)

        assert decrypted_file.read_text(encoding="utf-8") == CREDIT_CARD_NUMBER_22
        assert decrypted_file.read_bytes() == original.read_bytes()

    def test_binary_file_roundtrip(self, aes, key, salt, tmp_path, temp_output_dir):
        original = tmp_path / "blob.bin"
        original.write_bytes(os.urandom(4099))

        decrypted_file = aes.decrypt_to_file(key, salt, aes.encrypt_file(key, salt, original))

        assert decrypted_file.read_bytes() == original.read_bytes()

    def test_encrypt_file_accepts_str_path(self, aes, key, salt, tmp_path):
        original = tmp_path / "original.tmp"
        original.write_bytes(b"content")

        assert aes.encrypt_file(key, salt, str(original)) == aes.encrypt(key, salt, b"content")

    def test_encrypt_missing_file_raises_underlying_failure(self, aes, key, salt, tmp_path):
        missing = tmp_path / "missing.tmp"

        with pytest.raises(UnderlyingCipherError, match="Could not read") as exc_info:
            aes.encrypt_file(key, salt, missing)

        assert exc_info.value.code is ErrorCode.UNDERLYING_FAILURE
        assert exc_info.value.details["path"] == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_encrypt_file_validates_before_reading(self, aes, salt, tmp_path):
        with pytest.raises(InvalidKeyOrSaltError):
            aes.encrypt_file(b"0" * 15, salt, tmp_path / "missing.tmp")

    def test_decrypt_to_file_uses_configured_location(self, aes, key, salt, temp_output_dir, monkeypatch):
        from cipherizy_config import clear_settings_cache

        monkeypatch.setenv("CIPHERIZY_TEMP_FILE_PREFIX", "card-")
        monkeypatch.setenv("CIPHERIZY_TEMP_FILE_SUFFIX", ".txt")
        clear_settings_cache()

        decrypted_file = aes.decrypt_to_file(key, salt, aes.encrypt(key, salt, b"x"))

        assert isinstance(decrypted_file, Path)
        assert decrypted_file.parent == temp_output_dir
        assert decrypted_file.name.startswith("card-")
        assert decrypted_file.name.endswith(".txt")

    def test_each_call_creates_a_new_file(self, aes, key, salt, temp_output_dir):
        encrypted = aes.encrypt(key, salt, b"x")

        first = aes.decrypt_to_file(key, salt, encrypted)
        second = aes.decrypt_to_file(key, salt, encrypted)

        assert first != second
        assert first.exists() and second.exists()

    def test_failed_decryption_creates_no_file(self, aes, key, salt, temp_output_dir):
        encrypted = aes.encrypt(key, salt, CREDIT_CARD_NUMBER_16.encode("utf-8"))

        with pytest.raises(DecryptionError):
            aes.decrypt_to_file(b"0987654321678901", salt, encrypted)

        assert list(temp_output_dir.iterdir()) == []

    def test_unwritable_temp_dir_raises_underlying_failure(self, aes, key, salt, tmp_path, monkeypatch):
        from cipherizy_config import clear_settings_cache

        monkeypatch.setenv("CIPHERIZY_TEMP_DIR", str(tmp_path / "does" / "not" / "exist"))
        clear_settings_cache()

        with pytest.raises(UnderlyingCipherError, match="temporary file"):
            aes.decrypt_to_file(key, salt, aes.encrypt(key, salt, b"x"))


class TestCustomCipher:
    """Test that the contract's conveniences work for any implementation."""

    def test_conveniences_delegate_to_encrypt_and_decrypt(self, key, salt, temp_output_dir):
        from cipherizy import Algorithm

        class ReversingCipher(Cipher):
            algorithm = Algorithm.AES

            def encrypt(self, key, salt, data):
                self.validate_key_and_salt(key, salt)
                return bytes(data)[::-1]

            def decrypt(self, key, salt, data):
                self.validate_key_and_salt(key, salt)
                return bytes(data)[::-1]

        cipher = ReversingCipher()

        assert cipher.encrypt_from_string(key, salt, "abc") == b"cba"
        assert cipher.decrypt_to_string(key, salt, b"cba") == "abc"
        assert cipher.decrypt_to_file(key, salt, b"cba").read_bytes() == b"abc"

    def test_contract_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Cipher()
