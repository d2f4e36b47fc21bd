"""Root pytest configuration.

Test Structure:
    tests/
    ├── cipherizy/
    │   └── unit/              # Fast, isolated tests of the cipher library
    └── cipherizy_config/      # Settings loading

Every test starts with a fresh settings cache and a fresh shared
CipherFactory, so environment overrides never leak between tests.
"""

import pytest

from cipherizy import Algorithm, CipherFactory
from cipherizy_config import clear_settings_cache

# 16 bytes = 128 bits
KEY = "00_FELIPE_BONEZI".encode("utf-8")
SALT = "FELIPEBONEZISALT".encode("utf-8")


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    """Isolate settings and the shared factory per test."""
    for name in (
        "CIPHERIZY_ENV_FILE",
        "CIPHERIZY_LOG_LEVEL",
        "CIPHERIZY_TEMP_DIR",
        "CIPHERIZY_TEMP_FILE_PREFIX",
        "CIPHERIZY_TEMP_FILE_SUFFIX",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    CipherFactory.reset_instance()
    yield
    clear_settings_cache()
    CipherFactory.reset_instance()


@pytest.fixture
def key() -> bytes:
    return KEY


@pytest.fixture
def salt() -> bytes:
    return SALT


@pytest.fixture
def factory() -> CipherFactory:
    return CipherFactory.get_instance()


@pytest.fixture
def aes(factory):
    return factory.get(Algorithm.AES)


@pytest.fixture
def temp_output_dir(tmp_path, monkeypatch):
    """Send decrypted files to a per-test directory."""
    out = tmp_path / "decrypted"
    out.mkdir()
    monkeypatch.setenv("CIPHERIZY_TEMP_DIR", str(out))
    clear_settings_cache()
    return out
