import pytest

from rcblock import config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test against the built-in defaults."""
    monkeypatch.delenv(config.WORD_SIZE_ENV, raising=False)
    monkeypatch.delenv(config.BYTEORDER_ENV, raising=False)


def pattern_bytes(length):
    """Bytes 00 01 02 ... of the given length."""
    return bytes(i % 256 for i in range(length))
