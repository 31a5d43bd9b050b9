import sys

import pytest

from rcblock import config


def test_defaults():
    assert config.active_word_size() == 64
    assert config.host_byteorder() == sys.byteorder


def test_word_size_override(monkeypatch):
    monkeypatch.setenv(config.WORD_SIZE_ENV, "32")
    assert config.active_word_size() == 32


@pytest.mark.parametrize("value", ["24", "sixty-four", "256"])
def test_word_size_override_rejects_unsupported(monkeypatch, value):
    monkeypatch.setenv(config.WORD_SIZE_ENV, value)
    with pytest.raises(ValueError):
        config.active_word_size()


@pytest.mark.parametrize("value,expected", [("big", "big"), ("LITTLE", "little"), (" big ", "big")])
def test_byteorder_override(monkeypatch, value, expected):
    monkeypatch.setenv(config.BYTEORDER_ENV, value)
    assert config.host_byteorder() == expected


def test_byteorder_override_rejects_garbage(monkeypatch):
    monkeypatch.setenv(config.BYTEORDER_ENV, "middle")
    with pytest.raises(ValueError):
        config.host_byteorder()
