import pytest

from rcblock import config
from rcblock.key_schedule import (
    Parameters, RoundKeyTable, InvalidParameters, RC5, RC6,
    rc5_setup, rc6_setup, expand_key, pack_key, table_length, generate_key,
)
from rcblock.word_ops import get_word_spec

from conftest import pattern_bytes


def test_table_length():
    assert table_length(RC5, 16) == 34
    assert table_length(RC6, 20) == 44
    assert table_length(RC5, 0) == 2
    assert table_length(RC6, 0) == 4
    with pytest.raises(ValueError):
        table_length('rc7', 12)


@pytest.mark.parametrize("bits", config.SUPPORTED_WORD_SIZES)
@pytest.mark.parametrize("rounds", [0, 4, 12, 20])
def test_table_sizes(bits, rounds):
    word = get_word_spec(bits)
    key = pattern_bytes(16)
    params = Parameters(bits, rounds, len(key))

    rc5_table = rc5_setup(params, key, word)
    rc6_table = rc6_setup(params, key, word)

    assert len(rc5_table) == 2 * rounds + 2
    assert len(rc6_table) == 2 * rounds + 4
    assert all(0 <= x <= word.mask for x in rc5_table)
    assert all(0 <= x <= word.mask for x in rc6_table)
    assert rc5_table.family == RC5
    assert rc6_table.family == RC6


def test_default_word_is_the_active_one():
    table = rc5_setup(Parameters(64, 16, 16), pattern_bytes(16))
    assert table.word.bits == 64


def test_pack_key_little_endian():
    word = get_word_spec(64)
    assert pack_key(pattern_bytes(16), word) == [0x0706050403020100, 0x0F0E0D0C0B0A0908]
    assert pack_key(bytes([1, 2, 3]), get_word_spec(32)) == [0x030201]
    # Zero padding goes in the highest word
    assert pack_key(bytes([1, 2, 3, 4, 5]), get_word_spec(32)) == [0x04030201, 0x05]


def test_pack_key_is_host_independent():
    key = generate_key(21)
    assert pack_key(key, get_word_spec(64, 'little')) == pack_key(key, get_word_spec(64, 'big'))


def test_empty_key_packs_to_one_zero_word():
    assert pack_key(b'', get_word_spec(64)) == [0]


def test_empty_key_schedule_is_deterministic():
    params = Parameters(64, 252, 0)
    first = rc5_setup(params, b'')
    second = rc5_setup(params, b'')
    assert first == second
    assert len(first) == 2 * 252 + 2


def test_identical_inputs_give_identical_tables():
    key = generate_key(16)
    params = Parameters(32, 20, 16)
    word = get_word_spec(32)
    assert rc6_setup(params, key, word).words == rc6_setup(params, key, word).words


def test_different_keys_give_different_tables():
    params = Parameters(32, 12, 16)
    word = get_word_spec(32)
    assert rc5_setup(params, bytes(16), word).words != rc5_setup(params, pattern_bytes(16), word).words


def test_tables_are_host_independent():
    key = pattern_bytes(16)
    params = Parameters(64, 20, 16)
    little = rc6_setup(params, key, get_word_spec(64, 'little'))
    big = rc6_setup(params, key, get_word_spec(64, 'big'))
    assert little.words == big.words


def test_table_is_immutable():
    table = rc5_setup(Parameters(64, 4, 8), pattern_bytes(8))
    assert isinstance(table, RoundKeyTable)
    assert isinstance(table.words, tuple)
    with pytest.raises(AttributeError):
        table.words = ()
    with pytest.raises(TypeError):
        table.words[0] = 0


@pytest.mark.parametrize("params,key_length", [
    (Parameters(64, 5, 16), 16),      # r not a multiple of 4
    (Parameters(64, 250, 0), 0),      # r not a multiple of 4
    (Parameters(64, 256, 16), 16),    # r > 255
    (Parameters(64, -4, 16), 16),     # r < 0
    (Parameters(64, 16, 256), 256),   # b > 255
    (Parameters(32, 16, 16), 16),     # w does not match the active width
    (Parameters(128, 16, 16), 16),    # w does not match the active width
    (Parameters(64, 16, 16), 15),     # key buffer shorter than b
    (Parameters(64, 16, 16), 17),     # key buffer longer than b
])
def test_setup_rejects_invalid_parameters(params, key_length):
    key = pattern_bytes(key_length)
    for setup in (rc5_setup, rc6_setup):
        with pytest.raises(InvalidParameters) as excinfo:
            setup(params, key)
        assert excinfo.value.parameters == params


def test_invalid_parameters_is_a_value_error():
    with pytest.raises(ValueError, match="64/5/16"):
        rc5_setup(Parameters(64, 5, 16), pattern_bytes(16))


def test_explicit_word_type_must_match():
    with pytest.raises(InvalidParameters):
        expand_key(RC6, Parameters(64, 20, 16), pattern_bytes(16), get_word_spec(32))


def test_limits_are_accepted():
    params = Parameters(64, 252, 255)
    table = rc6_setup(params, pattern_bytes(255))
    assert len(table) == 2 * 252 + 4


def test_generate_key():
    assert len(generate_key()) == 16
    assert len(generate_key(32)) == 32
    assert generate_key(16) != generate_key(16)


def test_setup_logs_without_key_material(caplog):
    key = bytes([0xAB] * 16)
    with caplog.at_level("DEBUG", logger="rcblock.key_schedule.rc_key_schedule"):
        rc5_setup(Parameters(64, 16, 16), key)
    assert "RC5" in caplog.text
    assert "64/16/16" in caplog.text
    assert key.hex() not in caplog.text.lower()
