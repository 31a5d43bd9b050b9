import numpy as np
import pytest

from rcblock.analysis import bit_difference, avalanche_matrix, avalanche_score, key_avalanche
from rcblock.cipher_core import RC5Cipher, RC6Cipher
from rcblock.key_schedule import Parameters, RC6

from conftest import pattern_bytes


def test_bit_difference():
    assert bit_difference(b'\x00', b'\xff') == 8
    assert bit_difference(b'\x0f\x00', b'\x0e\x01') == 2
    assert bit_difference(b'abc', b'abc') == 0
    with pytest.raises(ValueError):
        bit_difference(b'a', b'ab')


def test_avalanche_matrix_shape():
    cipher = RC5Cipher(pattern_bytes(16), rounds=12, word_size=32)
    matrix = avalanche_matrix(cipher.encrypt_block, cipher.block_size, samples=2, seed=1)
    assert matrix.shape == (64, 64)
    assert np.all((matrix >= 0) & (matrix <= 1))


def test_avalanche_matrix_of_identity_is_diagonal():
    matrix = avalanche_matrix(lambda block: block, 2, samples=3, seed=0)
    assert np.array_equal(matrix, np.eye(16))


@pytest.mark.parametrize("cipher", [
    RC5Cipher(pattern_bytes(16), rounds=12, word_size=32),
    RC6Cipher(pattern_bytes(16), rounds=20, word_size=32),
])
def test_full_round_ciphers_diffuse(cipher):
    score = avalanche_score(cipher.encrypt_block, cipher.block_size, samples=4, seed=42)
    assert 0.4 < score < 0.6


def test_whitening_only_does_not_diffuse():
    cipher = RC5Cipher(pattern_bytes(16), rounds=0, word_size=32)
    score = avalanche_score(cipher.encrypt_block, cipher.block_size, samples=4, seed=42)
    assert score < 0.1


def test_key_avalanche():
    fraction = key_avalanche(RC6, Parameters(64, 20, 16), pattern_bytes(16), bit=5)
    assert 0.4 < fraction < 0.6


def test_key_avalanche_rejects_bad_bit():
    with pytest.raises(ValueError):
        key_avalanche(RC6, Parameters(64, 20, 0), b'')
