"""
Diffusion Analysis

This module measures how well the RC5/RC6 transforms and the key schedule
spread single-bit changes: the avalanche matrix of a block cipher, its
mean avalanche score, and the fraction of round-key bits changed by a
one-bit key change. An ideal cipher flips about half of the output bits.
"""

import logging
from typing import Callable, Optional

import numpy as np

from ..key_schedule.rc_key_schedule import Parameters, expand_key
from ..word_ops.word_arithmetic import WordSpec

logger = logging.getLogger(__name__)

BlockFunction = Callable[[bytes], bytes]


def _to_bits(data: bytes) -> np.ndarray:
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8))


def bit_difference(a: bytes, b: bytes) -> int:
    """
    Count the bits that differ between two equal-length byte strings.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        The Hamming distance in bits
    """
    if len(a) != len(b):
        raise ValueError("Inputs must have the same length")
    return int(np.count_nonzero(_to_bits(a) ^ _to_bits(b)))


def avalanche_matrix(encrypt: BlockFunction,
                     block_size: int,
                     samples: int = 16,
                     seed: Optional[int] = None) -> np.ndarray:
    """
    Estimate the avalanche matrix of a block function.

    Entry [i, j] is the observed probability that flipping input bit i
    flips output bit j, over random input blocks.

    Args:
        encrypt: Function mapping a block of block_size bytes to a block
        block_size: Block size in bytes
        samples: Number of random blocks to average over
        seed: Seed for the random generator

    Returns:
        A (8*block_size, 8*block_size) float array
    """
    rng = np.random.default_rng(seed)
    num_bits = 8 * block_size
    flips = np.zeros((num_bits, num_bits), dtype=np.int64)

    for _ in range(samples):
        block = rng.integers(0, 256, size=block_size, dtype=np.uint8).tobytes()
        base_bits = _to_bits(encrypt(block))

        for bit in range(num_bits):
            flipped = bytearray(block)
            # unpackbits orders bits most-significant first
            flipped[bit // 8] ^= 0x80 >> (bit % 8)
            flips[bit] += _to_bits(encrypt(bytes(flipped))) ^ base_bits

    return flips / samples


def avalanche_score(encrypt: BlockFunction,
                    block_size: int,
                    samples: int = 16,
                    seed: Optional[int] = None) -> float:
    """
    Mean fraction of output bits flipped by a single input-bit change.

    Returns:
        A score in [0, 1]; close to 0.5 for good diffusion
    """
    matrix = avalanche_matrix(encrypt, block_size, samples, seed)
    score = float(matrix.mean())
    logger.debug(f"Avalanche score over {samples} samples: {score:.4f}")
    return score


def key_avalanche(family: str,
                  parameters: Parameters,
                  key: bytes,
                  bit: int = 0,
                  word: Optional[WordSpec] = None) -> float:
    """
    Fraction of round-key table bits changed by flipping one key bit.

    Args:
        family: 'rc5' or 'rc6'
        parameters: The (w, r, b) triple; b must be at least 1
        key: The user key
        bit: Index of the key bit to flip
        word: Word type to build for; defaults to the configured one

    Returns:
        The changed fraction of table bits
    """
    if not 0 <= bit < 8 * len(key):
        raise ValueError(f"Bit index {bit} is outside a {len(key)}-byte key")

    modified_key = bytearray(key)
    modified_key[bit // 8] ^= 1 << (bit % 8)

    table = expand_key(family, parameters, key, word)
    modified_table = expand_key(family, parameters, bytes(modified_key), word)

    original = table.word.store_words(table.words)
    modified = table.word.store_words(modified_table.words)
    return bit_difference(original, modified) / (8 * len(original))
