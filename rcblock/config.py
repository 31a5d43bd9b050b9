"""
Configuration

Default cipher parameters and the environment overrides that select the
active word width and the host byte order.
"""

import os
import sys

SUPPORTED_WORD_SIZES = (8, 16, 32, 64, 128)

# Default parameters for the engine
DEFAULT_PARAMS = {
    'word_size': 64,    # Active word width in bits
    'rc5_rounds': 16,   # Default RC5 round count
    'rc6_rounds': 20,   # Default RC6 round count
}

WORD_SIZE_ENV = 'RCBLOCK_WORD_SIZE'
BYTEORDER_ENV = 'RCBLOCK_HOST_BYTEORDER'


def active_word_size() -> int:
    """
    Return the active word width in bits.

    Reads RCBLOCK_WORD_SIZE, falling back to DEFAULT_PARAMS['word_size'].

    Raises:
        ValueError: If the environment names an unsupported width
    """
    env_value = os.environ.get(WORD_SIZE_ENV)
    if not env_value:
        return DEFAULT_PARAMS['word_size']

    try:
        word_size = int(env_value)
    except ValueError:
        raise ValueError(f"{WORD_SIZE_ENV} must be an integer, got {env_value!r}")

    if word_size not in SUPPORTED_WORD_SIZES:
        raise ValueError(f"{WORD_SIZE_ENV} must be one of {SUPPORTED_WORD_SIZES}, got {word_size}")
    return word_size


def host_byteorder() -> str:
    """
    Return the byte order words are loaded in on this host.

    RCBLOCK_HOST_BYTEORDER ('little' or 'big') overrides sys.byteorder.
    """
    env_value = os.environ.get(BYTEORDER_ENV)
    if not env_value:
        return sys.byteorder

    byteorder = env_value.strip().lower()
    if byteorder not in ('little', 'big'):
        raise ValueError(f"{BYTEORDER_ENV} must be 'little' or 'big', got {env_value!r}")
    return byteorder
