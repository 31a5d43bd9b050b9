"""
rcblock - RC5 and RC6 Block Cipher Engine

This library implements the RC5 and RC6 block ciphers over a configurable
machine-word width, with a variable number of rounds and a variable key
length.

Key Features:
- Word widths of 8, 16, 32, 64 and 128 bits, usable side by side
- Round counts 0..255 (multiples of 4) and key lengths 0..255 bytes
- RC5/RC6 key schedule shared between both cipher families
- Little-endian wire format independent of the host byte order
- Byte-oriented single-block cipher objects
- Test vector printer and diffusion analysis tools

"""

from .key_schedule import Parameters, RoundKeyTable, InvalidParameters, rc5_setup, rc6_setup
from .cipher_core import (
    rc5_encrypt, rc5_decrypt, rc6_encrypt, rc6_decrypt, RC5Cipher, RC6Cipher,
)
from .word_ops import WordSpec, get_word_spec

__version__ = '0.1.0'
__author__ = 'rcblock Team'

__all__ = [
    'Parameters', 'RoundKeyTable', 'InvalidParameters', 'rc5_setup', 'rc6_setup',
    'rc5_encrypt', 'rc5_decrypt', 'rc6_encrypt', 'rc6_decrypt',
    'RC5Cipher', 'RC6Cipher', 'WordSpec', 'get_word_spec',
]
