"""
Cipher Core Package

This package implements the RC5 and RC6 round transforms over word
blocks, and byte-oriented single-block cipher objects built on them.
"""

from .rc5 import rc5_encrypt, rc5_decrypt
from .rc6 import rc6_encrypt, rc6_decrypt
from .block_cipher import (
    RCBlockCipher, RC5Cipher, RC6Cipher, new_cipher, encrypt_block, decrypt_block,
)

__all__ = [
    'rc5_encrypt', 'rc5_decrypt', 'rc6_encrypt', 'rc6_decrypt',
    'RCBlockCipher', 'RC5Cipher', 'RC6Cipher', 'new_cipher',
    'encrypt_block', 'decrypt_block',
]
