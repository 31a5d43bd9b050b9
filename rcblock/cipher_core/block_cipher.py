"""
Block Cipher Implementation

This module provides byte-oriented RC5 and RC6 cipher objects. Each object
expands its key once at construction and then encrypts or decrypts single
blocks of raw bytes, so callers never handle words or byte order.
"""

from typing import List, Optional, Sequence

from .. import config
from ..key_schedule.rc_key_schedule import (
    Parameters, RoundKeyTable, InvalidParameters, RC5, RC6, rc5_setup, rc6_setup,
)
from ..word_ops.word_arithmetic import WordSpec, get_word_spec
from .rc5 import rc5_encrypt, rc5_decrypt
from .rc6 import rc6_encrypt, rc6_decrypt


class RCBlockCipher:
    """
    Single-block cipher over a configurable word width.

    Subclasses fix the cipher family, the number of words per block and
    the schedule and transform functions.
    """

    family = ''
    words_per_block = 0
    default_rounds_key = ''

    def __init__(self,
                 key: bytes,
                 rounds: Optional[int] = None,
                 word_size: Optional[int] = None,
                 byteorder: Optional[str] = None):
        """
        Initialize the cipher and expand the key.

        Args:
            key: The user key (0 to 255 bytes)
            rounds: Number of rounds, a multiple of 4 (default from config)
            word_size: Word width in bits (default: the active word size)
            byteorder: Host byte order override (default from config)

        Raises:
            InvalidParameters: If the word size, rounds or key length are invalid
        """
        if rounds is None:
            rounds = config.DEFAULT_PARAMS[self.default_rounds_key]
        if word_size is None:
            word_size = config.active_word_size()

        self.parameters = Parameters(word_size, rounds, len(key))
        if word_size not in config.SUPPORTED_WORD_SIZES:
            raise InvalidParameters(self.parameters, f"word size must be one of {config.SUPPORTED_WORD_SIZES}")

        self.word = get_word_spec(word_size, byteorder)
        self.table = self._setup(self.parameters, bytes(key), self.word)

    @property
    def rounds(self) -> int:
        return self.parameters.rounds

    @property
    def block_size(self) -> int:
        """Block size in bytes."""
        return self.words_per_block * self.word.byte_width

    def _setup(self, parameters: Parameters, key: bytes, word: WordSpec) -> RoundKeyTable:
        raise NotImplementedError

    def _encrypt_words(self, block: Sequence[int]) -> List[int]:
        raise NotImplementedError

    def _decrypt_words(self, block: Sequence[int]) -> List[int]:
        raise NotImplementedError

    def _check_length(self, data: bytes, name: str) -> None:
        if len(data) != self.block_size:
            raise ValueError(f"{name} must be exactly {self.block_size} bytes")

    def encrypt_block(self, plaintext: bytes) -> bytes:
        """
        Encrypt a single block of plaintext.

        Args:
            plaintext: The plaintext block (block_size bytes)

        Returns:
            The encrypted ciphertext block
        """
        self._check_length(plaintext, "Plaintext")
        words = self.word.load_words(plaintext)
        return self.word.store_words(self._encrypt_words(words))

    def decrypt_block(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a single block of ciphertext.

        Args:
            ciphertext: The ciphertext block (block_size bytes)

        Returns:
            The decrypted plaintext block
        """
        self._check_length(ciphertext, "Ciphertext")
        words = self.word.load_words(ciphertext)
        return self.word.store_words(self._decrypt_words(words))


class RC5Cipher(RCBlockCipher):
    """RC5-w/r/b: two words per block."""

    family = RC5
    words_per_block = 2
    default_rounds_key = 'rc5_rounds'

    def _setup(self, parameters: Parameters, key: bytes, word: WordSpec) -> RoundKeyTable:
        return rc5_setup(parameters, key, word)

    def _encrypt_words(self, block: Sequence[int]) -> List[int]:
        return rc5_encrypt(self.table, self.rounds, block)

    def _decrypt_words(self, block: Sequence[int]) -> List[int]:
        return rc5_decrypt(self.table, self.rounds, block)


class RC6Cipher(RCBlockCipher):
    """RC6-w/r/b: four words per block."""

    family = RC6
    words_per_block = 4
    default_rounds_key = 'rc6_rounds'

    def _setup(self, parameters: Parameters, key: bytes, word: WordSpec) -> RoundKeyTable:
        return rc6_setup(parameters, key, word)

    def _encrypt_words(self, block: Sequence[int]) -> List[int]:
        return rc6_encrypt(self.table, self.rounds, block)

    def _decrypt_words(self, block: Sequence[int]) -> List[int]:
        return rc6_decrypt(self.table, self.rounds, block)


CIPHERS = {RC5: RC5Cipher, RC6: RC6Cipher}


def new_cipher(family: str, key: bytes, **kwargs) -> RCBlockCipher:
    """
    Create a cipher object for a family name.

    Args:
        family: 'rc5' or 'rc6'
        key: The user key
        **kwargs: rounds, word_size, byteorder

    Returns:
        The cipher object
    """
    try:
        cipher_class = CIPHERS[family]
    except KeyError:
        raise ValueError(f"Unknown cipher family {family!r}; expected one of {tuple(CIPHERS)}")
    return cipher_class(key, **kwargs)


def encrypt_block(plaintext: bytes, key: bytes,
                  family: str = RC6,
                  rounds: Optional[int] = None,
                  word_size: Optional[int] = None) -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block to encrypt
        key: The user key
        family: 'rc5' or 'rc6' (default: 'rc6')
        rounds: Number of rounds (default from config)
        word_size: Word width in bits (default: the active word size)

    Returns:
        The encrypted ciphertext block
    """
    cipher = new_cipher(family, key, rounds=rounds, word_size=word_size)
    return cipher.encrypt_block(plaintext)


def decrypt_block(ciphertext: bytes, key: bytes,
                  family: str = RC6,
                  rounds: Optional[int] = None,
                  word_size: Optional[int] = None) -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block to decrypt
        key: The user key
        family: 'rc5' or 'rc6' (default: 'rc6')
        rounds: Number of rounds (default from config)
        word_size: Word width in bits (default: the active word size)

    Returns:
        The decrypted plaintext block
    """
    cipher = new_cipher(family, key, rounds=rounds, word_size=word_size)
    return cipher.decrypt_block(ciphertext)
