"""
RC5/RC6 Key Schedule Implementation

This module expands a variable-length user key into the table of round-key
words consumed by the RC5 and RC6 round transforms. The table is seeded
from the magic constants P and Q of the active word width and then mixed
with the key words in a single add-rotate pass.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..word_ops.word_arithmetic import WordSpec, active_word_spec

logger = logging.getLogger(__name__)

MAX_KEY_LENGTH = 255
MAX_ROUNDS = 255

RC5 = 'rc5'
RC6 = 'rc6'
FAMILIES = (RC5, RC6)


@dataclass(frozen=True)
class Parameters:
    """Cipher parameters (w, r, b): word width, round count, key length."""
    word_size: int
    rounds: int
    key_length: int

    def __str__(self) -> str:
        return f"{self.word_size}/{self.rounds}/{self.key_length}"


class InvalidParameters(ValueError):
    """Raised when a schedule is requested for a malformed parameter triple."""

    def __init__(self, parameters: Parameters, reason: str):
        self.parameters = parameters
        self.reason = reason
        super().__init__(f"Unsupported w/r/b {parameters}: {reason}")


@dataclass(frozen=True)
class RoundKeyTable:
    """
    Round-key words derived from one key for one cipher family.

    Holds 2r+2 words for RC5 and 2r+4 words for RC6. Instances are
    immutable, so a table can be shared between threads.
    """
    family: str
    parameters: Parameters
    word: WordSpec
    words: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> int:
        return self.words[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.words)


def table_length(family: str, rounds: int) -> int:
    """
    Number of round-key words a family needs for a given round count.

    Args:
        family: 'rc5' or 'rc6'
        rounds: Number of rounds

    Returns:
        2r+2 for RC5, 2r+4 for RC6
    """
    if family == RC5:
        return 2 * rounds + 2
    if family == RC6:
        return 2 * rounds + 4
    raise ValueError(f"Unknown cipher family {family!r}; expected one of {FAMILIES}")


def generate_key(key_size: int = 16) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 16)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)


def validate_parameters(parameters: Parameters, key: bytes, word: WordSpec) -> None:
    """
    Check a parameter triple and key against the active word type.

    Raises:
        InvalidParameters: If w does not match the word type, b or r fall
            outside 0..255, r is not a multiple of 4, or the key buffer does
            not hold exactly b bytes
    """
    if parameters.word_size != word.bits:
        raise InvalidParameters(parameters, f"word size must be {word.bits}")
    if not 0 <= parameters.key_length <= MAX_KEY_LENGTH:
        raise InvalidParameters(parameters, f"key length must be in 0..{MAX_KEY_LENGTH}")
    if not 0 <= parameters.rounds <= MAX_ROUNDS:
        raise InvalidParameters(parameters, f"rounds must be in 0..{MAX_ROUNDS}")
    if parameters.rounds % 4 != 0:
        raise InvalidParameters(parameters, "rounds must be a multiple of 4")
    if len(key) != parameters.key_length:
        raise InvalidParameters(parameters, f"key has {len(key)} bytes")


def pack_key(key: bytes, word: WordSpec) -> List[int]:
    """
    Convert key bytes into key words.

    The key is zero-padded to a whole number of words (at least one) and
    read as little-endian words whatever the host byte order.

    Args:
        key: The user key
        word: The word type

    Returns:
        The key words L
    """
    width = word.byte_width
    key_words = max(1, -(-len(key) // width))
    padded = bytes(key) + bytes(key_words * width - len(key))
    return [word.from_wire_order(x) for x in word.load_words(padded)]


def expand_key(family: str, parameters: Parameters, key: bytes,
               word: Optional[WordSpec] = None) -> RoundKeyTable:
    """
    Expand a user key into a round-key table.

    Args:
        family: 'rc5' or 'rc6'
        parameters: The (w, r, b) triple
        key: The user key, exactly b bytes
        word: Word type to build for; defaults to the configured one

    Returns:
        The round-key table

    Raises:
        InvalidParameters: If the parameters are malformed
    """
    if word is None:
        word = active_word_spec()
    validate_parameters(parameters, key, word)

    L = pack_key(key, word)
    size = table_length(family, parameters.rounds)

    # Fill S with constants
    S = [word.p]
    for i in range(1, size):
        S.append(word.add(S[i - 1], word.q))

    # Mix key into S
    A = B = i = j = 0
    for _ in range(3 * max(len(L), size)):
        A = S[i] = word.rotl(word.add(S[i], A, B), 3)
        B = L[j] = word.rotl(word.add(L[j], A, B), (A + B) % word.bits)
        i = (i + 1) % size
        j = (j + 1) % len(L)

    logger.debug(f"Expanded {family.upper()} key schedule for w/r/b {parameters} ({size} words)")
    return RoundKeyTable(family, parameters, word, tuple(S))


def rc5_setup(parameters: Parameters, key: bytes,
              word: Optional[WordSpec] = None) -> RoundKeyTable:
    """Build an RC5 round-key table of 2r+2 words."""
    return expand_key(RC5, parameters, key, word)


def rc6_setup(parameters: Parameters, key: bytes,
              word: Optional[WordSpec] = None) -> RoundKeyTable:
    """Build an RC6 round-key table of 2r+4 words."""
    return expand_key(RC6, parameters, key, word)
