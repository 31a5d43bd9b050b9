"""
Word Arithmetic

This module implements the fixed-width unsigned word operations that the
RC5 and RC6 key schedule and round transforms are built on: modular
addition, subtraction and multiplication, data-dependent rotation, and
normalization of words to and from the little-endian wire order.

Every supported width is described by a WordSpec, so several widths can
be used side by side in one process.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional

from .. import config

# Magic constants P = Odd((e-2)*2^w) and Q = Odd((phi-1)*2^w) for each width
MAGIC_CONSTANTS = {
    8: (0xB7, 0x9F),
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15),
    128: (0xB7E151628AED2A6ABF7158809CF4F3C7, 0x9E3779B97F4A7C15F39CC0605CEDC835),
}

# log2(w), the fixed RC6 rotation amount
LG_WORD_SIZE = {8: 3, 16: 4, 32: 5, 64: 6, 128: 7}


def rotate_left(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value left by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo size)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    mask = (1 << size) - 1
    value &= mask
    shift %= size
    return ((value << shift) | (value >> (size - shift))) & mask


def rotate_right(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value right by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo size)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    mask = (1 << size) - 1
    value &= mask
    shift %= size
    return ((value >> shift) | (value << (size - shift))) & mask


@dataclass(frozen=True)
class WordSpec:
    """
    A fixed-width unsigned word type.

    Carries the bit width, the magic constants for that width and the byte
    order words are loaded in on the executing host. All arithmetic wraps
    modulo 2^bits.
    """
    bits: int
    p: int
    q: int
    byteorder: str = 'little'

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def byte_width(self) -> int:
        return self.bits // 8

    @property
    def lgw(self) -> int:
        return LG_WORD_SIZE[self.bits]

    def add(self, *values: int) -> int:
        return sum(values) & self.mask

    def sub(self, x: int, y: int) -> int:
        return (x - y) & self.mask

    def mul(self, x: int, y: int) -> int:
        return (x * y) & self.mask

    def rotl(self, x: int, d: int) -> int:
        return rotate_left(x, d, self.bits)

    def rotr(self, x: int, d: int) -> int:
        return rotate_right(x, d, self.bits)

    def byte_swap(self, x: int) -> int:
        """Reverse the byte order of a word."""
        return int.from_bytes(x.to_bytes(self.byte_width, 'little'), 'big')

    def to_wire_order(self, x: int) -> int:
        """
        Normalize a word for output in the little-endian wire order.

        Words only need swapping when they were loaded on a big-endian host.
        """
        if self.byteorder == 'big':
            return self.byte_swap(x)
        return x

    def from_wire_order(self, x: int) -> int:
        """Interpret a natively loaded word as a little-endian wire value."""
        # Byte swapping is an involution
        return self.to_wire_order(x)

    def load_words(self, data: bytes) -> List[int]:
        """
        Read a byte buffer as consecutive words in this host's byte order.

        Args:
            data: Buffer whose length is a multiple of byte_width

        Returns:
            The words, as the host would see them in memory
        """
        width = self.byte_width
        if len(data) % width:
            raise ValueError(f"Buffer length {len(data)} is not a multiple of {width} bytes")
        return [int.from_bytes(data[i:i + width], self.byteorder)
                for i in range(0, len(data), width)]

    def store_words(self, words: Iterable[int]) -> bytes:
        """Write words to a byte buffer in this host's byte order."""
        return b''.join((word & self.mask).to_bytes(self.byte_width, self.byteorder)
                        for word in words)

    def on_host(self, byteorder: str) -> 'WordSpec':
        """Return the same word type as loaded on a host of another byte order."""
        if byteorder not in ('little', 'big'):
            raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")
        return replace(self, byteorder=byteorder)


WORD_SPECS: Dict[int, WordSpec] = {
    bits: WordSpec(bits, p, q) for bits, (p, q) in MAGIC_CONSTANTS.items()
}


def get_word_spec(bits: int, byteorder: Optional[str] = None) -> WordSpec:
    """
    Look up the word type for a supported width.

    Args:
        bits: Word width in bits (8, 16, 32, 64 or 128)
        byteorder: Host byte order; defaults to the configured host order

    Returns:
        The WordSpec for that width and byte order

    Raises:
        ValueError: If the width is not supported
    """
    if bits not in WORD_SPECS:
        raise ValueError(f"Unsupported word size {bits}; expected one of {config.SUPPORTED_WORD_SIZES}")
    if byteorder is None:
        byteorder = config.host_byteorder()
    return WORD_SPECS[bits].on_host(byteorder)


def active_word_spec() -> WordSpec:
    """Return the word type selected by the configuration."""
    return get_word_spec(config.active_word_size())
