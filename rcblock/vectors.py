"""
Test Vector Printer

Prints RC5/RC6 test vectors for arbitrary w/r/b triples. The key is the
byte sequence 00 01 02 ... of length b and the input block is the same
pattern over one block. Each vector shows the key, the input block, the
encrypted block and the block after decrypting again.

Usage:
    python -m rcblock.vectors
    python -m rcblock.vectors --family rc6 -w 32 -r 20 -b 16
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from . import config
from .cipher_core.rc5 import rc5_encrypt, rc5_decrypt
from .cipher_core.rc6 import rc6_encrypt, rc6_decrypt
from .key_schedule.rc_key_schedule import (
    Parameters, InvalidParameters, RC5, RC6, rc5_setup, rc6_setup,
)
from .word_ops.word_arithmetic import active_word_spec, get_word_spec

logger = logging.getLogger(__name__)

DEFAULT_SUITE: Tuple[Tuple[str, int, int, int], ...] = (
    (RC5, 64, 16, 16),
    (RC6, 64, 20, 16),
    (RC5, 64, 252, 255),
    (RC6, 64, 252, 255),
)

# family -> (words per block, setup, encrypt, decrypt)
FAMILY_OPERATIONS = {
    RC5: (2, rc5_setup, rc5_encrypt, rc5_decrypt),
    RC6: (4, rc6_setup, rc6_encrypt, rc6_decrypt),
}

LABEL_WIDTH = 14


def _hex_line(label: str, data: bytes) -> str:
    return f"{label:<{LABEL_WIDTH}}{data.hex().upper()}"


def format_vector(family: str, w: int, r: int, b: int,
                  byteorder: Optional[str] = None) -> List[str]:
    """
    Build the printed lines for one test vector.

    Args:
        family: 'rc5' or 'rc6'
        w: Word width in bits
        r: Number of rounds
        b: Key length in bytes
        byteorder: Host byte order override

    Returns:
        The output lines, without trailing newlines
    """
    words_per_block, setup, encrypt, decrypt = FAMILY_OPERATIONS[family]
    block_size = words_per_block * (w // 8)
    key = bytes(j % 256 for j in range(b))
    block = bytes(j % 256 for j in range(block_size))

    if w in config.SUPPORTED_WORD_SIZES:
        word = get_word_spec(w, byteorder)
    else:
        # The active width rejects the triple below
        word = active_word_spec()

    lines = [f"{family.upper()}-{w}/{r}/{b}",
             _hex_line("Key:", key),
             _hex_line("Block input:", block)]

    try:
        table = setup(Parameters(w, r, b), key, word)
    except InvalidParameters as e:
        logger.warning(f"Rejected parameters: {e}")
        lines.append(f"Unsupported w/r/b: {w}/{r}/{b}")
        lines.append(_hex_line("Block output:", block))
        lines.append(_hex_line("Block input:", block))
        return lines

    output = word.store_words(encrypt(table, r, word.load_words(block)))
    restored = word.store_words(decrypt(table, r, word.load_words(output)))
    lines.append(_hex_line("Block output:", output))
    lines.append(_hex_line("Block input:", restored))
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rcblock-vectors",
        description="Print RC5/RC6 test vectors. Without options prints the default suite.")
    parser.add_argument("--family", choices=(RC5, RC6), default=None,
                        help="Cipher family (default: both)")
    parser.add_argument("-w", "--word-size", type=int, default=None,
                        help="Word size in bits (default: the active word size)")
    parser.add_argument("-r", "--rounds", type=int, default=None,
                        help="Number of rounds (default: 16 for RC5, 20 for RC6)")
    parser.add_argument("-b", "--key-length", type=int, default=None,
                        help="Key length in bytes (default: 16)")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def vectors_from_args(args: argparse.Namespace) -> List[Tuple[str, int, int, int]]:
    """Turn parsed options into the list of (family, w, r, b) to print."""
    custom = (args.family, args.word_size, args.rounds, args.key_length)
    if all(option is None for option in custom):
        return list(DEFAULT_SUITE)

    families = [args.family] if args.family else [RC5, RC6]
    w = args.word_size if args.word_size is not None else config.active_word_size()
    b = args.key_length if args.key_length is not None else 16

    vectors = []
    for family in families:
        r = args.rounds
        if r is None:
            r = config.DEFAULT_PARAMS[f"{family}_rounds"]
        vectors.append((family, w, r, b))
    return vectors


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    vectors = vectors_from_args(args)
    logger.info(f"Printing {len(vectors)} test vector(s)")
    for family, w, r, b in vectors:
        for line in format_vector(family, w, r, b):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
