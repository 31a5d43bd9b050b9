"""
RC6 Round Transform

Four-word block encryption and decryption driven by an RC6 round-key
table. Each round derives two data-dependent rotation amounts from the
quadratic f(x) = x(2x+1) of the B and D words.
"""

from typing import List, Sequence

from ..key_schedule.rc_key_schedule import RoundKeyTable
from ..word_ops.word_arithmetic import WordSpec


def _quadratic(word: WordSpec, x: int) -> int:
    # f(x) = x(2x+1) mod 2^w, rotated left by lg w
    return word.rotl(word.mul(x, 2 * x + 1), word.lgw)


def rc6_encrypt(table: RoundKeyTable, rounds: int, block: Sequence[int]) -> List[int]:
    """
    Encrypt one four-word block.

    Args:
        table: RC6 round-key table built for the same rounds
        rounds: Number of rounds r
        block: Plaintext words [A, B, C, D]

    Returns:
        Ciphertext words [A, B, C, D]
    """
    word = table.word
    S = table.words

    A, B, C, D = (word.from_wire_order(x) for x in block)
    B = word.add(B, S[0])
    D = word.add(D, S[1])

    for i in range(1, rounds + 1):
        t = _quadratic(word, B)
        u = _quadratic(word, D)
        A = word.add(word.rotl(A ^ t, u % word.bits), S[2 * i])
        C = word.add(word.rotl(C ^ u, t % word.bits), S[2 * i + 1])
        A, B, C, D = B, C, D, A

    A = word.add(A, S[2 * rounds + 2])
    C = word.add(C, S[2 * rounds + 3])
    return [word.to_wire_order(x) for x in (A, B, C, D)]


def rc6_decrypt(table: RoundKeyTable, rounds: int, block: Sequence[int]) -> List[int]:
    """
    Decrypt one four-word block.

    Undoes the post-whitening first, then the rounds in reverse order,
    reading the table from index 2r+3 down to 0.

    Args:
        table: RC6 round-key table built for the same rounds
        rounds: Number of rounds r
        block: Ciphertext words [A, B, C, D]

    Returns:
        Plaintext words [A, B, C, D]
    """
    word = table.word
    S = table.words

    A, B, C, D = (word.from_wire_order(x) for x in block)
    C = word.sub(C, S[2 * rounds + 3])
    A = word.sub(A, S[2 * rounds + 2])

    for i in range(rounds, 0, -1):
        A, B, C, D = D, A, B, C
        u = _quadratic(word, D)
        t = _quadratic(word, B)
        C = word.rotr(word.sub(C, S[2 * i + 1]), t % word.bits) ^ u
        A = word.rotr(word.sub(A, S[2 * i]), u % word.bits) ^ t

    D = word.sub(D, S[1])
    B = word.sub(B, S[0])
    return [word.to_wire_order(x) for x in (A, B, C, D)]
