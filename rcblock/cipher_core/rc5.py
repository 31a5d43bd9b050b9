"""
RC5 Round Transform

Two-word block encryption and decryption driven by an RC5 round-key table.
Blocks are lists of natively loaded words; they are normalized from and
back to the little-endian wire order around the rounds.
"""

from typing import List, Sequence

from ..key_schedule.rc_key_schedule import RoundKeyTable


def rc5_encrypt(table: RoundKeyTable, rounds: int, block: Sequence[int]) -> List[int]:
    """
    Encrypt one two-word block.

    Args:
        table: RC5 round-key table built for the same rounds
        rounds: Number of rounds r
        block: Plaintext words [A, B]

    Returns:
        Ciphertext words [A, B]
    """
    word = table.word
    S = table.words

    A = word.add(word.from_wire_order(block[0]), S[0])
    B = word.add(word.from_wire_order(block[1]), S[1])
    for i in range(1, rounds + 1):
        A = word.add(word.rotl(A ^ B, B % word.bits), S[2 * i])
        B = word.add(word.rotl(B ^ A, A % word.bits), S[2 * i + 1])

    return [word.to_wire_order(A), word.to_wire_order(B)]


def rc5_decrypt(table: RoundKeyTable, rounds: int, block: Sequence[int]) -> List[int]:
    """
    Decrypt one two-word block.

    The table is read from index 2r+1 down to 0.

    Args:
        table: RC5 round-key table built for the same rounds
        rounds: Number of rounds r
        block: Ciphertext words [A, B]

    Returns:
        Plaintext words [A, B]
    """
    word = table.word
    S = table.words

    A = word.from_wire_order(block[0])
    B = word.from_wire_order(block[1])
    for i in range(rounds, 0, -1):
        B = word.rotr(word.sub(B, S[2 * i + 1]), A % word.bits) ^ A
        A = word.rotr(word.sub(A, S[2 * i]), B % word.bits) ^ B

    B = word.sub(B, S[1])
    A = word.sub(A, S[0])
    return [word.to_wire_order(A), word.to_wire_order(B)]
