"""
Word Operations Package

This package implements the width-parameterized unsigned word arithmetic
shared by the key schedule and the RC5/RC6 round transforms.
"""

from .word_arithmetic import (
    WordSpec, WORD_SPECS, MAGIC_CONSTANTS,
    get_word_spec, active_word_spec, rotate_left, rotate_right,
)

__all__ = [
    'WordSpec', 'WORD_SPECS', 'MAGIC_CONSTANTS',
    'get_word_spec', 'active_word_spec', 'rotate_left', 'rotate_right',
]
