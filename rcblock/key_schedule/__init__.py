"""
Key Schedule Package

This package implements the key expansion algorithm that transforms
a user key into the round-key table used by the RC5 and RC6 transforms.
"""

from .rc_key_schedule import (
    Parameters, RoundKeyTable, InvalidParameters, RC5, RC6, FAMILIES,
    expand_key, rc5_setup, rc6_setup, pack_key, table_length,
    validate_parameters, generate_key,
)

__all__ = [
    'Parameters', 'RoundKeyTable', 'InvalidParameters', 'RC5', 'RC6', 'FAMILIES',
    'expand_key', 'rc5_setup', 'rc6_setup', 'pack_key', 'table_length',
    'validate_parameters', 'generate_key',
]
