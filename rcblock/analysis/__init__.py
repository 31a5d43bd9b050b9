"""
Analysis Package

This package measures diffusion properties of the ciphers and the key
schedule.
"""

from .diffusion import bit_difference, avalanche_matrix, avalanche_score, key_avalanche

__all__ = ['bit_difference', 'avalanche_matrix', 'avalanche_score', 'key_avalanche']
