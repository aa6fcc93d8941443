"""
S-box Generation Package

This package derives the key-dependent round S-boxes and provides
diagnostics to evaluate their cryptographic properties.
"""

from .key_dependent import generate_sboxes, create_sbox, next_sbox, mix_working_key
from .analysis import evaluate_sbox, evaluate_sboxes, is_bijective

__all__ = [
    'generate_sboxes', 'create_sbox', 'next_sbox', 'mix_working_key',
    'evaluate_sbox', 'evaluate_sboxes', 'is_bijective',
]
