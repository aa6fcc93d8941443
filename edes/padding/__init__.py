"""
Padding Package

PKCS#7 padding to a whole number of cipher blocks.
"""

from .pkcs7 import pad, unpad, padding_length

__all__ = ['pad', 'unpad', 'padding_length']
