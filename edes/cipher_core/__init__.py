"""
Cipher Core Package

This package implements the core components of the block cipher: the
Feistel round engine, the key-bound cipher context and the ECB
encryption/decryption driver.
"""

from .block_cipher import (
    EDESCipher, EDESContext, make_context,
    encrypt, decrypt, encrypt_block, decrypt_block,
)
from .feistel import encrypt_round, decrypt_round, round_function

__all__ = [
    'EDESCipher', 'EDESContext', 'make_context',
    'encrypt', 'decrypt', 'encrypt_block', 'decrypt_block',
    'encrypt_round', 'decrypt_round', 'round_function',
]
