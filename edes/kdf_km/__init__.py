"""
Key Derivation Package

This package turns passphrases into the 32-byte keys the cipher expects,
using SHA-256 or Argon2id for password-based key derivation.
"""

from .key_derivation import (
    derive_key, derive_key_sha256, generate_key, generate_salt, KDF_DEFAULT_PARAMS,
)

__all__ = ['derive_key', 'derive_key_sha256', 'generate_key', 'generate_salt',
           'KDF_DEFAULT_PARAMS']
