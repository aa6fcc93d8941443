"""
Key Derivation Functions

The cipher only accepts a 32-byte key. This module turns passphrases into
such keys, either with a single SHA-256 digest or with Argon2id for
password-based derivation.
"""

import hashlib
import logging
import secrets
from typing import Union

import argon2
from argon2.low_level import Type

from ..constants import KEY_SIZE

logger = logging.getLogger(__name__)

# Default parameters for Argon2id
KDF_DEFAULT_PARAMS = {
    'time_cost': 4,       # Number of iterations
    'memory_cost': 65536, # 64 MB
    'parallelism': 4,     # Number of threads
    'hash_len': KEY_SIZE, # Output size in bytes
    'salt_len': 16        # Salt size in bytes
}


def _to_bytes(passphrase: Union[str, bytes]) -> bytes:
    if isinstance(passphrase, str):
        return passphrase.encode('utf-8')
    return bytes(passphrase)


def generate_salt(length: int = KDF_DEFAULT_PARAMS['salt_len']) -> bytes:
    """
    Generate a cryptographically secure random salt.

    Args:
        length: Length of the salt in bytes

    Returns:
        Random salt as bytes
    """
    return secrets.token_bytes(length)


def generate_key(key_size: int = KEY_SIZE) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 32)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)


def derive_key_sha256(passphrase: Union[str, bytes]) -> bytes:
    """
    Derive a key as the SHA-256 digest of a passphrase.

    Args:
        passphrase: The passphrase, str values are UTF-8 encoded

    Returns:
        32-byte key
    """
    return hashlib.sha256(_to_bytes(passphrase)).digest()


def derive_key(passphrase: Union[str, bytes],
               salt: bytes,
               time_cost: int = KDF_DEFAULT_PARAMS['time_cost'],
               memory_cost: int = KDF_DEFAULT_PARAMS['memory_cost'],
               parallelism: int = KDF_DEFAULT_PARAMS['parallelism']) -> bytes:
    """
    Derive a key from a passphrase using Argon2id.

    Args:
        passphrase: Passphrase to derive the key from
        salt: Salt value (at least 8 bytes)
        time_cost: Number of iterations
        memory_cost: Memory usage in KiB
        parallelism: Degree of parallelism

    Returns:
        32-byte key
    """
    logger.debug("Deriving key with Argon2id (t=%d, m=%d KiB, p=%d)",
                 time_cost, memory_cost, parallelism)

    return argon2.low_level.hash_secret_raw(
        secret=_to_bytes(passphrase),
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=KEY_SIZE,
        type=Type.ID  # Argon2id variant
    )
