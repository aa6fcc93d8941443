"""
Block Cipher Implementation

This module provides the Enhanced DES cipher context and the ECB driver:
a 16-round Feistel network over 8-byte blocks whose S-boxes are derived
from a 256-bit key, with PKCS#7 padding for arbitrary-length messages.
"""

import hashlib
import logging
from typing import Union

import numpy as np

from ..constants import BLOCK_SIZE, KEY_SIZE
from ..errors import InvalidCiphertextLength, InvalidKeyLength
from ..padding import pad, unpad
from ..sbox_gen.key_dependent import generate_sboxes
from .feistel import decrypt_blocks, encrypt_blocks

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class EDESContext:
    """
    Immutable bundle of the round S-boxes derived from one key.

    Only the S-boxes are kept; the context holds no reference to the key.
    A context can be shared between threads and reused for any number of
    messages.
    """

    __slots__ = ('_sboxes',)

    def __init__(self, key: BytesLike):
        """
        Derive the S-boxes for a key.

        Args:
            key: The 32-byte key, typically a SHA-256 digest

        Raises:
            InvalidKeyLength: If the key is not exactly 32 bytes
        """
        if len(key) != KEY_SIZE:
            raise InvalidKeyLength(len(key))

        scratch = bytearray(key)
        try:
            tables = np.array(generate_sboxes(scratch), dtype=np.uint8)
        finally:
            # Clears this copy only; the immutable key states of the S-box fold
            # are left to the garbage collector
            scratch[:] = bytes(len(scratch))

        tables.flags.writeable = False
        self._sboxes = tables

        logger.debug("Built cipher context with %d S-boxes (fingerprint %s)",
                     len(tables), self.fingerprint())

    @property
    def sboxes(self) -> np.ndarray:
        """Read-only uint8 array of shape (16, 256), one row per round."""
        return self._sboxes

    def fingerprint(self) -> str:
        """
        Short digest of the S-boxes.

        Identifies a context in logs without exposing key material.
        """
        return hashlib.sha256(self._sboxes.tobytes()).hexdigest()[:16]

    def __repr__(self) -> str:
        return f"EDESContext(fingerprint={self.fingerprint()!r})"


def make_context(key: BytesLike) -> EDESContext:
    """
    Create a cipher context for a key.

    Args:
        key: The 32-byte key

    Returns:
        A reusable EDESContext

    Raises:
        InvalidKeyLength: If the key is not exactly 32 bytes
    """
    return EDESContext(key)


def encrypt(message: BytesLike, context: EDESContext) -> bytes:
    """
    Encrypt a message in ECB mode.

    The message is padded first, so the ciphertext is always between 1 and
    8 bytes longer than the message.

    Args:
        message: The plaintext, any length
        context: The cipher context

    Returns:
        The ciphertext
    """
    blocks = np.frombuffer(pad(message), dtype=np.uint8).reshape(-1, BLOCK_SIZE)
    return encrypt_blocks(blocks, context.sboxes).tobytes()


def decrypt(ciphertext: BytesLike, context: EDESContext, strict: bool = False) -> bytes:
    """
    Decrypt a message in ECB mode and strip its padding.

    Args:
        ciphertext: The ciphertext, a positive multiple of 8 bytes
        context: The cipher context
        strict: Whether to verify every padding byte, not just the last

    Returns:
        The plaintext

    Raises:
        InvalidCiphertextLength: If the ciphertext is empty or not block aligned
        InvalidPadding: If the decrypted padding is malformed
    """
    length = len(ciphertext)
    if length == 0 or length % BLOCK_SIZE != 0:
        raise InvalidCiphertextLength(length)

    blocks = np.frombuffer(bytes(ciphertext), dtype=np.uint8).reshape(-1, BLOCK_SIZE)
    return unpad(decrypt_blocks(blocks, context.sboxes).tobytes(), strict=strict)


def encrypt_block(block: BytesLike, context: EDESContext) -> bytes:
    """
    Encrypt a single block without padding.

    Args:
        block: Exactly 8 bytes
        context: The cipher context

    Returns:
        The encrypted block
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be exactly {BLOCK_SIZE} bytes")

    return encrypt_blocks(block, context.sboxes).tobytes()


def decrypt_block(block: BytesLike, context: EDESContext) -> bytes:
    """
    Decrypt a single block without removing padding.

    Args:
        block: Exactly 8 bytes
        context: The cipher context

    Returns:
        The decrypted block
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be exactly {BLOCK_SIZE} bytes")

    return decrypt_blocks(block, context.sboxes).tobytes()


class EDESCipher:
    """
    Enhanced DES bound to one key.

    Thin object wrapper around a context and the module-level functions.
    """

    block_size = BLOCK_SIZE
    key_size = KEY_SIZE

    def __init__(self, key: BytesLike):
        self.context = make_context(key)

    def encrypt(self, message: BytesLike) -> bytes:
        return encrypt(message, self.context)

    def decrypt(self, ciphertext: BytesLike, strict: bool = False) -> bytes:
        return decrypt(ciphertext, self.context, strict=strict)

    def encrypt_block(self, block: BytesLike) -> bytes:
        return encrypt_block(block, self.context)

    def decrypt_block(self, block: BytesLike) -> bytes:
        return decrypt_block(block, self.context)
