"""
Cipher Errors

Validation failures raised by the cipher. They all derive from ValueError,
so callers handling bad input generically keep working.
"""

from .constants import BLOCK_SIZE, KEY_SIZE


class EDESError(ValueError):
    """Base class for all Enhanced DES errors."""


class InvalidKeyLength(EDESError):
    """Raised when a key is not exactly KEY_SIZE bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Key must be exactly {KEY_SIZE} bytes, got {length}")


class InvalidCiphertextLength(EDESError):
    """Raised when a ciphertext is empty or not a whole number of blocks."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Ciphertext length must be a positive multiple of {BLOCK_SIZE}, got {length}"
        )


class InvalidPadding(EDESError):
    """
    Raised when the padding of a decrypted buffer cannot be removed.

    This usually means the ciphertext was corrupted or the wrong key was used.
    """

    def __init__(self, value: int, length: int, reason: str = ""):
        self.value = value
        self.length = length
        message = f"Invalid padding value {value} for buffer of {length} bytes"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
