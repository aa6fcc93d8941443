"""
Enhanced DES - Key-Dependent Feistel Block Cipher

This library implements a 16-round Feistel network over 8-byte blocks
whose S-boxes are derived from a 256-bit key, with PKCS#7 padding and
ECB processing for arbitrary-length messages.

Key Features:
- 16 key-dependent 8-bit S-boxes, one per round
- Block operations vectorized across the whole message
- SHA-256 and Argon2id key derivation from passphrases
- Command-line encryption, decryption and benchmark tools

Not a general-purpose cryptographic library: no authentication, no modes
besides ECB, no security claims.
"""

from .cipher_core import EDESCipher, EDESContext, make_context, encrypt, decrypt
from .errors import EDESError, InvalidKeyLength, InvalidCiphertextLength, InvalidPadding

__version__ = '0.1.0'
__author__ = 'Enhanced DES Team'

__all__ = [
    'EDESCipher', 'EDESContext', 'make_context', 'encrypt', 'decrypt',
    'EDESError', 'InvalidKeyLength', 'InvalidCiphertextLength', 'InvalidPadding',
]
