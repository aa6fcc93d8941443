"""
Algorithm Constants

Fixed parameters of the Enhanced DES construction. Changing any of these
changes every derived S-box and every ciphertext.
"""

# Block geometry
BLOCK_SIZE = 8        # bytes per block
HALF_BLOCK_SIZE = 4   # bytes per Feistel half

# S-box layout
SBOX_SIZE = 256       # entries per S-box (8-bit permutation)
NUM_SBOXES = 16       # one S-box per round

# Rounds
NUM_ROUNDS = 16

# Key
KEY_SIZE = 32         # 256-bit key, typically a SHA-256 digest

# Bound applied to the key index during the S-box shuffle
KEY_INDEX_MODULUS = 32
