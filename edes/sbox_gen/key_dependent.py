"""
Key-Dependent S-box Generation

This module derives the 16 round S-boxes from a 256-bit key using a
key-scheduling shuffle in the style of RC4's KSA, after Kazlauskas,
Vaicekauskas and Smaliukas, "An Algorithm for Key-Dependent S-Box
Generation in Block Cipher System" (Informatica, 2015).

Generation is sequential: before every box after the first, the working
key is shifted one byte to the left and mixed with the box index, so box
``i`` depends on the key state left behind by boxes ``0..i-1``.
"""

from typing import List, Tuple

from ..constants import KEY_INDEX_MODULUS, KEY_SIZE, NUM_SBOXES, SBOX_SIZE
from ..errors import InvalidKeyLength


def mix_working_key(working_key: bytes, sbox_index: int) -> bytes:
    """
    Advance the working key to the state used for ``sbox_index``.

    Every position but the last takes its right neighbour XOR the box
    index. The last byte is carried over unchanged. Box 0 uses the key
    as given.

    Args:
        working_key: Key state left by the previous box
        sbox_index: Index of the box about to be generated

    Returns:
        The new key state
    """
    if sbox_index == 0:
        return bytes(working_key)

    shifted = [working_key[p + 1] ^ sbox_index for p in range(KEY_SIZE - 1)]
    shifted.append(working_key[KEY_SIZE - 1])
    return bytes(shifted)


def _shuffle(working_key: bytes) -> List[int]:
    sbox = list(range(SBOX_SIZE))

    j = sum(working_key) % SBOX_SIZE
    for i in range(SBOX_SIZE):
        # Only the first 32 key bytes are ever sampled
        k = (sbox[i] + sbox[j]) % KEY_INDEX_MODULUS
        j = (j + working_key[k]) % SBOX_SIZE
        sbox[i], sbox[j] = sbox[j], sbox[i]

    return sbox


def next_sbox(working_key: bytes, sbox_index: int) -> Tuple[bytes, List[int]]:
    """
    One step of the S-box fold.

    Args:
        working_key: Key state left by the previous box (the master key for box 0)
        sbox_index: Index of the box to generate (0-15)

    Returns:
        A tuple of (next working key state, generated S-box)
    """
    key_state = mix_working_key(working_key, sbox_index)
    return key_state, _shuffle(key_state)


def create_sbox(working_key: bytes, sbox_index: int) -> List[int]:
    """
    Generate a single S-box from a working key state.

    Args:
        working_key: Key state left by the previous box
        sbox_index: Index of the box to generate

    Returns:
        A permutation of 0..255
    """
    _, sbox = next_sbox(working_key, sbox_index)
    return sbox


def generate_sboxes(key: bytes) -> List[List[int]]:
    """
    Derive all round S-boxes from a master key.

    Args:
        key: The 32-byte master key

    Returns:
        A list of NUM_SBOXES permutations of 0..255, indexed by round

    Raises:
        InvalidKeyLength: If the key is not exactly 32 bytes
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key))

    sboxes = []
    key_state = bytes(key)
    for sbox_index in range(NUM_SBOXES):
        key_state, sbox = next_sbox(key_state, sbox_index)
        sboxes.append(sbox)

    return sboxes
