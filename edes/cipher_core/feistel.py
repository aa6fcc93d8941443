"""
Feistel Round Engine

This module implements the Enhanced DES round transform. Blocks are handled
as rows of an ``(n, 8)`` uint8 array, so one call processes every block of a
message at once. Rows never interact, which keeps ECB output in input order.
"""

from typing import Sequence

import numpy as np

from ..constants import BLOCK_SIZE, HALF_BLOCK_SIZE, NUM_ROUNDS, SBOX_SIZE


def as_blocks(data) -> np.ndarray:
    """
    View a buffer as an array of blocks.

    Args:
        data: Bytes-like object or uint8 array whose length is a multiple of BLOCK_SIZE

    Returns:
        A uint8 array of shape (n, BLOCK_SIZE)
    """
    if isinstance(data, np.ndarray):
        blocks = data.astype(np.uint8, copy=False)
    else:
        blocks = np.frombuffer(bytes(data), dtype=np.uint8)

    if blocks.size % BLOCK_SIZE != 0:
        raise ValueError(f"Buffer length must be a multiple of {BLOCK_SIZE} bytes")

    return blocks.reshape(-1, BLOCK_SIZE)


def round_function(half: np.ndarray, sbox: np.ndarray) -> np.ndarray:
    """
    Chained S-box lookup over a batch of half-blocks.

    The lookup index starts at the first input byte and accumulates each
    following byte modulo 256. Input bytes are consumed front to back while
    output bytes are written back to front.

    Args:
        half: uint8 array of shape (n, HALF_BLOCK_SIZE)
        sbox: The round S-box, 256 entries

    Returns:
        uint8 array of shape (n, HALF_BLOCK_SIZE)
    """
    output = np.empty_like(half)

    index = half[:, 0].astype(np.intp)
    output[:, HALF_BLOCK_SIZE - 1] = sbox[index]
    for b in range(1, HALF_BLOCK_SIZE):
        index = (index + half[:, b]) % SBOX_SIZE
        output[:, HALF_BLOCK_SIZE - 1 - b] = sbox[index]

    return output


def encrypt_round(blocks: np.ndarray, sbox: np.ndarray) -> np.ndarray:
    """
    Apply one forward round: (L, R) -> (R, L ^ F(R)).

    Args:
        blocks: uint8 array of shape (n, BLOCK_SIZE)
        sbox: The S-box for this round

    Returns:
        A new array holding the transformed blocks
    """
    left = blocks[:, :HALF_BLOCK_SIZE]
    right = blocks[:, HALF_BLOCK_SIZE:]
    return np.concatenate((right, left ^ round_function(right, sbox)), axis=1)


def decrypt_round(blocks: np.ndarray, sbox: np.ndarray) -> np.ndarray:
    """
    Apply one reverse round: (L, R) -> (R ^ F(L), L).

    Args:
        blocks: uint8 array of shape (n, BLOCK_SIZE)
        sbox: The S-box for this round

    Returns:
        A new array holding the transformed blocks
    """
    left = blocks[:, :HALF_BLOCK_SIZE]
    right = blocks[:, HALF_BLOCK_SIZE:]
    return np.concatenate((right ^ round_function(left, sbox), left), axis=1)


def encrypt_blocks(blocks, sboxes: Sequence[np.ndarray]) -> np.ndarray:
    """
    Run all rounds forward, S-box ``i`` in round ``i``.

    Args:
        blocks: Blocks to encrypt, anything accepted by as_blocks
        sboxes: The round S-boxes

    Returns:
        uint8 array of shape (n, BLOCK_SIZE)
    """
    state = as_blocks(blocks)
    tables = np.asarray(sboxes, dtype=np.uint8)
    for i in range(NUM_ROUNDS):
        state = encrypt_round(state, tables[i])
    return state


def decrypt_blocks(blocks, sboxes: Sequence[np.ndarray]) -> np.ndarray:
    """
    Run all rounds in reverse, from the last S-box down to the first.

    Args:
        blocks: Blocks to decrypt, anything accepted by as_blocks
        sboxes: The round S-boxes

    Returns:
        uint8 array of shape (n, BLOCK_SIZE)
    """
    state = as_blocks(blocks)
    tables = np.asarray(sboxes, dtype=np.uint8)
    for i in reversed(range(NUM_ROUNDS)):
        state = decrypt_round(state, tables[i])
    return state
