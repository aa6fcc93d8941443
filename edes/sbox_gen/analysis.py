"""
S-box Analysis

Diagnostics for the generated S-boxes: bijectivity, differential
uniformity, linear bias and fixed points. These do not influence
encryption; they exist to inspect what a given key produces.
"""

from typing import Dict, List, Sequence

import numpy as np

from ..constants import SBOX_SIZE


def _as_table(sbox: Sequence[int]) -> np.ndarray:
    table = np.asarray(sbox, dtype=np.int64)
    if table.shape != (SBOX_SIZE,):
        raise ValueError(f"S-box must have exactly {SBOX_SIZE} entries")
    if table.min() < 0 or table.max() >= SBOX_SIZE:
        raise ValueError("S-box entries must be byte values")
    return table


def _parity_table() -> np.ndarray:
    """parity[a, x] = popcount(a & x) mod 2"""
    values = np.arange(SBOX_SIZE, dtype=np.uint8)
    masked = values[:, None] & values[None, :]
    return np.unpackbits(masked[..., None], axis=-1).sum(axis=-1) & 1


def is_bijective(sbox: Sequence[int]) -> bool:
    """
    Check that an S-box is a permutation of 0..255.

    Args:
        sbox: The S-box to check

    Returns:
        True if every byte value appears exactly once
    """
    table = _as_table(sbox)
    return bool(np.all(np.bincount(table, minlength=SBOX_SIZE) == 1))


def calculate_differential_uniformity(sbox: Sequence[int]) -> int:
    """
    Calculate the differential uniformity of an S-box.

    Lower values indicate better resistance to differential cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The largest entry of the difference distribution table, excluding dx=0
    """
    table = _as_table(sbox)
    x = np.arange(SBOX_SIZE)
    dx = np.arange(1, SBOX_SIZE)

    dy = table[x[None, :]] ^ table[x[None, :] ^ dx[:, None]]

    ddt = np.zeros((SBOX_SIZE, SBOX_SIZE), dtype=np.int32)
    np.add.at(ddt, (np.broadcast_to(dx[:, None], dy.shape), dy), 1)

    return int(ddt[1:, :].max())


def calculate_linear_bias(sbox: Sequence[int]) -> float:
    """
    Calculate the linear bias of an S-box.

    Lower values indicate better resistance to linear cryptanalysis.
    The linear approximation table is obtained as a Walsh matrix product
    instead of enumerating every mask pair.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The maximum absolute LAT entry over non-zero masks, normalized to [0, 1]
    """
    table = _as_table(sbox)
    parity = _parity_table().astype(np.int64)

    input_signs = 1 - 2 * parity
    output_signs = 1 - 2 * parity[:, table]

    walsh = input_signs @ output_signs.T
    lat = walsh // 2

    return float(np.abs(lat[1:, 1:]).max()) / 128.0


def calculate_fixed_points(sbox: Sequence[int]) -> int:
    """Count the inputs that the S-box maps to themselves."""
    table = _as_table(sbox)
    return int(np.count_nonzero(table == np.arange(SBOX_SIZE)))


def evaluate_sbox(sbox: Sequence[int]) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary of scores (lower is better for differential and linear)
    """
    return {
        'bijective': is_bijective(sbox),
        'differential': calculate_differential_uniformity(sbox),
        'linear': calculate_linear_bias(sbox),
        'fixed_points': calculate_fixed_points(sbox),
    }


def evaluate_sboxes(sboxes: Sequence[Sequence[int]]) -> List[Dict[str, float]]:
    """Evaluate every S-box of a key, in round order."""
    return [evaluate_sbox(sbox) for sbox in sboxes]


if __name__ == "__main__":
    from .key_dependent import generate_sboxes

    for index, metrics in enumerate(evaluate_sboxes(generate_sboxes(bytes(32)))):
        print(f"S-box {index:2d}: "
              f"bijective={metrics['bijective']} "
              f"differential={metrics['differential']} "
              f"linear={metrics['linear']:.3f} "
              f"fixed_points={metrics['fixed_points']}")
