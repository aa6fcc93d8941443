"""
Encryption Speed Benchmark

Measures the wall time of encrypting and decrypting a fixed random buffer
with a fresh key on every iteration. Context construction is not timed.
"""

import argparse
import logging
import sys
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from ..cipher_core import decrypt, encrypt, make_context
from ..kdf_km import derive_key_sha256

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timings of a benchmark run, in milliseconds."""
    iterations: int
    buffer_size: int
    best_count: int
    best_mean_ms: float
    min_ms: float
    max_ms: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        return (
            f"Finished: Each iteration took on average {self.best_mean_ms:.4f} ms "
            f"(fastest {self.best_count}), Min: {self.min_ms:.4f} ms, Max: {self.max_ms:.4f} ms"
        )


def run_benchmark(iterations: int = 1000,
                  buffer_size: int = 4096,
                  best_fraction: float = 0.1,
                  seed: Optional[int] = None) -> BenchmarkResult:
    """
    Time encryption plus decryption over many random keys.

    Args:
        iterations: Number of keys to try
        buffer_size: Size of the random buffer in bytes
        best_fraction: Share of the fastest iterations averaged in the result
        seed: Seed for the random buffer and keys

    Returns:
        BenchmarkResult with the mean of the fastest iterations, min and max

    Raises:
        ValueError: If the parameters are out of range
        RuntimeError: If a round trip does not return the original buffer
    """
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    if not 0.0 < best_fraction <= 1.0:
        raise ValueError("best_fraction must be in (0, 1]")

    rng = np.random.default_rng(seed)
    data = rng.bytes(buffer_size)
    logger.info("Benchmarking %d iterations over a %dB buffer", iterations, buffer_size)

    timings: List[float] = []
    for _ in range(iterations):
        context = make_context(derive_key_sha256(rng.bytes(32)))

        start = time.perf_counter()
        ciphertext = encrypt(data, context)
        plaintext = decrypt(ciphertext, context)
        timings.append(time.perf_counter() - start)

        if plaintext != data:
            raise RuntimeError(f"Round trip failed for context {context.fingerprint()}")

        logger.debug("Context %s: %.4f ms", context.fingerprint(), timings[-1] * 1000.0)

    ordered = np.sort(np.array(timings)) * 1000.0
    best_count = max(1, int(iterations * best_fraction))

    return BenchmarkResult(
        iterations=iterations,
        buffer_size=buffer_size,
        best_count=best_count,
        best_mean_ms=float(ordered[:best_count].mean()),
        min_ms=float(ordered[0]),
        max_ms=float(ordered[-1]),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="edes-speed",
        description="Enhanced DES encryption/decryption microbenchmark",
    )
    parser.add_argument("--iterations", type=int, default=1000, help="Number of iterations")
    parser.add_argument("--size", type=int, default=4096, help="Buffer size in bytes")
    parser.add_argument("--best-fraction", type=float, default=0.1,
                        help="Share of fastest iterations to average (default: 0.1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s", stream=sys.stderr)

    print(f"Running {args.iterations} iterations of encryption and decryption")
    print(f"Generating random buffer of {args.size}B")
    print("Each iteration will generate a new key of 32B")
    print("Benchmark approach:")
    print("\t1) Initialize new context with iteration key")
    print("\t2) Start timer")
    print(f"\t3) Encrypt and Decrypt pre-generated {args.size}B buffer")
    print("\t4) Stop timer")
    print("\t* This measures Wall-Time, not CPU time, external factors will impact the measurements")
    print(f"\t* After the {args.iterations} iterations, an average of the best "
          f"{args.best_fraction:.0%} is taken")

    try:
        result = run_benchmark(args.iterations, args.size, args.best_fraction, args.seed)
    except ValueError as e:
        parser.error(str(e))

    print()
    print(result.summary())
    return 0
