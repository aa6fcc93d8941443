"""
Command-Line Tools Package

Front ends for encrypting and decrypting files or stdin, and a speed
benchmark.
"""

from .tools import encrypt_main, decrypt_main
from .speed import main as speed_main, run_benchmark

__all__ = ['encrypt_main', 'decrypt_main', 'speed_main', 'run_benchmark']
