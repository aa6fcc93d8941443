"""
Encryption and Decryption Front Ends

Command-line tools that read a file or stdin, run Enhanced DES with a key
derived from a passphrase, and write the result to a file or stdout.
"""

import argparse
import logging
import os
import sys
from typing import BinaryIO, Callable, List, Optional

from argon2.exceptions import HashingError

from ..cipher_core import EDESContext, decrypt, encrypt, make_context
from ..errors import EDESError
from ..kdf_km import derive_key, derive_key_sha256

logger = logging.getLogger(__name__)

# Environment variable holding the passphrase when --key is not given
KEY_ENV_VAR = 'EDES_KEY'

# Longest result echoed to stdout when no output file is given
OUTPUT_PREVIEW_LIMIT = 256

ACTIONS = {
    'encrypt': ('Encrypting', 'enc.out'),
    'decrypt': ('Decrypting', 'dec.out'),
}


def build_parser(action: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"edes-{action}",
        description=f"Enhanced DES {action}ion (ECB, PKCS#7 padding)",
        epilog=(
            "Input is read from --input-file or from stdin redirection.\n"
            f"The passphrase may also be given in the {KEY_ENV_VAR} environment variable."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input-file", default=None, help="File to read")
    parser.add_argument("-o", "--output-file", default=None, help="File to write")
    parser.add_argument("-k", "--key", default=None, help="Passphrase the key is derived from")
    parser.add_argument(
        "--kdf", choices=("sha256", "argon2id"), default="sha256",
        help="Key derivation function (default: sha256)",
    )
    parser.add_argument("--salt", default=None, help="Hex salt, required for argon2id")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_context(parser: argparse.ArgumentParser, args: argparse.Namespace) -> EDESContext:
    """Derive the key from the command line (or environment) and build a context."""
    passphrase = args.key if args.key is not None else os.environ.get(KEY_ENV_VAR)
    if passphrase is None:
        parser.error(f"a passphrase is required: use --key or set {KEY_ENV_VAR}")

    if args.kdf == "argon2id":
        if args.salt is None:
            parser.error("--salt is required with --kdf argon2id")
        try:
            salt = bytes.fromhex(args.salt)
        except ValueError:
            parser.error("--salt must be a hex string")
        try:
            key = derive_key(passphrase, salt)
        except HashingError as e:
            parser.error(f"Argon2id key derivation failed: {e}")
    else:
        key = derive_key_sha256(passphrase)

    return make_context(key)


def read_input(input_file: Optional[str], verb: str, stdin: BinaryIO) -> Optional[bytes]:
    """
    Read the data to process.

    Args:
        input_file: Path given on the command line, if any
        verb: 'Encrypting' or 'Decrypting', for status messages
        stdin: Binary stream used when no file is given

    Returns:
        The data, or None when there is neither a file nor redirected input
    """
    if input_file is not None:
        logger.info("%s file: %s", verb, input_file)
        with open(input_file, 'rb') as f:
            return f.read()

    if stdin.isatty():
        return None

    data = stdin.read()
    logger.info("%s input from stdin, number of bytes read: %d", verb, len(data))
    return data


def write_output(result: bytes, output_file: Optional[str], fallback_file: str,
                 stdout: BinaryIO) -> None:
    """
    Write the result to a file, or to stdout when no file is given.

    Results longer than OUTPUT_PREVIEW_LIMIT are truncated on stdout and
    written in full to ``fallback_file``.
    """
    if output_file is not None:
        with open(output_file, 'wb') as f:
            f.write(result)
        return

    if len(result) > OUTPUT_PREVIEW_LIMIT:
        logger.info("Output greater than %dB at %d, printing the top %dB. "
                    "The entire result is stored in %s",
                    OUTPUT_PREVIEW_LIMIT, len(result), OUTPUT_PREVIEW_LIMIT, fallback_file)
        stdout.write(result[:OUTPUT_PREVIEW_LIMIT])
        with open(fallback_file, 'wb') as f:
            f.write(result)
    else:
        stdout.write(result)
    stdout.flush()


def run(action: str,
        argv: Optional[List[str]] = None,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None) -> int:
    """
    Run the encrypt or decrypt front end.

    Args:
        action: 'encrypt' or 'decrypt'
        argv: Command-line arguments (defaults to sys.argv[1:])
        stdin: Binary input stream (defaults to sys.stdin.buffer)
        stdout: Binary output stream (defaults to sys.stdout.buffer)

    Returns:
        Process exit status
    """
    verb, fallback_file = ACTIONS[action]
    transform: Callable[[bytes, EDESContext], bytes] = encrypt if action == 'encrypt' else decrypt

    parser = build_parser(action)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer

    context = resolve_context(parser, args)

    try:
        data = read_input(args.input_file, verb, stdin)
        if data is None:
            print("Please provide a file to read with --input-file, "
                  "or use stdin redirection (< file)", file=sys.stderr)
            return 2

        result = transform(data, context)
        write_output(result, args.output_file, fallback_file, stdout)
    except EDESError as e:
        logger.error("%s failed: %s", action.capitalize(), e)
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1

    return 0


def encrypt_main(argv: Optional[List[str]] = None) -> int:
    return run('encrypt', argv)


def decrypt_main(argv: Optional[List[str]] = None) -> int:
    return run('decrypt', argv)
