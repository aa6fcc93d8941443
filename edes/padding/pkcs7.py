"""
PKCS#7 Padding

Padding always adds between 1 and BLOCK_SIZE bytes, each equal to the
number of bytes added, so a block-aligned message gains a full block.
"""

from Cryptodome.Util import Padding

from ..constants import BLOCK_SIZE
from ..errors import InvalidPadding


def padding_length(length: int) -> int:
    """
    Number of padding bytes added to a payload of the given length.

    Args:
        length: Payload length in bytes

    Returns:
        A value between 1 and BLOCK_SIZE
    """
    return BLOCK_SIZE - (length % BLOCK_SIZE)


def pad(payload: bytes) -> bytes:
    """
    Pad a payload to a multiple of BLOCK_SIZE.

    Args:
        payload: The data to pad

    Returns:
        The padded data
    """
    return Padding.pad(bytes(payload), BLOCK_SIZE, style='pkcs7')


def unpad(payload: bytes, strict: bool = False) -> bytes:
    """
    Remove PKCS#7 padding.

    By default only the last byte is inspected: it gives the number of
    bytes to strip. With ``strict`` the whole padding tail is verified.

    Args:
        payload: The padded data
        strict: Whether to verify every padding byte

    Returns:
        The payload without its padding

    Raises:
        InvalidPadding: If the padding value is 0, longer than the payload,
            or (strict only) not a well-formed PKCS#7 tail
    """
    length = len(payload)
    if length == 0:
        raise InvalidPadding(0, 0, "empty buffer")

    padding_value = payload[-1]
    if padding_value == 0 or padding_value > length:
        raise InvalidPadding(padding_value, length)

    if strict:
        try:
            return Padding.unpad(bytes(payload), BLOCK_SIZE, style='pkcs7')
        except ValueError as e:
            raise InvalidPadding(padding_value, length, str(e)) from e

    return bytes(payload[:length - padding_value])
