"""CRC-CCITT checksums, computed bit by bit or through a lookup table."""

from __future__ import annotations

from functools import lru_cache

CRC_NAME = "CRC-CCITT"
POLYNOMIAL = 0x1021
INITIAL_REMAINDER = 0xFFFF
FINAL_XOR_VALUE = 0x0000
CHECK_VALUE = 0x29B1

_WIDTH = 16
_TOP_BIT = 1 << (_WIDTH - 1)
_MASK = (1 << _WIDTH) - 1


def _as_bytes(message: bytes | bytearray | memoryview) -> bytes:
    if isinstance(message, str):
        raise TypeError("message must be bytes-like, not str")
    return bytes(message)


def _divide(remainder: int) -> int:
    for _ in range(8):
        if remainder & _TOP_BIT:
            remainder = (remainder << 1) ^ POLYNOMIAL
        else:
            remainder <<= 1
    return remainder & _MASK


@lru_cache(maxsize=None)
def crc_table() -> tuple[int, ...]:
    """Return the remainder of every possible byte value shifted to the top."""
    return tuple(_divide(byte << (_WIDTH - 8)) for byte in range(256))


def crc_slow(message: bytes | bytearray | memoryview) -> int:
    """Compute the checksum of *message* one bit at a time."""
    remainder = INITIAL_REMAINDER
    for byte in _as_bytes(message):
        remainder = _divide(remainder ^ (byte << (_WIDTH - 8)))
    return remainder ^ FINAL_XOR_VALUE


def crc_fast(message: bytes | bytearray | memoryview) -> int:
    """Compute the checksum of *message* using the lookup table."""
    table = crc_table()
    remainder = INITIAL_REMAINDER
    for byte in _as_bytes(message):
        index = byte ^ (remainder >> (_WIDTH - 8))
        remainder = (table[index] ^ (remainder << 8)) & _MASK
    return remainder ^ FINAL_XOR_VALUE