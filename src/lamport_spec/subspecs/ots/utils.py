"""Utility functions for the Lamport signature scheme."""

from __future__ import annotations

from enum import Enum, auto


class BitOrder(Enum):
    """How the bits of a message digest map to key positions."""

    MSB_FIRST = auto()
    """Position `i` reads bit `7 - i % 8` of byte `i // 8`."""

    LSB_FIRST = auto()
    """Position `i` reads bit `i % 8` of byte `i // 8`."""


def digest_bits(digest: bytes, bit_order: BitOrder = BitOrder.MSB_FIRST) -> list[int]:
    """
    Expands a digest into one bit per key position.

    Signer and verifier must use the same `bit_order`, otherwise every valid
    signature is rejected.

    ### Example

    With `MSB_FIRST`, the one-byte digest `0b10110010` expands to
    `[1, 0, 1, 1, 0, 0, 1, 0]`. With `LSB_FIRST` it expands to
    `[0, 1, 0, 0, 1, 1, 0, 1]`.

    Args:
        digest: The `H`-byte digest of a message.
        bit_order: The bit ordering convention.

    Returns:
        A list of `8 * len(digest)` integers, each 0 or 1.
    """
    if bit_order is BitOrder.MSB_FIRST:
        shifts = range(7, -1, -1)
    else:
        shifts = range(8)
    return [(byte >> shift) & 1 for byte in digest for shift in shifts]


def wipe(buffer: bytearray) -> None:
    """Overwrite every byte of `buffer` with zero."""
    buffer[:] = bytes(len(buffer))
