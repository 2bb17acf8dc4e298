"""
Flat byte encoding for Lamport keys and signatures.

Every container is a sequence of fixed-length entries, so the wire format is
simply the entries concatenated back to back:

    Format: [Entry 0] || [Entry 1] || ... || [Entry N-1]

There is no length prefix and no framing. The entry length `H` is known from
the digest, the entry count follows from `H` (`B = 8 * H` for a signature,
`2 * B` for a key), and the position of an entry is its index.

For keys, the `B` zero-branch entries come first, then the `B` one-branch
entries, so `(i, b)` lives at index `b * B + i`.
"""

from __future__ import annotations

from typing import Sequence

from lamport_spec.types import LamportDecodeError


def encode_entries(entries: Sequence[bytes]) -> bytes:
    """
    Concatenate fixed-length entries.

    Args:
        entries: The entries, in positional order.

    Returns:
        The raw encoding.
    """
    return b"".join(bytes(entry) for entry in entries)


def decode_entries(data: bytes, entry_length: int, count: int, type_name: str) -> list[bytes]:
    """
    Split raw bytes into `count` entries of `entry_length` bytes each.

    Args:
        data: The raw encoding.
        entry_length: The length `H` of every entry.
        count: The number of entries expected.
        type_name: Name of the type being decoded, for error messages.

    Returns:
        The entries, in positional order.

    Raises:
        LamportDecodeError: If `entry_length` is not positive or the data
            does not hold exactly `count` entries.
    """
    if entry_length < 1:
        raise LamportDecodeError(type_name, f"entry length must be positive, got {entry_length}")

    expected = entry_length * count
    if len(data) != expected:
        raise LamportDecodeError(
            type_name,
            f"expected {count} entries of {entry_length} bytes ({expected} bytes), "
            f"got {len(data)} bytes",
        )

    return [data[i : i + entry_length] for i in range(0, expected, entry_length)]


def split_branches(entries: Sequence[bytes]) -> tuple[list[bytes], list[bytes]]:
    """
    Split a flat key encoding into its zero-branch and one-branch halves.

    Args:
        entries: `2 * B` entries as laid out by `encode_entries`.

    Returns:
        A tuple `(zero_values, one_values)` of `B` entries each.
    """
    half = len(entries) // 2
    return list(entries[:half]), list(entries[half:])
