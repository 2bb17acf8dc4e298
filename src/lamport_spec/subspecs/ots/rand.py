"""Randomness sources for Lamport private key material."""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from lamport_spec.types import RandomnessExhaustedError, StrictBaseModel


@runtime_checkable
class RandomnessSource(Protocol):
    """
    A supplier of cryptographically secure random bytes.

    `fill` overwrites every byte of `buffer` in place, or raises
    `RandomnessExhaustedError` when it cannot.
    """

    def fill(self, buffer: bytearray) -> None:
        """Fill `buffer` entirely with random bytes."""
        ...


class SystemRandomness(StrictBaseModel):
    """Randomness drawn from the operating system CSPRNG."""

    def fill(self, buffer: bytearray) -> None:
        """Fill `buffer` with bytes from `secrets.token_bytes`."""
        try:
            data = secrets.token_bytes(len(buffer))
        except OSError as exc:
            raise RandomnessExhaustedError(requested=len(buffer)) from exc
        buffer[:] = data


class BufferedRandomness:
    """
    A finite source that hands out a fixed pool of bytes in order.

    Two instances built from the same pool produce identical key pairs, which
    makes this useful for reproducible test vectors. It is only as secure as
    the pool it is given.
    """

    def __init__(self, pool: bytes) -> None:
        self._pool = bytes(pool)
        self._offset = 0

    @property
    def remaining(self) -> int:
        """Number of bytes not yet handed out."""
        return len(self._pool) - self._offset

    def fill(self, buffer: bytearray) -> None:
        """
        Copy the next `len(buffer)` bytes of the pool into `buffer`.

        Raises:
            RandomnessExhaustedError: If fewer than `len(buffer)` bytes remain.
                The pool is left untouched in that case.
        """
        requested = len(buffer)
        if requested > self.remaining:
            raise RandomnessExhaustedError(requested=requested, available=self.remaining)
        buffer[:] = self._pool[self._offset : self._offset + requested]
        self._offset += requested


def draw(source: RandomnessSource, length: int) -> bytearray:
    """
    Draw exactly `length` random bytes from `source`.

    Args:
        source: The randomness source.
        length: The number of bytes wanted.

    Returns:
        A fresh mutable buffer, so the caller can wipe it later.

    Raises:
        RandomnessExhaustedError: If the source fails or does not fill the buffer.
    """
    buffer = bytearray(length)
    source.fill(buffer)

    # A source that resizes the buffer has not supplied what was asked for.
    if len(buffer) != length:
        raise RandomnessExhaustedError(requested=length, available=len(buffer))
    return buffer


SYSTEM_RAND = SystemRandomness()
"""The default randomness source."""
