"""Shared fixtures for the Lamport scheme tests."""

from __future__ import annotations

import hashlib

import pytest

from lamport_spec.subspecs.ots import BufferedRandomness, LamportScheme


class ToyDigest:
    """
    An 8-bit digest for hand-checkable scenarios.

    Pinned messages hash to a chosen byte. Single bytes (the preimages of a
    toy key) go through a fixed permutation, so distinct preimages always have
    distinct public values. Anything else is truncated SHA-256.
    """

    def __init__(self, pinned: dict[bytes, int]) -> None:
        self.pinned = pinned

    @property
    def output_length(self) -> int:
        return 1

    def digest(self, data: bytes) -> bytes:
        if data in self.pinned:
            return bytes([self.pinned[data]])
        if len(data) == 1:
            return bytes([(data[0] * 167 + 13) % 256])
        return hashlib.sha256(data).digest()[:1]


TOY_PINNED = {
    b"hello": 0b10110010,
    b"goodbye": 0b01001101,
    b"collides-a": 0x5A,
    b"collides-b": 0x5A,
}
"""Messages with known toy digests. `goodbye` is the bitwise complement of `hello`."""

TOY_POOL = bytes(range(16))
"""Randomness giving `x_i^0 = i` and `x_i^1 = 8 + i` for a toy key."""


@pytest.fixture
def toy_digest() -> ToyDigest:
    """The toy 8-bit digest."""
    return ToyDigest(TOY_PINNED)


@pytest.fixture
def toy_scheme(toy_digest: ToyDigest) -> LamportScheme:
    """A toy scheme whose key preimages are the bytes 0 to 15, in draw order."""
    return LamportScheme(toy_digest, BufferedRandomness(TOY_POOL))
