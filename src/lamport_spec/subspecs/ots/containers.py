"""
Data containers for the Lamport one-time signature scheme.

This module defines the key pair and signature containers. Public keys and
signatures are immutable pydantic models. The private key is a plain stateful
object, since it must be destroyed after its single use.
"""

from __future__ import annotations

import hmac
from enum import Enum, auto
from threading import Lock
from typing import TYPE_CHECKING, Any, Sequence

from pydantic import field_validator, model_validator
from typing_extensions import Self

from lamport_spec.types import HexBytes, KeyReuseError, StrictBaseModel

from .codec import decode_entries, encode_entries, split_branches
from .utils import wipe

if TYPE_CHECKING:
    from .interface import LamportScheme


def _as_tuple(value: Any) -> Any:
    """Accept lists (e.g. from JSON) where the models store tuples."""
    if isinstance(value, list):
        return tuple(value)
    return value


class PublicKey(StrictBaseModel):
    """
    The public-facing component of a key pair.

    Holds `y_i^b = digest(x_i^b)` for every position `i` and branch `b`.
    It is safe to distribute publicly and to reuse for any number of
    verifications.
    """

    zero_values: tuple[HexBytes, ...]
    """The digests `y_i^0` of the zero-branch preimages, by position."""

    one_values: tuple[HexBytes, ...]
    """The digests `y_i^1` of the one-branch preimages, by position."""

    @field_validator("zero_values", "one_values", mode="before")
    @classmethod
    def coerce_values(cls, value: Any) -> Any:
        """Accept any list of byte-like values."""
        return _as_tuple(value)

    @model_validator(mode="after")
    def check_shape(self) -> Self:
        """Both branches must cover the same positions with equal-length digests."""
        if len(self.zero_values) != len(self.one_values):
            raise ValueError(
                f"Branches differ in length: {len(self.zero_values)} zero values, "
                f"{len(self.one_values)} one values"
            )
        lengths = {len(v) for v in self.zero_values + self.one_values}
        if len(lengths) > 1:
            raise ValueError(f"Public values have mixed lengths: {sorted(lengths)}")
        return self

    def __len__(self) -> int:
        """The number of public values, `2 * B`."""
        return len(self.zero_values) + len(self.one_values)

    @property
    def digest_length(self) -> int:
        """The length `H` of each public value, or 0 for an empty key."""
        return len(self.zero_values[0]) if self.zero_values else 0

    def value(self, index: int, bit: int) -> HexBytes:
        """Return `y_index^bit`."""
        return self.one_values[index] if bit else self.zero_values[index]

    def encode_bytes(self) -> bytes:
        """Serialize as `2 * B` raw entries, zero branch first."""
        return encode_entries(self.zero_values + self.one_values)

    @classmethod
    def decode_bytes(cls, data: bytes, digest_length: int) -> Self:
        """
        Parse the flat encoding produced by `encode_bytes`.

        Args:
            data: The raw bytes.
            digest_length: The digest output length `H`.

        Raises:
            LamportDecodeError: If the data does not hold exactly `16 * H` entries of `H` bytes.
        """
        count = 2 * 8 * digest_length
        entries = decode_entries(data, digest_length, count, cls.__name__)
        zero_values, one_values = split_branches(entries)
        return cls(zero_values=zero_values, one_values=one_values)

    def verify(self, message: bytes, signature: "Signature", scheme: "LamportScheme") -> bool:
        """
        Verify `signature` over `message` against this key.

        This is a convenience method that delegates to `scheme.verify()`.

        Args:
            message: The message that was supposedly signed.
            signature: The signature to check.
            scheme: The scheme instance to use for verification.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        return scheme.verify(self, message, signature)


class Signature(StrictBaseModel):
    """
    A signature produced by the `sign` function.

    It reveals one preimage per bit of the message digest. Entries are not
    length-checked here, since signatures arrive from untrusted parties and a
    malformed entry must simply fail verification.
    """

    values: tuple[HexBytes, ...]
    """The revealed preimages `x_i^{b_i}`, by position."""

    @field_validator("values", mode="before")
    @classmethod
    def coerce_values(cls, value: Any) -> Any:
        """Accept any list of byte-like values."""
        return _as_tuple(value)

    def __len__(self) -> int:
        """The number of revealed preimages, `B`."""
        return len(self.values)

    def encode_bytes(self) -> bytes:
        """Serialize as `B` raw entries."""
        return encode_entries(self.values)

    @classmethod
    def decode_bytes(cls, data: bytes, digest_length: int) -> Self:
        """
        Parse the flat encoding produced by `encode_bytes`.

        Args:
            data: The raw bytes.
            digest_length: The digest output length `H`.

        Raises:
            LamportDecodeError: If the data does not hold exactly `8 * H` entries of `H` bytes.
        """
        count = 8 * digest_length
        return cls(values=decode_entries(data, digest_length, count, cls.__name__))


class KeyState(Enum):
    """Lifecycle of a private key."""

    FRESH = auto()
    """Generated and never used to sign."""

    CONSUMED = auto()
    """Used to sign (or explicitly destroyed); its preimages are wiped."""


class PrivateKey:
    """
    The private component of a key pair. **MUST BE KEPT CONFIDENTIAL.**

    Holds `B` pairs of random preimages `(x_i^0, x_i^1)`. A private key signs
    exactly once: signing reveals one preimage of every pair, moves the key
    to `KeyState.CONSUMED` and zeroizes all of its preimages. Any further
    access raises `KeyReuseError`.

    The state check and the transition to `CONSUMED` happen under a per-key
    lock, so concurrent signing calls on one key yield at most one signature.
    """

    __slots__ = ("_zero_values", "_one_values", "_state", "_lock")

    def __init__(self, zero_values: Sequence[bytes], one_values: Sequence[bytes]) -> None:
        """
        Take ownership of the preimages.

        Args:
            zero_values: The preimages `x_i^0`, by position.
            one_values: The preimages `x_i^1`, by position.

        Raises:
            ValueError: If the two branches cover a different number of positions.
        """
        if len(zero_values) != len(one_values):
            raise ValueError(
                f"Branches differ in length: {len(zero_values)} zero values, "
                f"{len(one_values)} one values"
            )
        self._zero_values = [bytearray(v) for v in zero_values]
        self._one_values = [bytearray(v) for v in one_values]
        self._state = KeyState.FRESH
        self._lock = Lock()

    @property
    def state(self) -> KeyState:
        """The current lifecycle state."""
        return self._state

    @property
    def is_consumed(self) -> bool:
        """Whether the key can no longer be used."""
        return self._state is KeyState.CONSUMED

    def __len__(self) -> int:
        """The number of preimages, `2 * B`."""
        return len(self._zero_values) + len(self._one_values)

    def entry_lengths(self) -> set[int]:
        """The distinct preimage lengths present in the key."""
        return {len(v) for v in self._zero_values + self._one_values}

    def _require_fresh(self, operation: str) -> None:
        # Callers hold `self._lock`.
        if self._state is not KeyState.FRESH:
            raise KeyReuseError(operation)

    def preimage(self, index: int, bit: int) -> bytes:
        """
        Return a copy of `x_index^bit`.

        Raises:
            KeyReuseError: If the key has been consumed.
        """
        with self._lock:
            self._require_fresh("read preimage")
            return bytes(self._one_values[index] if bit else self._zero_values[index])

    def consume(self, bits: Sequence[int]) -> list[bytes]:
        """
        Reveal one preimage per position, then destroy the key.

        This is the only way to obtain signature material. The key is marked
        consumed before anything is revealed, and the whole call is atomic
        with respect to other calls on the same key.

        Args:
            bits: One bit per position, selecting the branch to reveal.

        Returns:
            The selected preimages, by position.

        Raises:
            KeyReuseError: If the key has already been consumed.
            ValueError: If `bits` does not cover every position.
        """
        with self._lock:
            self._require_fresh("sign")
            if len(bits) != len(self._zero_values):
                raise ValueError(f"Expected {len(self._zero_values)} bits, got {len(bits)}")
            self._state = KeyState.CONSUMED

            revealed = [
                bytes(self._one_values[i] if bit else self._zero_values[i])
                for i, bit in enumerate(bits)
            ]
            self._wipe()
            return revealed

    def destroy(self) -> None:
        """Discard the key: wipe its preimages and mark it consumed."""
        with self._lock:
            self._state = KeyState.CONSUMED
            self._wipe()

    def _wipe(self) -> None:
        for value in self._zero_values + self._one_values:
            wipe(value)

    def encode_bytes(self) -> bytes:
        """
        Serialize as `2 * B` raw entries, zero branch first.

        Raises:
            KeyReuseError: If the key has been consumed.
        """
        with self._lock:
            self._require_fresh("serialize")
            return encode_entries(self._zero_values + self._one_values)

    @classmethod
    def decode_bytes(cls, data: bytes, digest_length: int) -> Self:
        """
        Parse the flat encoding produced by `encode_bytes` into a fresh key.

        Args:
            data: The raw bytes.
            digest_length: The digest output length `H`.

        Raises:
            LamportDecodeError: If the data does not hold exactly `16 * H` entries of `H` bytes.
        """
        count = 2 * 8 * digest_length
        entries = decode_entries(data, digest_length, count, cls.__name__)
        zero_values, one_values = split_branches(entries)
        return cls(zero_values, one_values)

    def __eq__(self, other: object) -> bool:
        """Compare state, entry boundaries and secret material, without early exit on bytes."""
        if not isinstance(other, PrivateKey):
            return NotImplemented
        mine = self._zero_values + self._one_values
        theirs = other._zero_values + other._one_values
        if self._state is not other._state or [len(v) for v in mine] != [len(v) for v in theirs]:
            return False
        return hmac.compare_digest(b"".join(mine), b"".join(theirs))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Describe the key without revealing any secret bytes."""
        return f"PrivateKey(positions={len(self._zero_values)}, state={self._state.name})"
