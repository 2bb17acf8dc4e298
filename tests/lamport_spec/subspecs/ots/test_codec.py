"""Tests for the flat entry encoding."""

import pytest

from lamport_spec.subspecs.ots.codec import decode_entries, encode_entries, split_branches
from lamport_spec.types import LamportDecodeError


def test_encode_concatenates_without_framing() -> None:
    """Entries are written back to back."""
    assert encode_entries([b"\x01\x02", bytearray(b"\x03\x04")]) == b"\x01\x02\x03\x04"


def test_decode_splits_into_entries() -> None:
    """Entries are read back in positional order."""
    assert decode_entries(b"\x01\x02\x03\x04", 2, 2, "Thing") == [b"\x01\x02", b"\x03\x04"]


@pytest.mark.parametrize(
    "data",
    [b"", b"\x00" * 5, b"\x00" * 7],
    ids=["empty", "short", "long"],
)
def test_decode_rejects_wrong_size(data: bytes) -> None:
    """Anything but exactly `count * entry_length` bytes is rejected."""
    with pytest.raises(LamportDecodeError, match="Failed to decode Thing") as exc_info:
        decode_entries(data, 2, 3, "Thing")

    assert exc_info.value.type_name == "Thing"
    assert "expected 3 entries of 2 bytes (6 bytes)" in exc_info.value.detail


def test_decode_rejects_zero_entry_length() -> None:
    """A zero entry length is never meaningful."""
    with pytest.raises(LamportDecodeError, match="entry length must be positive, got 0"):
        decode_entries(b"", 0, 0, "Thing")


def test_split_branches() -> None:
    """The first half is the zero branch and the second half the one branch."""
    zero_values, one_values = split_branches([b"a", b"b", b"c", b"d"])
    assert zero_values == [b"a", b"b"]
    assert one_values == [b"c", b"d"]
