"""Tests for the `hashlib`-backed digest provider."""

import hashlib

import pytest

from lamport_spec.subspecs.digest import (
    PROD_DIGEST,
    SHAKE128_CONFIG,
    TEST_DIGEST,
    DigestConfig,
    DigestProvider,
    HashlibDigest,
)


def test_satisfies_protocol() -> None:
    """`HashlibDigest` is a `DigestProvider`."""
    assert isinstance(PROD_DIGEST, DigestProvider)


def test_non_provider_is_rejected_by_protocol_check() -> None:
    """Objects without `digest` are not providers."""
    assert not isinstance(object(), DigestProvider)


def test_prod_matches_sha256() -> None:
    """The production digest is plain SHA-256."""
    assert PROD_DIGEST.output_length == 32
    assert PROD_DIGEST.digest(b"abc") == hashlib.sha256(b"abc").digest()


def test_test_digest_truncates_sha256() -> None:
    """The test digest keeps the first four bytes of SHA-256."""
    assert TEST_DIGEST.output_length == 4
    assert TEST_DIGEST.digest(b"abc") == hashlib.sha256(b"abc").digest()[:4]


def test_shake_uses_requested_length() -> None:
    """An XOF is asked for exactly the configured length."""
    digest = HashlibDigest(config=SHAKE128_CONFIG)
    assert digest.digest(b"abc") == hashlib.shake_128(b"abc").digest(32)


@pytest.mark.parametrize("algorithm, length", [("sha256", 32), ("sha3_256", 16), ("blake2b", 64)])
def test_output_length_is_exact(algorithm: str, length: int) -> None:
    """Every digest has exactly `output_length` bytes."""
    digest = HashlibDigest(config=DigestConfig(ALGORITHM=algorithm, OUTPUT_LENGTH=length))
    for message in (b"", b"x", b"x" * 1000):
        assert len(digest.digest(message)) == length


def test_is_deterministic() -> None:
    """The same input always hashes to the same output."""
    assert PROD_DIGEST.digest(b"message") == PROD_DIGEST.digest(b"message")
    assert PROD_DIGEST.digest(b"message") != PROD_DIGEST.digest(b"Message")
