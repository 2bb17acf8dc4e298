"""
Tests for strict type checking in the digest and randomness components.

These tests verify that Pydantic-based classes properly reject subclasses,
ensuring only approved implementations are used.
"""

import pytest
from pydantic import ValidationError

from lamport_spec.subspecs.digest import (
    PROD_CONFIG,
    PROD_DIGEST,
    TEST_CONFIG,
    DigestConfig,
    HashlibDigest,
)
from lamport_spec.subspecs.ots.rand import SYSTEM_RAND, SystemRandomness


class TestHashlibDigestStrictTypes:
    """Tests for HashlibDigest strict type checking."""

    def test_accepts_exact_type(self) -> None:
        """HashlibDigest initialization succeeds with exact type."""
        digest = HashlibDigest(config=PROD_CONFIG)
        assert digest.config == PROD_CONFIG

    def test_rejects_subclass_config(self) -> None:
        """HashlibDigest rejects DigestConfig subclass."""

        class CustomConfig(DigestConfig):
            pass

        custom_config = DigestConfig.__new__(CustomConfig)
        custom_config.__dict__.update(PROD_CONFIG.__dict__)

        with pytest.raises(TypeError, match="config must be exactly DigestConfig"):
            HashlibDigest(config=custom_config)

    def test_rejects_wrong_type_config(self) -> None:
        """HashlibDigest rejects completely wrong type for config."""

        class RandomClass:
            pass

        with pytest.raises((TypeError, ValidationError)):
            HashlibDigest(config=RandomClass())  # type: ignore[arg-type]

    def test_rejects_extra_fields(self) -> None:
        """Unknown fields are forbidden."""
        with pytest.raises(ValidationError):
            HashlibDigest(config=PROD_CONFIG, salt=b"")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """HashlibDigest is immutable (frozen)."""
        with pytest.raises(ValidationError):
            PROD_DIGEST.config = TEST_CONFIG


class TestSystemRandomnessStrictTypes:
    """Tests for SystemRandomness strict type checking."""

    def test_rejects_extra_fields(self) -> None:
        """SystemRandomness takes no configuration."""
        with pytest.raises(ValidationError):
            SystemRandomness(seed=1)  # type: ignore[call-arg]

    def test_is_shared_default(self) -> None:
        """The module default is a plain SystemRandomness."""
        assert type(SYSTEM_RAND) is SystemRandomness
