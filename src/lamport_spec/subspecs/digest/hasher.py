"""
The digest capability the Lamport scheme is generic over.

The scheme never calls a hash function directly. It receives any object
implementing `DigestProvider` and derives `H` and `B` from it. A `hashlib`
adapter is provided for the standard presets.
"""

from __future__ import annotations

import hashlib
from typing import Protocol, runtime_checkable

from pydantic import model_validator

from lamport_spec.types import StrictBaseModel

from .constants import (
    PROD_CONFIG,
    SHA3_256_CONFIG,
    SHA512_CONFIG,
    TARGET_CONFIG,
    TEST_CONFIG,
    DigestConfig,
)


@runtime_checkable
class DigestProvider(Protocol):
    """
    A fixed-output-length cryptographic hash function.

    Implementations must be deterministic and always return exactly
    `output_length` bytes.
    """

    @property
    def output_length(self) -> int:
        """The output length `H` in bytes."""
        ...

    def digest(self, data: bytes) -> bytes:
        """Hash `data` into exactly `output_length` bytes."""
        ...


class HashlibDigest(StrictBaseModel):
    """A digest provider backed by a `hashlib` algorithm."""

    config: DigestConfig
    """The algorithm and output length to use."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "HashlibDigest":
        """Reject subclasses to prevent type confusion attacks."""
        if type(self.config) is not DigestConfig:
            raise TypeError("config must be exactly DigestConfig, not a subclass")
        return self

    @property
    def output_length(self) -> int:
        """The output length `H` in bytes."""
        return self.config.OUTPUT_LENGTH

    def digest(self, data: bytes) -> bytes:
        """
        Hash `data` and truncate to the configured output length.

        Args:
            data: The bytes to hash.

        Returns:
            Exactly `OUTPUT_LENGTH` bytes.
        """
        h = hashlib.new(self.config.ALGORITHM, data)

        # SHAKE is an XOF: the output length is an argument, not a property.
        if h.digest_size == 0:
            return h.digest(self.config.OUTPUT_LENGTH)  # type: ignore[call-arg]
        return h.digest()[: self.config.OUTPUT_LENGTH]


PROD_DIGEST = HashlibDigest(config=PROD_CONFIG)
"""An instance configured for production-level parameters."""

TEST_DIGEST = HashlibDigest(config=TEST_CONFIG)
"""A lightweight instance for test environments."""

TARGET_DIGEST = HashlibDigest(config=TARGET_CONFIG)
"""The instance selected by the `LAMPORT_ENV` environment flag."""

SHA512_DIGEST = HashlibDigest(config=SHA512_CONFIG)
"""SHA-512, giving 512 positions per signature."""

SHA3_256_DIGEST = HashlibDigest(config=SHA3_256_CONFIG)
"""SHA3-256."""
