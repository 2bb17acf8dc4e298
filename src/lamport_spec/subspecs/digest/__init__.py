"""
Digest providers for the Lamport one-time signature scheme.

The scheme is generic over any `DigestProvider`; `HashlibDigest` adapts the
standard library hash functions described by a `DigestConfig` preset.
"""

from .constants import (
    BLAKE2B_CONFIG,
    PROD_CONFIG,
    SHA3_256_CONFIG,
    SHA3_512_CONFIG,
    SHA256_CONFIG,
    SHA512_CONFIG,
    SHAKE128_CONFIG,
    TARGET_CONFIG,
    TEST_CONFIG,
    DigestConfig,
)
from .hasher import PROD_DIGEST, TARGET_DIGEST, TEST_DIGEST, DigestProvider, HashlibDigest

__all__ = [
    "DigestConfig",
    "DigestProvider",
    "HashlibDigest",
    "PROD_DIGEST",
    "TEST_DIGEST",
    "TARGET_DIGEST",
    "PROD_CONFIG",
    "TEST_CONFIG",
    "TARGET_CONFIG",
    "SHA256_CONFIG",
    "SHA512_CONFIG",
    "SHA3_256_CONFIG",
    "SHA3_512_CONFIG",
    "BLAKE2B_CONFIG",
    "SHAKE128_CONFIG",
]
