"""
Digest configurations for the Lamport scheme.

A Lamport key pair is entirely shaped by the digest it is built on: the
output length `H` (in bytes) fixes the size of every preimage and every
public value, and the bit length `B = 8 * H` fixes how many positions a
signature has.

Each preset names a `hashlib` algorithm and the number of output bytes kept.
Keeping fewer bytes than the algorithm natively produces is how the
lightweight test preset is built.
"""

import hashlib

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import Final

from lamport_spec.config import LAMPORT_ENV


class DigestConfig(BaseModel):
    """A model holding the configuration constants for a digest preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ALGORITHM: str
    """The `hashlib` name of the underlying hash function."""

    OUTPUT_LENGTH: int
    """The output length `H` in bytes."""

    @model_validator(mode="after")
    def check_algorithm(self) -> "DigestConfig":
        """Reject unknown algorithms and output lengths the algorithm cannot produce."""
        if self.ALGORITHM not in hashlib.algorithms_available:
            raise ValueError(f"Unknown hashlib algorithm: '{self.ALGORITHM}'")

        # Extendable-output functions (SHAKE) report a digest size of zero.
        native_size = hashlib.new(self.ALGORITHM).digest_size
        if self.OUTPUT_LENGTH < 1:
            raise ValueError(f"OUTPUT_LENGTH must be positive, got {self.OUTPUT_LENGTH}")
        if native_size and self.OUTPUT_LENGTH > native_size:
            raise ValueError(
                f"{self.ALGORITHM} produces at most {native_size} bytes, "
                f"got OUTPUT_LENGTH={self.OUTPUT_LENGTH}"
            )
        return self

    @property
    def DIGEST_BITS(self) -> int:  # noqa: N802
        """The digest length `B` in bits; also the number of signature entries."""
        return 8 * self.OUTPUT_LENGTH

    @property
    def PRIVATE_KEY_LENGTH(self) -> int:  # noqa: N802
        """The number of preimages (and public values) in a key: `2 * B`."""
        return 2 * self.DIGEST_BITS

    @property
    def SIGNATURE_LENGTH(self) -> int:  # noqa: N802
        """The number of entries in a signature: `B`."""
        return self.DIGEST_BITS


SHA256_CONFIG: Final = DigestConfig(ALGORITHM="sha256", OUTPUT_LENGTH=32)

SHA512_CONFIG: Final = DigestConfig(ALGORITHM="sha512", OUTPUT_LENGTH=64)

SHA3_256_CONFIG: Final = DigestConfig(ALGORITHM="sha3_256", OUTPUT_LENGTH=32)

SHA3_512_CONFIG: Final = DigestConfig(ALGORITHM="sha3_512", OUTPUT_LENGTH=64)

BLAKE2B_CONFIG: Final = DigestConfig(ALGORITHM="blake2b", OUTPUT_LENGTH=64)

SHAKE128_CONFIG: Final = DigestConfig(ALGORITHM="shake_128", OUTPUT_LENGTH=32)

PROD_CONFIG: Final = SHA256_CONFIG
"""The production preset: SHA-256 with its full 32-byte output."""

TEST_CONFIG: Final = DigestConfig(ALGORITHM="sha256", OUTPUT_LENGTH=4)
"""
A lightweight preset for test environments.

SHA-256 truncated to 4 bytes gives 32 signature positions. This is far too
short to be secure but keeps key generation in tests cheap.
"""

TARGET_CONFIG: Final = PROD_CONFIG if LAMPORT_ENV == "prod" else TEST_CONFIG
"""The preset selected by the `LAMPORT_ENV` environment flag."""
