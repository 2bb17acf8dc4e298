"""
Defines the core interface for the Lamport one-time signature scheme.

This module provides the high-level functions (`key_gen`, `sign`, `verify`).

This constitutes the public API of the signature scheme.
"""

from __future__ import annotations

import hmac
import logging
from typing import List, Tuple

from lamport_spec.types import (
    DigestLengthError,
    KeyLengthMismatchError,
    KeyReuseError,
    StructuralMismatchError,
)

from ..digest.hasher import PROD_DIGEST, TARGET_DIGEST, TEST_DIGEST, DigestProvider
from .containers import PrivateKey, PublicKey, Signature
from .rand import SYSTEM_RAND, RandomnessSource, draw
from .utils import BitOrder, digest_bits, wipe

logger = logging.getLogger(__name__)


class LamportScheme:
    """Instance of the Lamport one-time signature scheme for a given digest."""

    def __init__(
        self,
        digest: DigestProvider,
        rand: RandomnessSource = SYSTEM_RAND,
        bit_order: BitOrder = BitOrder.MSB_FIRST,
    ):
        """
        Initializes the scheme with a digest provider and a randomness source.

        Args:
            digest: The hash function. Its `output_length` fixes `H` and `B = 8 * H`.
            rand: The source of private key material.
            bit_order: How digest bits map to key positions. Signer and
                verifier must agree on it.

        Raises:
            ValueError: If the digest declares a non-positive output length.
        """
        if digest.output_length < 1:
            raise ValueError(f"Digest output length must be positive, got {digest.output_length}")
        self.digest = digest
        self.rand = rand
        self.bit_order = bit_order

    @property
    def digest_length(self) -> int:
        """The digest output length `H` in bytes."""
        return self.digest.output_length

    @property
    def bit_length(self) -> int:
        """The digest length `B` in bits."""
        return 8 * self.digest.output_length

    def _hash(self, data: bytes) -> bytes:
        """Hash `data`, checking the provider honours its declared length."""
        output = self.digest.digest(bytes(data))
        if len(output) != self.digest_length:
            raise DigestLengthError(expected=self.digest_length, actual=len(output))
        return output

    def _message_bits(self, message: bytes) -> List[int]:
        """The `B` bits of `digest(message)` in the scheme's bit order."""
        return digest_bits(self._hash(message), self.bit_order)

    def key_gen(self) -> Tuple[PrivateKey, PublicKey]:
        """
        Generates a new one-time key pair.

        This is a **randomized** algorithm.

        ### Key Generation Algorithm

        1.  **Draw Preimages**: For each of the `B` positions, draw two
            independent random strings of `H` bytes, `x_i^0` and `x_i^1`.
            All zero-branch preimages are drawn first, then all one-branch
            preimages, one `fill` call per preimage.

        2.  **Commit**: Hash every preimage, `y_i^b = digest(x_i^b)`. The
            collection of these digests is the public key.

        If either step fails, every preimage drawn so far is wiped before the
        error propagates.

        Returns:
            A tuple containing the `PrivateKey` and `PublicKey`.

        Raises:
            RandomnessExhaustedError: If the randomness source cannot supply
                the `2 * B * H` bytes required.
            DigestLengthError: If the digest provider misreports its length.
        """
        h = self.digest_length
        b = self.bit_length

        buffers: List[bytearray] = []
        sk = None
        try:
            for _ in range(2 * b):
                buffers.append(draw(self.rand, h))
            sk = PrivateKey(buffers[:b], buffers[b:])
            pk = self.public_key(sk)
        except BaseException:
            if sk is not None:
                sk.destroy()
            raise
        finally:
            # The private key holds its own copies, so the draw buffers are wiped.
            for buffer in buffers:
                wipe(buffer)

        logger.debug("Generated Lamport key pair with %d positions of %d bytes", b, h)
        return sk, pk

    def public_key(self, sk: PrivateKey) -> PublicKey:
        """
        Derives the public key of a fresh private key.

        This is a **deterministic** algorithm: the same private key always
        yields the same public key.

        Args:
            sk: The private key.

        Returns:
            The `PublicKey` holding `digest(x_i^b)` for every position and branch.

        Raises:
            KeyLengthMismatchError: If the key does not fit the configured digest.
            KeyReuseError: If the key has been consumed.
        """
        self._check_private_key(sk)
        positions = range(self.bit_length)
        return PublicKey(
            zero_values=tuple(self._hash(sk.preimage(i, 0)) for i in positions),
            one_values=tuple(self._hash(sk.preimage(i, 1)) for i in positions),
        )

    def _check_private_key(self, sk: PrivateKey) -> None:
        """Raise `KeyLengthMismatchError` unless `sk` has `2 * B` preimages of `H` bytes."""
        expected = 2 * self.bit_length
        if len(sk) != expected:
            raise KeyLengthMismatchError(expected=expected, actual=len(sk))
        for length in sk.entry_lengths():
            if length != self.digest_length:
                raise KeyLengthMismatchError(
                    expected=self.digest_length, actual=length, detail="bytes per preimage"
                )

    def sign(self, sk: PrivateKey, message: bytes) -> Signature:
        """
        Produces the one and only signature of a private key.

        **CRITICAL SECURITY WARNING**: A Lamport private key must **NEVER** sign
        two different messages. Each signature reveals one preimage per
        position; two signatures over different digests reveal both preimages
        of some positions, and an attacker can then forge signatures. This
        method therefore consumes the key: it is wiped and any further use
        raises `KeyReuseError`.

        ### Signing Algorithm

        1.  **Digest**: Compute `d = digest(message)`, a `B`-bit value.

        2.  **Select**: For each position `i`, read bit `b_i` of `d` (in the
            scheme's bit order) and reveal the preimage `x_i^{b_i}`.

        3.  **Consume**: Mark the key consumed and zeroize all its preimages.

        Args:
            sk: The private key to use. It is consumed by this call.
            message: The message to be signed, of any length.

        Returns:
            The resulting `Signature` with exactly `B` entries of `H` bytes.

        Raises:
            KeyReuseError: If the key has already been consumed.
            KeyLengthMismatchError: If the key does not fit the configured
                digest. The key is left untouched in that case.
        """
        if sk.is_consumed:
            logger.warning("Refusing to sign with a consumed Lamport private key")
            raise KeyReuseError("sign")
        self._check_private_key(sk)

        bits = self._message_bits(message)
        try:
            revealed = sk.consume(bits)
        except KeyReuseError:
            # Another caller consumed the key after the check above.
            logger.warning("Refusing to sign with a consumed Lamport private key")
            raise

        logger.debug("Lamport private key consumed after signing %d positions", len(revealed))
        return Signature(values=tuple(revealed))

    def verify(self, pk: PublicKey, message: bytes, sig: Signature) -> bool:
        r"""
        Verifies a signature against a public key and message.

        This is a **deterministic** algorithm.

        ### Verification Algorithm

        1.  **Check Structure**: The public key must hold `2 * B` values of
            `H` bytes and the signature `B` entries. Anything else is a
            configuration error, not a forgery, and raises.

        2.  **Digest**: Compute `d = digest(message)` using the same bit order
            as the signer.

        3.  **Open Commitments**: For each position `i`, hash the revealed
            preimage and compare it with $y_i^{b_i}$ from the public key.

        Every position is hashed and compared, even after a mismatch, and each
        comparison is constant-time. Verification succeeds if and only if all
        `B` comparisons succeed.

        Args:
            pk: The public key to verify against.
            message: The message that was supposedly signed.
            sig: The signature to be verified.

        Returns:
            `True` if the signature is valid, `False` otherwise.

        Raises:
            StructuralMismatchError: If `pk` or `sig` has the wrong shape for
                the configured digest.
        """
        expected_pk = 2 * self.bit_length
        if len(pk) != expected_pk:
            raise StructuralMismatchError("public key", expected=expected_pk, actual=len(pk))
        if len(pk) and pk.digest_length != self.digest_length:
            raise StructuralMismatchError(
                "public key entry", expected=self.digest_length, actual=pk.digest_length
            )
        if len(sig) != self.bit_length:
            raise StructuralMismatchError("signature", expected=self.bit_length, actual=len(sig))

        bits = self._message_bits(message)

        # Malformed entries of any length simply hash to a non-matching value.
        mismatches = 0
        for i, bit in enumerate(bits):
            opened = self._hash(sig.values[i])
            if not hmac.compare_digest(opened, pk.value(i, bit)):
                mismatches += 1

        if mismatches:
            logger.debug(
                "Lamport signature rejected: %d of %d positions differ", mismatches, len(bits)
            )
        return mismatches == 0


def generate(
    digest: DigestProvider, rand: RandomnessSource = SYSTEM_RAND
) -> Tuple[PrivateKey, PublicKey]:
    """Generate a key pair with the default (MSB-first) bit order."""
    return LamportScheme(digest, rand).key_gen()


def sign(sk: PrivateKey, message: bytes, digest: DigestProvider) -> Signature:
    """Sign `message` with the default (MSB-first) bit order, consuming `sk`."""
    return LamportScheme(digest).sign(sk, message)


def verify(pk: PublicKey, message: bytes, sig: Signature, digest: DigestProvider) -> bool:
    """Verify `sig` over `message` with the default (MSB-first) bit order."""
    return LamportScheme(digest).verify(pk, message, sig)


PROD_SIGNATURE_SCHEME = LamportScheme(PROD_DIGEST)
"""An instance configured for production-level parameters."""

TEST_SIGNATURE_SCHEME = LamportScheme(TEST_DIGEST)
"""A lightweight instance for test environments."""

TARGET_SIGNATURE_SCHEME = LamportScheme(TARGET_DIGEST)
"""The scheme selected by the `LAMPORT_ENV` environment flag."""
