"""Exception hierarchy for the Lamport one-time signature scheme."""

from __future__ import annotations


class LamportError(Exception):
    """
    Base exception for all Lamport-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class LamportConfigurationError(LamportError):
    """
    Base class for configuration errors.

    These are detected synchronously from length invariants, before any
    cryptographic comparison takes place. They signal a programmer error
    (mismatched digest, truncated key material), never a forged signature.
    """


class KeyLengthMismatchError(LamportConfigurationError):
    """
    Raised when a private key does not fit the configured digest.

    Attributes:
        expected: The expected number of preimages (`2 * B`) or preimage length (`H`).
        actual: The value found on the key.
        detail: What was measured ("preimages" or "bytes per preimage").
    """

    def __init__(self, *, expected: int, actual: int, detail: str = "preimages") -> None:
        self.expected = expected
        self.actual = actual
        self.detail = detail

        super().__init__(f"Private key requires {expected} {detail}, got {actual}")


class StructuralMismatchError(LamportConfigurationError):
    """
    Raised when a public key or signature has the wrong shape for the digest.

    This is deliberately distinct from a `False` verification result: it means
    the inputs could never have been produced under this configuration.

    Attributes:
        component: The offending structure ("public key", "signature", ...).
        expected: The expected count or length.
        actual: The count or length found.
    """

    def __init__(self, component: str, *, expected: int, actual: int) -> None:
        self.component = component
        self.expected = expected
        self.actual = actual

        super().__init__(f"{component} requires {expected} entries, got {actual}")


class DigestLengthError(LamportConfigurationError):
    """
    Raised when a digest provider returns output of the wrong length.

    Attributes:
        expected: The declared output length `H`.
        actual: The length of the output actually returned.
    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual

        super().__init__(f"Digest provider declared {expected} output bytes, returned {actual}")


class LamportResourceError(LamportError):
    """Base class for failures of an external collaborator."""


class RandomnessExhaustedError(LamportResourceError):
    """
    Raised when a randomness source cannot supply the requested bytes.

    Attributes:
        requested: Number of bytes requested.
        available: Number of bytes the source could still provide (if known).
    """

    def __init__(self, *, requested: int, available: int | None = None) -> None:
        self.requested = requested
        self.available = available

        msg = f"Randomness source could not supply {requested} bytes"
        if available is not None:
            msg = f"{msg} ({available} available)"

        super().__init__(msg)


class KeyReuseError(LamportError):
    """
    Raised when a consumed private key is used again.

    A Lamport private key reveals half of its preimages when it signs. Signing
    a second message would reveal more, which lets anyone forge signatures.
    """

    def __init__(self, operation: str = "sign") -> None:
        self.operation = operation

        super().__init__(f"Cannot {operation}: private key has already been used to sign")


class LamportSerializationError(LamportError):
    """Base class for serialization-related errors."""


class LamportDecodeError(LamportSerializationError):
    """
    Raised when decoding bytes into a key or signature fails.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail

        super().__init__(f"Failed to decode {type_name}: {detail}")
