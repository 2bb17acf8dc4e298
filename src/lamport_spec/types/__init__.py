"""Reusable type definitions for the Lamport one-time signature scheme."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import HexBytes
from .exceptions import (
    DigestLengthError,
    KeyLengthMismatchError,
    KeyReuseError,
    LamportConfigurationError,
    LamportDecodeError,
    LamportError,
    LamportResourceError,
    LamportSerializationError,
    RandomnessExhaustedError,
    StructuralMismatchError,
)

__all__ = [
    # Core types
    "CamelModel",
    "StrictBaseModel",
    "HexBytes",
    # Exceptions
    "LamportError",
    "LamportConfigurationError",
    "KeyLengthMismatchError",
    "StructuralMismatchError",
    "DigestLengthError",
    "LamportResourceError",
    "RandomnessExhaustedError",
    "KeyReuseError",
    "LamportSerializationError",
    "LamportDecodeError",
]
