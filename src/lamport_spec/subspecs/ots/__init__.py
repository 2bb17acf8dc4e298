"""
The Lamport one-time signature scheme.

It exposes the core data structures and the main interface functions.
"""

from .containers import KeyState, PrivateKey, PublicKey, Signature
from .interface import (
    PROD_SIGNATURE_SCHEME,
    TARGET_SIGNATURE_SCHEME,
    TEST_SIGNATURE_SCHEME,
    LamportScheme,
    generate,
    sign,
    verify,
)
from .rand import BufferedRandomness, RandomnessSource, SystemRandomness
from .utils import BitOrder

__all__ = [
    "LamportScheme",
    "PrivateKey",
    "PublicKey",
    "Signature",
    "KeyState",
    "BitOrder",
    "RandomnessSource",
    "SystemRandomness",
    "BufferedRandomness",
    "generate",
    "sign",
    "verify",
    "PROD_SIGNATURE_SCHEME",
    "TEST_SIGNATURE_SCHEME",
    "TARGET_SIGNATURE_SCHEME",
]
