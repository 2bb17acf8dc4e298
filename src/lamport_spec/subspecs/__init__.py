"""Components of the Lamport one-time signature scheme."""

from .digest import DigestConfig, DigestProvider, HashlibDigest
from .ots import LamportScheme, PrivateKey, PublicKey, Signature

__all__ = [
    "DigestConfig",
    "DigestProvider",
    "HashlibDigest",
    "LamportScheme",
    "PrivateKey",
    "PublicKey",
    "Signature",
]
