"""
Global configuration for the Lamport one-time signature scheme.

`LAMPORT_ENV` picks the digest preset behind the `TARGET_*` instances: full
SHA-256 keys in production, truncated 4-byte digests when running tests.
"""

import os
from typing import Mapping

SUPPORTED_LAMPORT_ENVS: tuple[str, ...] = ("prod", "test")
"""The accepted values of the `LAMPORT_ENV` environment variable."""


def read_lamport_env(environ: Mapping[str, str] | None = None) -> str:
    """
    Read the environment flag, normalized to lowercase without surrounding whitespace.

    Args:
        environ: The mapping to read from. Defaults to `os.environ`.

    Returns:
        One of `SUPPORTED_LAMPORT_ENVS`. An unset or empty flag means "prod".

    Raises:
        ValueError: If the flag names an unsupported environment.
    """
    if environ is None:
        environ = os.environ
    value = environ.get("LAMPORT_ENV", "").strip().lower() or "prod"
    if value not in SUPPORTED_LAMPORT_ENVS:
        raise ValueError(
            f"Invalid LAMPORT_ENV environment variable: '{value}'. "
            f"Supported values: {list(SUPPORTED_LAMPORT_ENVS)}"
        )
    return value


LAMPORT_ENV = read_lamport_env()
"""The environment flag read at import time."""
