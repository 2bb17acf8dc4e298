"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import HealthCheck, settings

# Must run before `lamport_spec.config` is imported so that the `TARGET_*`
# instances use the truncated test digest.
os.environ.setdefault("LAMPORT_ENV", "test")

# Every example generates a fresh key pair, which hypothesis may flag as slow.
settings.register_profile("lamport", deadline=None, suppress_health_check=[HealthCheck.too_slow])
settings.register_profile(
    "lamport-thorough", parent=settings.get_profile("lamport"), max_examples=1000
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "lamport"))


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add a switch to skip the large digest presets."""
    parser.addoption(
        "--skip-slow",
        action="store_true",
        default=False,
        help="Skip tests that build keys over the 512-bit digest presets.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Apply `--skip-slow` to tests marked `slow`."""
    if not config.getoption("--skip-slow"):
        return
    skip_slow = pytest.mark.skip(reason="skipped with --skip-slow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
