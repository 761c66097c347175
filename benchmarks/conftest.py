"""pytest-benchmark configuration for the base85 benchmarks."""

import os
from pathlib import Path

import pytest

from base85 import encode


@pytest.fixture(scope="session")
def random_data() -> bytes:
    """Return 1 MiB of random bytes, the baseline input size."""
    return os.urandom(0x100000)


@pytest.fixture(scope="session")
def encoded_data(random_data: bytes) -> str:
    """Return random_data encoded once up front."""
    return encode(random_data)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    # Set benchmark defaults
    config.option.benchmark_min_rounds = 5
    config.option.benchmark_warmup = True
    config.option.benchmark_warmup_iterations = 3

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)
