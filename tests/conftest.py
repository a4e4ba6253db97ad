"""
Pytest configuration for the spanmut test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Temporary seed directories with small Rust sources
- A seeded random generator
"""

import os
import random
import shutil
import tempfile
from pathlib import Path

import pytest

from spanmut.logging_config import setup_logging


def pytest_configure(config):
    os.environ.setdefault("SPANMUT_MACHINE_MODE", "1")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="spanmut_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def seed_dir(temp_dir):
    """
    A directory with two tiny Rust files that share no identifiers.

    Returns:
        Path to the seed directory.
    """
    seeds = temp_dir / "seeds"
    seeds.mkdir()
    (seeds / "a.rs").write_text("fn foo() {}\n")
    (seeds / "b.rs").write_text("fn bar() {}\n")
    return seeds


@pytest.fixture
def output_dir(temp_dir):
    return temp_dir / "out"
