"""Pytest configuration for binary_tower tests."""

import random
import sys
from contextlib import ExitStack
from pathlib import Path

import pytest

# Add the repository root to the path so the package imports without install
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from binary_tower import TowerConfig, use_config  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so random-element tests are reproducible."""
    return random.Random(0xB1A5)


@pytest.fixture
def config():
    """Activate a config for one test; it is dropped again on teardown."""
    with ExitStack() as stack:

        def _apply(**kwargs) -> TowerConfig:
            return stack.enter_context(use_config(TowerConfig(**kwargs)))

        yield _apply
