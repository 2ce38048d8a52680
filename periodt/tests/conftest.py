"""
Shared pytest fixtures for Periodt tests

Supports both development mode (python -m periodt) and installed mode (pip install -e .)
"""
import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")


class ReversePermutation:
    """Permutation source that reverses group order"""

    def permutation(self, n):
        return list(reversed(range(n)))


# Repository root on sys.path so tests also run without pip install -e .
#   repo/              <- repo root
#   └── periodt/
#       └── tests/
#           └── conftest.py
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def identity_key():
    """Key function for plain string items"""
    return lambda item: item


@pytest.fixture
def blank():
    """Blank filler factory for character items"""
    return lambda: ' '


@pytest.fixture
def tagged_items():
    """(key, input index) pairs so intra-group order can be checked"""
    keys = "CABCADBCAE"
    return [(key, i) for i, key in enumerate(keys)]


@pytest.fixture
def tag_key():
    return lambda item: item[0]


@pytest.fixture
def reverse_rng():
    return ReversePermutation()


@pytest.fixture
def demo_chars():
    """The 100-character demo input"""
    from periodt.cli.layout import DEMO_CHARS
    return list(DEMO_CHARS)


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual pipeline stages"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the full pipeline or CLI"
    )
