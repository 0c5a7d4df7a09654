import os
import sys

import pytest

# Add src/python to path so tests can run without installing the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src/python')))

from bloom_config import BloomConfig  # noqa: E402
from bloom_filter import BloomFilter  # noqa: E402


@pytest.fixture
def greek_filter():
    """Small filter seeded with three items at p=0.05, k=4."""
    return BloomFilter(BloomConfig(["alpha", "beta", "gamma"], 0.05, 4))


@pytest.fixture
def single_bit_filter():
    """Filter with no seed items, which sizes to a single bit."""
    return BloomFilter(BloomConfig([], 0.05, 4))
