"""
Pytest configuration for ClosureLab tests.

Provides empty registry and sandbox fixtures so each test starts from a clean
slate.
"""
from pathlib import Path
import sys

import pytest

# The CLI tests run `python -m closurelab` from the checkout root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from closurelab.capture import CaptureSandbox  # noqa: E402
from closurelab.registry import Registry  # noqa: E402


@pytest.fixture
def registry():
    """An empty registry."""
    return Registry("<test>")


@pytest.fixture
def sandbox():
    """An empty capture sandbox."""
    return CaptureSandbox("<test>")
