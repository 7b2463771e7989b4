"""Pytest configuration for repo-wide test behavior."""

# Ensure project root on sys.path for imports
import os
import sys

import pytest

root = os.path.dirname(os.path.abspath(__file__))
proj = os.path.abspath(os.path.join(root, ".."))
if proj not in sys.path:
    sys.path.insert(0, proj)

from weight_controller.metrics.registry import REGISTRY  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_metrics():
    """Give every test an empty metrics registry."""
    REGISTRY.reset()
    yield
    REGISTRY.reset()
