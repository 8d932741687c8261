"""Pytest configuration and fixtures for picotime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so picotime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_components() -> tuple[int, ...]:
    """Ten components with a distinct value in every field."""
    return (2000, 1, 2, 3, 4, 5, 6, 7, 8, 9)
