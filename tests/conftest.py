"""Pytest configuration and fixtures.

Provides the side-effect counter used to observe when (and how often)
deferred work actually runs.
"""

from __future__ import annotations

import pytest

from tests.helpers import Counter


@pytest.fixture
def counter() -> Counter:
    """Fresh side-effect counter for one test."""
    return Counter()
