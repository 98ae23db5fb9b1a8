"""Shared test fixtures."""

import pytest

from fakes import kst


@pytest.fixture
def fixed_clock():
    return lambda: kst(2026, 10, 16, 14, 5)
