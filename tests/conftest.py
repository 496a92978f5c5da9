"""Shared fixtures for radix calculator tests."""

from __future__ import annotations

import pytest

from calculator import RadixCalculator


@pytest.fixture
def calc10() -> RadixCalculator:
    return RadixCalculator(base=10)


@pytest.fixture
def calc2() -> RadixCalculator:
    return RadixCalculator(base=2)


@pytest.fixture
def calculators() -> dict[int, RadixCalculator]:
    """One unverified calculator per supported base."""
    return {b: RadixCalculator(base=b) for b in range(2, 11)}
