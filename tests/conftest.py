"""Shared pytest fixtures for enav-core tests."""

import pytest

from enav_core import Position


@pytest.fixture
def lands_end() -> Position:
    """Land's End, the classical Vincenty worked example start point."""
    return Position(50.06632, -5.71475)


@pytest.fixture
def john_o_groats() -> Position:
    """John o' Groats, the worked example end point."""
    return Position(58.64402, -3.07000)


@pytest.fixture
def copenhagen() -> Position:
    return Position(55.676, 12.568)
