"""Shared test fixtures: grid squares at a few useful precisions."""

import pytest

from osgbtools import VALID_SQUARES, GridSquare


@pytest.fixture()
def tq_square() -> GridSquare:
    """A 1m square in central London."""
    return GridSquare("TQ 12345 67890")


@pytest.fixture()
def tq_100m() -> GridSquare:
    """The same area at 100m resolution."""
    return GridSquare("TQ 123 678")


@pytest.fixture()
def strict_square() -> GridSquare:
    """An empty square that only accepts squares used over GB."""
    return GridSquare(valid_squares=VALID_SQUARES)
