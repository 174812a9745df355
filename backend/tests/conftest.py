"""Shared fixtures for engine tests."""
import pytest
from taipei.models.tile import Tile


TYPE_A = 1
TYPE_B = 2


def _make_tile(tile_id, x, y, z=0, tile_type=TYPE_A, hint=-1):
    """Build a visible tile."""
    return Tile(id=tile_id, x=x, y=y, z=z, tile_type=tile_type, hint=hint)


@pytest.fixture
def make_tile():
    """Factory for visible tiles: make_tile(id, x, y, z=0, tile_type=1, hint=-1)."""
    return _make_tile


@pytest.fixture
def four_tiles():
    """Two type-1 tiles on the top row, two type-2 tiles below, nothing stacked."""
    return [
        _make_tile(0, 0, 0, tile_type=TYPE_A, hint=1),
        _make_tile(1, 2, 0, tile_type=TYPE_A, hint=1),
        _make_tile(2, 0, 2, tile_type=TYPE_B, hint=2),
        _make_tile(3, 2, 2, tile_type=TYPE_B, hint=2),
    ]
