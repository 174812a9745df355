"""Occupancy queries over a fixed tile sequence.

Answers "which tile sits at this cell" and "can this tile be picked up".
Tiles occupy a 2x2 footprint, so a neighbour check at a cell has to look at
every origin whose footprint overlaps it.
"""
from typing import Dict, List, Optional, Sequence, Tuple

from ..models.tile import Tile


# Origins whose 2x2 footprint covers cell (x, y), relative to that cell
FOOTPRINT_ORIGINS: List[Tuple[int, int]] = [(0, 0), (-1, 0), (0, -1), (-1, -1)]


class OccupancyResolver:
    """Cell lookups and free-tile checks for one board."""

    def __init__(self, tiles: Sequence[Tile]):
        # Coordinates never change after creation, so the cell index is
        # built once. The first tile in sequence order wins a shared cell.
        self._cells: Dict[Tuple[int, int, int], Tile] = {}
        for tile in tiles:
            self._cells.setdefault(tile.position, tile)

    def locate(
        self,
        x: int,
        y: int,
        z: int,
        exact_position: bool = True,
        exact_layer: bool = True,
    ) -> Optional[Tile]:
        """
        Find a tile at or near a cell, regardless of visibility.

        Args:
            x, y, z: Cell to look up.
            exact_position: Only match tiles whose origin is exactly (x, y).
                Otherwise any tile whose footprint covers the cell matches.
            exact_layer: Only look at layer z when exact_position is set.
                Footprint lookups always scan from z down to 0.

        Returns:
            The first tile found, or None.
        """
        if exact_position and exact_layer:
            return self._cells.get((x, y, z))

        for layer in range(z, -1, -1):
            if exact_position:
                tile = self._cells.get((x, y, layer))
                if tile is not None:
                    return tile
                continue

            for dx, dy in FOOTPRINT_ORIGINS:
                tile = self._cells.get((x + dx, y + dy, layer))
                if tile is not None:
                    return tile

        return None

    def _visible_at(self, x: int, y: int, z: int) -> bool:
        """Check whether a visible tile on layer z covers cell (x, y)."""
        for dx, dy in FOOTPRINT_ORIGINS:
            tile = self._cells.get((x + dx, y + dy, z))
            if tile is not None:
                return tile.visible
        return False

    def is_free(self, tile: Tile) -> bool:
        """
        Check whether a tile can be picked up.

        A tile is boxed in when visible tiles touch both its left and its
        right edge on the same layer. Otherwise it is free unless a visible
        tile on the layer above overlaps its footprint.
        """
        x, y, z = tile.position

        left_blocked = self._visible_at(x - 1, y, z) or self._visible_at(x - 1, y + 1, z)
        right_blocked = self._visible_at(x + 2, y, z) or self._visible_at(x + 2, y + 1, z)
        if left_blocked and right_blocked:
            return False

        covered = (
            self._visible_at(x, y, z + 1)
            or self._visible_at(x + 1, y, z + 1)
            or self._visible_at(x, y + 1, z + 1)
            or self._visible_at(x + 1, y + 1, z + 1)
        )
        return not covered
