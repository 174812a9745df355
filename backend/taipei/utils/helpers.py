"""Utility helper functions."""
from typing import Dict, Any, List, Optional, Sequence, Set, Tuple

from ..models.tile import Tile


def validate_tile_layout(tiles: Sequence[Tile]) -> Tuple[bool, Optional[str]]:
    """
    Validate a tile layout before it is handed to the engine.

    Only structural problems are reported. Whether the types pair up or the
    board is solvable is the layout generator's business.

    Args:
        tiles: Tile sequence to validate.

    Returns:
        Tuple of (is_valid, error_message).
    """
    seen_ids: Set[int] = set()
    seen_cells: Set[Tuple[int, int, int]] = set()

    for tile in tiles:
        if tile.id in seen_ids:
            return False, f"Duplicate tile id: {tile.id}"
        seen_ids.add(tile.id)

        if tile.x < 0 or tile.y < 0 or tile.z < 0:
            return False, f"Tile {tile.id} has negative coordinates {tile.position}"

        if tile.tile_type < 0:
            return False, f"Tile {tile.id} has negative type {tile.tile_type}"

        if tile.position in seen_cells:
            return False, f"Two tiles share cell {tile.position}"
        seen_cells.add(tile.position)

    return True, None


def format_board_for_display(tiles: Sequence[Tile]) -> str:
    """
    Format the visible board as text, top layer first.

    Each tile is drawn at its origin cell as its type number; the rest of
    its 2x2 footprint is left as dots.

    Args:
        tiles: Tile sequence to draw.

    Returns:
        Formatted string representation.
    """
    visible = [tile for tile in tiles if tile.visible]
    lines = [f"Board with {len(visible)} visible tiles:"]
    lines.append("-" * 40)

    if not visible:
        return "\n".join(lines)

    cols = max(tile.x for tile in visible) + 2
    rows = max(tile.y for tile in visible) + 2
    top = max(tile.z for tile in visible)

    for z in range(top, -1, -1):  # Top to bottom
        layer = [tile for tile in visible if tile.z == z]
        if not layer:
            continue

        lines.append(f"\nLayer {z} ({len(layer)} tiles):")
        grid = [[" ." for _ in range(cols)] for _ in range(rows)]
        for tile in layer:
            grid[tile.y][tile.x] = f"{tile.tile_type:>2}"[-2:]

        for row in grid:
            lines.append("  " + " ".join(row))

    return "\n".join(lines)


def extract_board_statistics(tiles: Sequence[Tile]) -> Dict[str, Any]:
    """
    Extract tile statistics from a board.

    Args:
        tiles: Tile sequence to analyze.

    Returns:
        Dictionary with counts per layer and per type for visible tiles,
        plus types that currently have an odd number of visible tiles.
    """
    stats: Dict[str, Any] = {
        "total_tiles": len(tiles),
        "visible_tiles": 0,
        "tiles_per_layer": {},
        "tile_types": {},
        "unpaired_types": [],
    }

    for tile in tiles:
        if not tile.visible:
            continue
        stats["visible_tiles"] += 1

        layer_key = f"layer_{tile.z}"
        stats["tiles_per_layer"][layer_key] = stats["tiles_per_layer"].get(layer_key, 0) + 1

        type_key = str(tile.tile_type)
        stats["tile_types"][type_key] = stats["tile_types"].get(type_key, 0) + 1

    unpaired: List[int] = sorted(
        int(type_key) for type_key, count in stats["tile_types"].items() if count % 2
    )
    stats["unpaired_types"] = unpaired

    return stats
