"""Tile data model."""
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass
class Tile:
    """
    One physical piece on the board.

    Tiles are produced by the layout generator and live for the whole game.
    Coordinates never change; play state (visibility, selection, step) is
    mutated by the engine. Each tile covers a 2x2 footprint starting at
    (x, y) on layer z.
    """
    id: int
    x: int
    y: int
    z: int
    tile_type: int = 0
    graph: int = -1    # cosmetic grouping, ignored by gameplay
    step: int = -1     # match step that removed the tile, -1 while in play
    hint: int = -1     # solve rank used by auto-play
    visible: bool = True
    selected: bool = False

    @property
    def position(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def matches(self, other: "Tile") -> bool:
        """Two tiles match when they share a type and are not the same tile."""
        return self.tile_type == other.tile_type and self.id != other.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "tile_type": self.tile_type,
            "graph": self.graph,
            "step": self.step,
            "hint": self.hint,
            "visible": self.visible,
            "selected": self.selected,
        }
