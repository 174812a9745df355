"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional

from .tile import Tile


class TileSpec(BaseModel):
    """A laid-out tile supplied by the layout generator."""
    id: int = Field(..., description="Unique tile id")
    x: int = Field(..., ge=0, description="Column of the footprint origin")
    y: int = Field(..., ge=0, description="Row of the footprint origin")
    z: int = Field(..., ge=0, description="Layer")
    tile_type: int = Field(..., ge=0, description="Match category")
    graph: int = Field(default=-1, description="Cosmetic grouping")
    hint: int = Field(default=-1, description="Solve rank used by auto-play")

    def to_tile(self) -> Tile:
        return Tile(
            id=self.id,
            x=self.x,
            y=self.y,
            z=self.z,
            tile_type=self.tile_type,
            graph=self.graph,
            hint=self.hint,
        )


class TileView(BaseModel):
    """Tile as reported back to the presentation layer."""
    id: int
    x: int
    y: int
    z: int
    tile_type: int
    graph: int
    step: int
    hint: int
    visible: bool
    selected: bool
    free: bool = Field(..., description="Whether the tile can be picked right now")


class CreateGameRequest(BaseModel):
    """Request schema for starting a game."""
    tiles: List[TileSpec] = Field(..., min_length=1, description="Tiles in board order")


class SelectRequest(BaseModel):
    """Request schema for picking a tile."""
    tile_id: int = Field(..., description="Id of the tile the player picked")


class PairView(BaseModel):
    """Pair of tile ids."""
    first: int
    second: int


class OutcomeView(BaseModel):
    """Outcome of a move."""
    status: str = Field(..., description="selected/deselected/matched/mismatch/blocked/undone/nothing_to_undo")
    removed: Optional[PairView] = Field(default=None, description="Removed pair for matched outcomes")
    game_won: bool = False
    no_moves: bool = False
    auto_play: bool = False


class GameStateResponse(BaseModel):
    """Response schema for board state."""
    game_id: str
    step_back: int = Field(..., ge=0, description="Number of match steps that can be undone")
    selected_tile_id: Optional[int] = None
    visible_count: int
    won: bool
    tiles: List[TileView] = Field(default=[], description="Tiles in board order")


class MoveResponse(BaseModel):
    """Response schema for select, autoplay and undo."""
    outcome: OutcomeView
    message: str = Field(default="", description="Status line for the player")
    state: GameStateResponse


class HintResponse(BaseModel):
    """Response schema for hint requests."""
    pair: Optional[PairView] = None
    message: str = ""


class BoardTextResponse(BaseModel):
    """Response schema for the text board view."""
    text: str
    statistics: Dict[str, Any] = Field(default={}, description="Per-layer and per-type counts")


class ErrorResponse(BaseModel):
    """Error response schema."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Detailed error information")
