"""Data models package.

This package contains the tile model, move outcomes and API schemas.
"""
from .tile import Tile
from .outcome import (
    OutcomeStatus,
    TilePair,
    MatchOutcome,
    describe_outcome,
    HINT_FOUND_MESSAGE,
    NO_HINT_MESSAGE,
)
from .schemas import (
    TileSpec,
    TileView,
    CreateGameRequest,
    SelectRequest,
    PairView,
    OutcomeView,
    GameStateResponse,
    MoveResponse,
    HintResponse,
    BoardTextResponse,
    ErrorResponse,
)

__all__ = [
    # Board models
    "Tile",
    "OutcomeStatus",
    "TilePair",
    "MatchOutcome",
    "describe_outcome",
    "HINT_FOUND_MESSAGE",
    "NO_HINT_MESSAGE",
    # API schemas
    "TileSpec",
    "TileView",
    "CreateGameRequest",
    "SelectRequest",
    "PairView",
    "OutcomeView",
    "GameStateResponse",
    "MoveResponse",
    "HintResponse",
    "BoardTextResponse",
    "ErrorResponse",
]
