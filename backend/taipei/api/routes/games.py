"""Game session API routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import (
    CreateGameRequest,
    SelectRequest,
    TileView,
    PairView,
    OutcomeView,
    GameStateResponse,
    MoveResponse,
    HintResponse,
    BoardTextResponse,
    ErrorResponse,
)
from ...models.outcome import (
    MatchOutcome,
    describe_outcome,
    HINT_FOUND_MESSAGE,
    NO_HINT_MESSAGE,
)
from ...core.engine import GameCore
from ...core.sessions import GameRegistry
from ...utils.helpers import (
    validate_tile_layout,
    format_board_for_display,
    extract_board_statistics,
)
from ..deps import get_game, get_game_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/games", tags=["games"])


def _build_state(game_id: str, game: GameCore) -> GameStateResponse:
    """Snapshot the board for the presentation layer."""
    tiles = [
        TileView(**tile.to_dict(), free=tile.visible and game.is_free(tile))
        for tile in game.tiles
    ]
    selected = game.selected_tile
    return GameStateResponse(
        game_id=game_id,
        step_back=game.step_back,
        selected_tile_id=selected.id if selected else None,
        visible_count=game.visible_count,
        won=game.is_won,
        tiles=tiles,
    )


def _build_move(game_id: str, game: GameCore, outcome: MatchOutcome) -> MoveResponse:
    return MoveResponse(
        outcome=OutcomeView(**outcome.to_dict()),
        message=describe_outcome(outcome),
        state=_build_state(game_id, game),
    )


@router.post(
    "",
    response_model=GameStateResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_game(
    request: CreateGameRequest,
    registry: GameRegistry = Depends(get_game_registry),
) -> GameStateResponse:
    """
    Start a game from a laid-out tile set.

    Args:
        request: CreateGameRequest with tiles in board order.
        registry: GameRegistry dependency.

    Returns:
        GameStateResponse for the new game.
    """
    tiles = [spec.to_tile() for spec in request.tiles]
    is_valid, error = validate_tile_layout(tiles)
    if not is_valid:
        raise HTTPException(status_code=400, detail=f"Invalid layout: {error}")

    game_id, game = registry.create(tiles)
    return _build_state(game_id, game)


@router.get(
    "/{game_id}",
    response_model=GameStateResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_game_state(
    game_id: str,
    game: GameCore = Depends(get_game),
) -> GameStateResponse:
    """Return the current board state."""
    return _build_state(game_id, game)


@router.delete(
    "/{game_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
async def delete_game(
    game_id: str,
    registry: GameRegistry = Depends(get_game_registry),
) -> None:
    """Drop a game session."""
    if not registry.remove(game_id):
        raise HTTPException(status_code=404, detail=f"Game not found: {game_id}")


@router.post(
    "/{game_id}/select",
    response_model=MoveResponse,
    responses={404: {"model": ErrorResponse}},
)
async def select_tile(
    game_id: str,
    request: SelectRequest,
    game: GameCore = Depends(get_game),
) -> MoveResponse:
    """
    Apply a player pick.

    Args:
        game_id: Game session id.
        request: SelectRequest with the picked tile id.
        game: GameCore dependency.

    Returns:
        MoveResponse with the outcome and updated state.
    """
    tile = game.get_tile_by_id(request.tile_id)
    if tile is None:
        raise HTTPException(status_code=404, detail=f"Tile not found: {request.tile_id}")

    outcome = game.select(tile)
    return _build_move(game_id, game, outcome)


@router.post(
    "/{game_id}/hint",
    response_model=HintResponse,
    responses={404: {"model": ErrorResponse}},
)
async def next_hint(
    game_id: str,
    game: GameCore = Depends(get_game),
) -> HintResponse:
    """Return the next matching pair in the hint rotation."""
    pair = game.next_hint_pair()
    if pair is None:
        return HintResponse(pair=None, message=NO_HINT_MESSAGE)
    return HintResponse(
        pair=PairView(first=pair.first.id, second=pair.second.id),
        message=HINT_FOUND_MESSAGE,
    )


@router.post(
    "/{game_id}/autoplay",
    response_model=MoveResponse,
    responses={404: {"model": ErrorResponse}},
)
async def auto_play_step(
    game_id: str,
    game: GameCore = Depends(get_game),
) -> MoveResponse:
    """Let auto-play remove one pair."""
    outcome = game.auto_play_step()
    if outcome.game_won:
        logger.info("Auto-play cleared game %s", game_id)
    return _build_move(game_id, game, outcome)


@router.post(
    "/{game_id}/undo",
    response_model=MoveResponse,
    responses={404: {"model": ErrorResponse}},
)
async def undo_move(
    game_id: str,
    game: GameCore = Depends(get_game),
) -> MoveResponse:
    """Undo the most recent match."""
    outcome = game.undo_last_move()
    return _build_move(game_id, game, outcome)


@router.get(
    "/{game_id}/board",
    response_model=BoardTextResponse,
    responses={404: {"model": ErrorResponse}},
)
async def board_text(
    game_id: str,
    game: GameCore = Depends(get_game),
) -> BoardTextResponse:
    """Text rendering of the visible board with tile statistics."""
    return BoardTextResponse(
        text=format_board_for_display(game.tiles),
        statistics=extract_board_statistics(game.tiles),
    )
