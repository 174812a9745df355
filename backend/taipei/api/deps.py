"""API dependencies."""
from fastapi import Depends, HTTPException

from ..core.engine import GameCore
from ..core.sessions import get_registry, GameRegistry


def get_game_registry() -> GameRegistry:
    """Dependency for the game registry."""
    return get_registry()


def get_game(
    game_id: str,
    registry: GameRegistry = Depends(get_game_registry),
) -> GameCore:
    """Dependency resolving a game id from the path, 404 if unknown."""
    game = registry.get(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail=f"Game not found: {game_id}")
    return game
