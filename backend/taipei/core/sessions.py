"""In-memory registry of running games for the HTTP layer."""
import logging
import uuid
from collections import OrderedDict
from typing import Optional, Sequence

from ..config import get_settings
from ..models.tile import Tile
from .engine import GameCore

logger = logging.getLogger(__name__)


class GameRegistry:
    """Keeps independently constructed GameCore instances keyed by game id."""

    def __init__(self, max_sessions: int = 256, search_bound: int = 72):
        self.max_sessions = max_sessions
        self.search_bound = search_bound
        self._games: "OrderedDict[str, GameCore]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._games)

    def create(self, tiles: Sequence[Tile]) -> tuple:
        """
        Start a new game from a laid-out tile sequence.

        Returns:
            Tuple of (game_id, GameCore).
        """
        game_id = uuid.uuid4().hex
        game = GameCore(tiles, search_bound=self.search_bound)
        self._games[game_id] = game
        logger.info("Created game %s with %d tiles", game_id, len(game.tiles))

        while len(self._games) > self.max_sessions:
            evicted, _ = self._games.popitem(last=False)
            logger.info("Evicted game %s (limit %d)", evicted, self.max_sessions)

        return game_id, game

    def get(self, game_id: str) -> Optional[GameCore]:
        return self._games.get(game_id)

    def remove(self, game_id: str) -> bool:
        if self._games.pop(game_id, None) is None:
            return False
        logger.info("Removed game %s", game_id)
        return True


_registry: Optional[GameRegistry] = None


def get_registry() -> GameRegistry:
    """Get or create registry singleton instance."""
    global _registry
    if _registry is None:
        settings = get_settings()
        _registry = GameRegistry(
            max_sessions=settings.max_sessions,
            search_bound=settings.search_bound,
        )
    return _registry
