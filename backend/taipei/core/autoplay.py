"""Auto-play solver: picks the next pair to remove from precomputed ranks."""
import logging
from typing import Optional, Sequence

from ..models.outcome import TilePair
from ..models.tile import Tile
from .hint import DEFAULT_SEARCH_BOUND
from .occupancy import OccupancyResolver

logger = logging.getLogger(__name__)


class AutoPlaySolver:
    """
    Priority search over the per-tile solve rank (`Tile.hint`).

    The lowest-ranked free tile above the current floor is chosen first and
    paired with a free tile of the same rank, or failing that with any free
    tile of the same type. If neither exists the floor is raised past the
    failed rank and the search repeats, up to `search_bound` times.
    """

    def __init__(
        self,
        tiles: Sequence[Tile],
        resolver: OccupancyResolver,
        search_bound: int = DEFAULT_SEARCH_BOUND,
    ):
        self._tiles = tiles
        self._resolver = resolver
        self.search_bound = search_bound

    def _playable(self, tile: Tile) -> bool:
        return tile.visible and self._resolver.is_free(tile)

    def _lowest_ranked(self, floor: int, ceiling: int) -> Optional[Tile]:
        """First free tile with the smallest rank in (floor, ceiling]."""
        best: Optional[Tile] = None
        for tile in self._tiles:
            if not floor < tile.hint <= ceiling:
                continue
            if best is not None and tile.hint >= best.hint:
                continue
            if self._playable(tile):
                best = tile
        return best

    def _partner_for(self, selected: Tile) -> Optional[Tile]:
        # Same rank first
        for tile in self._tiles:
            if tile.hint == selected.hint and tile.id != selected.id and self._playable(tile):
                return tile

        # Any free tile of the same type; same-rank tiles were covered above
        for tile in self._tiles:
            if (
                tile.hint != selected.hint
                and tile.tile_type == selected.tile_type
                and self._playable(tile)
            ):
                return tile
        return None

    def next_pair(self) -> Optional[TilePair]:
        """
        Find the next pair auto-play should remove.

        Returns:
            TilePair of (ranked tile, partner), or None when the board is clear,
            fully blocked, or the retry budget runs out.
        """
        floor = 0
        retries = self.search_bound

        while retries > 0:
            selected = self._lowest_ranked(floor, self.search_bound)
            if selected is None:
                return None

            partner = self._partner_for(selected)
            if partner is not None:
                return TilePair(first=selected, second=partner)

            floor = selected.hint
            retries -= 1

        logger.debug("Auto-play gave up after %d retries", self.search_bound)
        return None
