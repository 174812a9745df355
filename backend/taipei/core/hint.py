"""Hint cycle: rotates through free matching pairs across repeated requests."""
from typing import Dict, Optional, Sequence

from ..models.outcome import TilePair
from ..models.tile import Tile
from .occupancy import OccupancyResolver


DEFAULT_SEARCH_BOUND = 72


class HintCycle:
    """
    Stateful cursor over the board's free matching pairs.

    The cursor is a (main, secondary) pair of tile ids. Each request emits
    the current pair and moves the secondary cursor to the next tile of the
    main tile's type; once the main tile has no partners left the main
    cursor moves on. When the scan runs off the end of the board the cursor
    is cleared so the next request starts again from the first pair.
    """

    def __init__(
        self,
        tiles: Sequence[Tile],
        index: Dict[int, int],
        resolver: OccupancyResolver,
        search_bound: int = DEFAULT_SEARCH_BOUND,
    ):
        self._tiles = tiles
        self._index = index
        self._resolver = resolver
        self.search_bound = search_bound
        self.main_id: Optional[int] = None
        self.second_id: Optional[int] = None

    def reset(self) -> None:
        """Forget rotation progress; the next request starts from the top."""
        self.main_id = None
        self.second_id = None

    def _resolve(self, tile_id: Optional[int]) -> Optional[Tile]:
        if tile_id is None:
            return None
        position = self._index.get(tile_id)
        if position is None:
            return None
        return self._tiles[position]

    def _following(self, tile: Optional[Tile]) -> Optional[Tile]:
        """Tile right after `tile` in board order, None at the end."""
        if tile is None:
            return None
        position = self._index[tile.id] + 1
        if position >= len(self._tiles):
            return None
        return self._tiles[position]

    @property
    def main(self) -> Optional[Tile]:
        return self._resolve(self.main_id)

    @property
    def secondary(self) -> Optional[Tile]:
        return self._resolve(self.second_id)

    def next_free_from(
        self, tile: Optional[Tile], type_filter: Optional[int] = None
    ) -> Optional[Tile]:
        """
        Walk forward from `tile` (inclusive) to the first visible free tile.

        Args:
            tile: Where to start; None yields None.
            type_filter: Only accept tiles of this type. None accepts any.

        Returns:
            The first matching tile before the end of the board, or None.
        """
        if tile is None:
            return None

        for candidate in self._tiles[self._index[tile.id]:]:
            if not candidate.visible:
                continue
            if type_filter is not None and candidate.tile_type != type_filter:
                continue
            if self._resolver.is_free(candidate):
                return candidate
        return None

    def _seed(self) -> None:
        first = self._tiles[0] if self._tiles else None
        seeded = self.next_free_from(first)
        self.main_id = seeded.id if seeded else None
        self.second_id = None
        if seeded is not None:
            partner = self.next_free_from(self._following(seeded), seeded.tile_type)
            self.second_id = partner.id if partner else None

    def _advance(self) -> Optional[TilePair]:
        main = self.main
        secondary = self.secondary
        if main is None:
            return None

        found: Optional[TilePair] = None
        steps = 0
        while True:
            steps += 1
            if secondary is not None:
                found = TilePair(first=main, second=secondary)
                secondary = self.next_free_from(self._following(secondary), main.tile_type)
                keep_going = False
            else:
                main = self.next_free_from(self._following(main))
                keep_going = main is not None
                if main is not None:
                    secondary = self.next_free_from(self._following(main), main.tile_type)

            if not keep_going or steps > self.search_bound or found is not None:
                break

        self.main_id = main.id if main else None
        self.second_id = secondary.id if secondary else None
        return found

    def next_hint_pair(self) -> Optional[TilePair]:
        """
        Return the next free matching pair in the rotation.

        When the rotation runs off the end of the board it wraps back to the
        earliest pair within the same request.

        Returns:
            A TilePair, or None when no pair is reachable within the search
            bound.
        """
        seeded = self.main_id is None
        if seeded:
            self._seed()

        found = self._advance()
        if found is None and not seeded and self.main_id is None:
            self._seed()
            found = self._advance()
        return found
