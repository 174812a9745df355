"""Game engine: board state, selection state machine, matching and undo."""
import logging
from typing import Dict, List, Optional, Sequence

from ..models.outcome import MatchOutcome, OutcomeStatus, TilePair
from ..models.tile import Tile
from .autoplay import AutoPlaySolver
from .hint import DEFAULT_SEARCH_BOUND, HintCycle
from .occupancy import OccupancyResolver

logger = logging.getLogger(__name__)


class GameCore:
    """
    Rules engine for one layered tile-matching board.

    Constructed from an already laid-out tile sequence. The sequence order is
    fixed and defines scan order for hints and auto-play. All play state lives
    on the tiles plus the current selection and the step counter used for
    undo.
    """

    def __init__(self, tiles: Sequence[Tile], search_bound: int = DEFAULT_SEARCH_BOUND):
        self._tiles: List[Tile] = list(tiles)
        self._index: Dict[int, int] = {}
        self.selected_tile: Optional[Tile] = None
        self.step_back = 0
        self.search_bound = search_bound

        self._link_tiles()
        self.occupancy = OccupancyResolver(self._tiles)
        self.hints = HintCycle(self._tiles, self._index, self.occupancy, search_bound)
        self.solver = AutoPlaySolver(self._tiles, self.occupancy, search_bound)

    def _link_tiles(self) -> None:
        self._index.clear()
        for position, tile in enumerate(self._tiles):
            self._index[tile.id] = position

    # ===== read-only board access =====

    @property
    def tiles(self) -> tuple:
        return tuple(self._tiles)

    @property
    def hint_loop_main(self) -> Optional[Tile]:
        return self.hints.main

    @property
    def hint_loop_second(self) -> Optional[Tile]:
        return self.hints.secondary

    def get_tile_by_id(self, tile_id: int) -> Optional[Tile]:
        position = self._index.get(tile_id)
        if position is None:
            return None
        return self._tiles[position]

    def next_tile(self, tile: Tile) -> Optional[Tile]:
        """Tile following `tile` in board order, None for the last one."""
        position = self._index[tile.id] + 1
        if position >= len(self._tiles):
            return None
        return self._tiles[position]

    @property
    def visible_count(self) -> int:
        return sum(1 for tile in self._tiles if tile.visible)

    @property
    def is_won(self) -> bool:
        return not any(tile.visible for tile in self._tiles)

    # ===== occupancy =====

    def locate(
        self,
        x: int,
        y: int,
        z: int,
        exact_position: bool = True,
        exact_layer: bool = True,
    ) -> Optional[Tile]:
        return self.occupancy.locate(x, y, z, exact_position, exact_layer)

    def is_free(self, tile: Tile) -> bool:
        return self.occupancy.is_free(tile)

    def has_any_free_matches(self) -> bool:
        """Check whether any two distinct visible free tiles share a type."""
        for tile in self._tiles:
            if not tile.visible or not self.is_free(tile):
                continue
            for other in self._tiles:
                if (
                    other.visible
                    and tile.matches(other)
                    and self.is_free(other)
                ):
                    return True
        return False

    # ===== selection state machine =====

    def select(self, tile: Tile) -> MatchOutcome:
        """
        Apply a player pick.

        Args:
            tile: The tile the player clicked.

        Returns:
            MatchOutcome with status blocked, selected, deselected, mismatch,
            or matched (when the pick completes a pair).
        """
        if not tile.visible or not self.is_free(tile):
            return MatchOutcome(status=OutcomeStatus.BLOCKED)

        current = self.selected_tile
        if current is None:
            tile.selected = True
            self.selected_tile = tile
            return MatchOutcome(status=OutcomeStatus.SELECTED)

        if current.id == tile.id:
            tile.selected = False
            self.selected_tile = None
            return MatchOutcome(status=OutcomeStatus.DESELECTED)

        if tile.tile_type == current.tile_type:
            return self.remove_pair(tile, current, auto_play=False)

        return MatchOutcome(status=OutcomeStatus.MISMATCH)

    def remove_pair(self, first: Tile, second: Tile, auto_play: bool = False) -> MatchOutcome:
        """
        Take a pair off the board and record it as one undo step.

        Args:
            first: One tile of the pair.
            second: The other tile.
            auto_play: Whether auto-play made the move. Reported back only.

        Returns:
            MatchOutcome with status matched, game_won and no_moves.
        """
        for tile in (first, second):
            tile.visible = False
            tile.selected = False
            tile.step = self.step_back

        if self.selected_tile is not None:
            self.selected_tile.selected = False
        self.selected_tile = None
        self.step_back += 1
        self.hints.reset()

        logger.debug(
            "Removed tiles %d and %d at step %d", first.id, second.id, self.step_back - 1
        )

        removed = TilePair(first=first, second=second)
        if self.is_won:
            return MatchOutcome(
                status=OutcomeStatus.MATCHED,
                removed=removed,
                game_won=True,
                auto_play=auto_play,
            )

        return MatchOutcome(
            status=OutcomeStatus.MATCHED,
            removed=removed,
            game_won=False,
            no_moves=not self.has_any_free_matches(),
            auto_play=auto_play,
        )

    def undo_last_move(self) -> MatchOutcome:
        """Restore the tiles removed by the most recent match step."""
        if self.step_back <= 0:
            return MatchOutcome(status=OutcomeStatus.NOTHING_TO_UNDO)

        self.step_back -= 1
        restored = 0
        for tile in self._tiles:
            if tile.step == self.step_back:
                tile.step = -1
                tile.visible = True
                tile.selected = False
                restored += 1

        if self.selected_tile is not None:
            self.selected_tile.selected = False
        self.selected_tile = None
        self.hints.reset()

        logger.debug("Undid step %d, restored %d tiles", self.step_back, restored)
        return MatchOutcome(status=OutcomeStatus.UNDONE)

    # ===== hints and auto-play =====

    def next_free_from(self, tile: Optional[Tile], type_filter: Optional[int] = None) -> Optional[Tile]:
        return self.hints.next_free_from(tile, type_filter)

    def next_hint_pair(self) -> Optional[TilePair]:
        return self.hints.next_hint_pair()

    def next_auto_play_pair(self) -> Optional[TilePair]:
        return self.solver.next_pair()

    def auto_play_step(self) -> MatchOutcome:
        """Remove the pair auto-play picks, or report blocked if there is none."""
        pair = self.next_auto_play_pair()
        if pair is None:
            return MatchOutcome(status=OutcomeStatus.BLOCKED, auto_play=True)
        return self.remove_pair(pair.first, pair.second, auto_play=True)
