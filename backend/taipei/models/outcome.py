"""Move outcome structures returned by the game engine."""
from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum

from .tile import Tile


class OutcomeStatus(str, Enum):
    """Result of a player or auto-play action."""
    SELECTED = "selected"
    DESELECTED = "deselected"
    MATCHED = "matched"
    MISMATCH = "mismatch"
    BLOCKED = "blocked"
    UNDONE = "undone"
    NOTHING_TO_UNDO = "nothing_to_undo"


@dataclass
class TilePair:
    """Two tiles proposed or removed together."""
    first: Tile
    second: Tile

    def ids(self) -> tuple:
        return (self.first.id, self.second.id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"first": self.first.id, "second": self.second.id}


@dataclass
class MatchOutcome:
    """Outcome of select, remove_pair, auto_play_step or undo_last_move."""
    status: OutcomeStatus
    removed: Optional[TilePair] = None
    game_won: bool = False
    no_moves: bool = False
    auto_play: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "removed": self.removed.to_dict() if self.removed else None,
            "game_won": self.game_won,
            "no_moves": self.no_moves,
            "auto_play": self.auto_play,
        }


HINT_FOUND_MESSAGE = "Hint: matching pair highlighted."
NO_HINT_MESSAGE = "No hints available."

STATUS_MESSAGES = {
    OutcomeStatus.SELECTED: "Tile selected.",
    OutcomeStatus.DESELECTED: "Selection cleared.",
    OutcomeStatus.MISMATCH: "Tiles do not match.",
    OutcomeStatus.BLOCKED: "Tile is blocked.",
    OutcomeStatus.UNDONE: "Move undone.",
    OutcomeStatus.NOTHING_TO_UNDO: "Nothing to undo.",
}


def describe_outcome(outcome: MatchOutcome) -> str:
    """Return the status line shown to the player for an outcome."""
    if outcome.status == OutcomeStatus.MATCHED:
        if outcome.game_won:
            return "You cleared the board!"
        if outcome.no_moves:
            return "Tiles matched. No more moves available."
        return "Tiles matched."
    return STATUS_MESSAGES.get(outcome.status, "")
