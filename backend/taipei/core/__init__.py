"""Core rules engine package.

This package contains occupancy queries, the selection state machine,
the hint cycle and the auto-play solver.
"""
from .occupancy import OccupancyResolver
from .hint import HintCycle, DEFAULT_SEARCH_BOUND
from .autoplay import AutoPlaySolver
from .engine import GameCore
from .sessions import GameRegistry, get_registry

__all__ = [
    "OccupancyResolver",
    "HintCycle",
    "DEFAULT_SEARCH_BOUND",
    "AutoPlaySolver",
    "GameCore",
    "GameRegistry",
    "get_registry",
]
