# -*- coding: utf-8 -*-
"""
Game rules and board storage for a 2048-like game.

It includes the grid storage, the slide-and-merge resolution of a directional move, the terminal predicate and
the spawn policy choosing new tiles.
"""

from .gamemove import TRAILING_OFFSETS, Direction, MoveResult, is_terminal, legal_directions, line_starts, resolve
from .gridstate import GridState
from .spawn import SPAWN_VALUES, SpawnPolicy, SpawnResult

__all__ = [
    "Direction",
    "GridState",
    "MoveResult",
    "SpawnPolicy",
    "SpawnResult",
    "SPAWN_VALUES",
    "TRAILING_OFFSETS",
    "is_terminal",
    "legal_directions",
    "line_starts",
    "resolve",
]
