# -*- coding: utf-8 -*-
"""
This module provides the move engine of the 2048 game.

It includes the immutable game state, the move directions, line merging and board transitions, tile spawning,
the terminal check and the legal directions query.
"""

from .direction import ACTION_ORDER, Direction, as_direction
from .gameboard import create_initial_state, make_rng, merge_line, move, slide_and_merge, spawn
from .gamemove import can_move, is_done, legal_directions, legal_directions_mask
from .state import GameState, MoveResult

__all__ = [
    "ACTION_ORDER",
    "Direction",
    "as_direction",
    "GameState",
    "MoveResult",
    "create_initial_state",
    "make_rng",
    "merge_line",
    "slide_and_merge",
    "spawn",
    "move",
    "can_move",
    "is_done",
    "legal_directions",
    "legal_directions_mask",
]
