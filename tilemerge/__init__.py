# -*- coding: utf-8 -*-
"""
Tile-merging grid puzzle of the 2048 family: an immutable move engine and a stateful environment around it.
"""

from .core import Direction, GameState, MoveResult, can_move, create_initial_state, move, spawn

__all__ = ["Direction", "GameState", "MoveResult", "create_initial_state", "move", "spawn", "can_move"]
