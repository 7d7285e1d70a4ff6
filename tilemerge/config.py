# -*- coding: utf-8 -*-
"""
Game rules and run configuration for this project.
"""
from dataclasses import dataclass
from typing import Optional

# ##>: Default edge length of the square board.
DEFAULT_SIZE = 4

# ##>: Number of tiles placed on a fresh board.
INITIAL_TILES = 2

# ##>: First tile value that marks the game as won.
WIN_TILE = 2048

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


@dataclass
class SimulationConfiguration:
    """
    Configuration of a batch of simulated games.
    """

    games: int = 10
    size: int = DEFAULT_SIZE
    seed: Optional[int] = None
