# -*- coding: utf-8 -*-
"""
Play seeded random games of 2048 and report the distribution of the maximum tile reached.
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from typing import Optional, Sequence

from numpy.random import Generator
from tqdm import trange

from tilemerge.config import SimulationConfiguration
from tilemerge.core import GameState, create_initial_state, legal_directions, make_rng, move

_logger = logging.getLogger(__name__)


def play_random_game(size: int, rng: Generator) -> GameState:
    """
    Play a full game choosing uniformly among the legal directions.

    Parameters
    ----------
    size : int
        The size of the square grid.
    rng : Generator
        Random source for both the player and the tile spawner.

    Returns
    -------
    GameState
        The final, terminal state.
    """
    state = create_initial_state(size=size, rng=rng)
    while not state.over:
        directions = legal_directions(state)
        direction = directions[rng.integers(len(directions))]
        state = move(state, direction, rng=rng).state
    return state


def simulate(config: SimulationConfiguration) -> tuple[dict[int, int], float]:
    """
    Play a batch of random games.

    Parameters
    ----------
    config : SimulationConfiguration
        Number of games, board size and seed.

    Returns
    -------
    tuple[dict[int, int], float]
        The frequency of each maximum tile and the mean final score.
    """
    rng = make_rng(config.seed)
    max_tiles, scores = [], []

    with trange(config.games) as period:
        for num in period:
            state = play_random_game(config.size, rng)

            # ##: Save max cells.
            max_tiles.append(int(state.board.max()))
            scores.append(state.score)

            # ##: Log.
            period.set_description(f"Simulation: {num + 1}")
            period.set_postfix(score=state.score, max=max_tiles[-1])

    frequency = dict(sorted(Counter(max_tiles).items()))
    mean_score = sum(scores) / len(scores) if scores else 0.0
    _logger.info('Played %d games of size %d: mean score %.1f', config.games, config.size, mean_score)
    return frequency, mean_score


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Command line entry point."""
    parser = ArgumentParser(description="Play random 2048 games")
    parser.add_argument("--games", help="Number of games to play", type=int, default=10)
    parser.add_argument("--size", help="Size of the square board", type=int, default=4)
    parser.add_argument("--seed", help="Random seed", type=int, default=None)
    parser.add_argument("--log-level", help="Logging level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    frequency, mean_score = simulate(SimulationConfiguration(games=args.games, size=args.size, seed=args.seed))
    print(f"Max tiles: {frequency}, mean score: {mean_score:.1f}")


if __name__ == "__main__":
    main()
