"""
Core functionality for playing the 2048 game: line merging, board transitions and tile spawning.
"""

import logging
from typing import Optional, Union

from numpy import argwhere, array_equal, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator

from tilemerge.config import DEFAULT_SIZE, INITIAL_TILES, TILE_SPAWN_PROBS, WIN_TILE
from tilemerge.core.direction import Direction, as_direction
from tilemerge.core.state import GameState, MoveResult

_logger = logging.getLogger(__name__)

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


def make_rng(seed: Optional[int] = None) -> Generator:
    """
    Create the random source used to spawn tiles.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducibility. A fresh entropy-seeded generator is returned when omitted.

    Returns
    -------
    Generator
        A generator backed by ``PCG64DXSM``.
    """
    return Generator(PCG64DXSM(seed))


def _oriented(board: ndarray, direction: Direction) -> ndarray:
    """
    View the board as lines along which tiles travel toward index 0.

    The returned array is a view: writing a line into it writes the cells back at their original position.
    """
    lines = board.T if direction.axis == 1 else board
    return lines[:, ::-1] if direction.reverse else lines


def merge_line(line: ndarray) -> tuple[int, ndarray, bool]:
    """
    Slide a line toward index 0 and merge adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column, oriented so that tiles travel toward index 0.

    Returns
    -------
    gained : int
        The sum of the tiles created by merges.
    merged_line : ndarray
        The new line, padded with empty cells at the far end.
    moved : bool
        Whether the new line differs from the input.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each value can only be merged once per call: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    non_zero = line[line != 0]
    result = zeros(len(line), dtype=line.dtype)
    gained = 0

    # ##: Iterate over the compacted line and merge pairs.
    i, j = 0, 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result[j] = merged
            gained += merged
            i += 2
        else:
            result[j] = non_zero[i]
            i += 1
        j += 1

    return gained, result, not array_equal(result, line)


def slide_and_merge(board: ndarray, direction: Union[Direction, str, int]) -> tuple[int, ndarray, bool]:
    """
    Apply a direction to a board without spawning any tile.

    Parameters
    ----------
    board : ndarray
        The game board. It is not modified.
    direction : Direction, str or int
        The direction to push the tiles toward.

    Returns
    -------
    gained : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging.
    moved : bool
        Whether any line changed.
    """
    direction = as_direction(direction)
    updated_board = board.copy()
    lines = _oriented(updated_board, direction)

    gained, moved = 0, False
    for index, line in enumerate(lines):
        line_gained, merged_line, line_moved = merge_line(line)
        if line_moved:
            lines[index] = merged_line
            gained += line_gained
            moved = True

    return gained, updated_board, moved


def spawn(state: GameState, number_tile: int = 1, rng: Optional[Generator] = None) -> GameState:
    """
    Fill empty cells with new tiles (2 or 4).

    Parameters
    ----------
    state : GameState
        The current state. It is not modified.
    number_tile : int, optional
        Number of new tiles to add (default is 1).
    rng : Generator, optional
        Random source. A fresh unseeded generator is used when omitted.

    Returns
    -------
    GameState
        A new state with the tiles added.

    Raises
    ------
    ValueError
        If ``number_tile`` is negative.

    Notes
    -----
    - Cells are chosen uniformly among empty cells, without replacement.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - If there are fewer empty cells than requested, it fills all available cells.
    """
    if number_tile < 0:
        raise ValueError(f'number_tile must be >= 0, got {number_tile}')
    rng = rng if rng is not None else make_rng()

    available_cells = argwhere(state.board == 0)
    count = min(number_tile, len(available_cells))
    if count == 0:
        if number_tile:
            _logger.debug('No empty cell left, skipping spawn of %d tile(s)', number_tile)
        return state

    # ##: Randomly choose cell positions and values.
    chosen_indices = rng.choice(len(available_cells), size=count, replace=False)
    values = rng.choice(_TILE_VALUES, size=count, p=_TILE_PROBS)

    board = state.board.copy()
    board[tuple(available_cells[chosen_indices].T)] = values
    return GameState(board=board, score=state.score, won=state.won)


def create_initial_state(size: int = DEFAULT_SIZE, rng: Optional[Generator] = None) -> GameState:
    """
    Create a fresh game with two random tiles.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).
    rng : Generator, optional
        Random source used to place the initial tiles.

    Returns
    -------
    GameState
        The new state, with a zero score.

    Raises
    ------
    ValueError
        If ``size`` is not positive.
    """
    if size < 1:
        raise ValueError(f'Board size must be positive, got {size}')
    empty = GameState(board=zeros((size, size), dtype=int64))
    return spawn(empty, number_tile=INITIAL_TILES, rng=rng)


def move(state: GameState, direction: Union[Direction, str, int], rng: Optional[Generator] = None) -> MoveResult:
    """
    Compute the next state after applying a direction.

    Parameters
    ----------
    state : GameState
        The current state. It is not modified.
    direction : Direction, str or int
        The direction to push the tiles toward.
    rng : Generator, optional
        Random source used to spawn the new tile.

    Returns
    -------
    MoveResult
        The new state, the score gained and whether anything moved.

    Raises
    ------
    ValueError
        If ``direction`` is not one of the four directions.

    Notes
    -----
    - If the move changes nothing, the input state is returned as is: no tile is added and the score is kept.
    - Otherwise the score grows by the merged values, the win flag is updated and one new tile is added.
    """
    direction = as_direction(direction)
    gained, board, moved = slide_and_merge(state.board, direction)
    if not moved:
        _logger.debug('Move %s left the board unchanged', direction.value)
        return MoveResult(state=state, gained=0, moved=False)

    won = state.won or bool(board.max() >= WIN_TILE)
    merged = GameState(board=board, score=state.score + gained, won=won)
    return MoveResult(state=spawn(merged, number_tile=1, rng=rng), gained=gained, moved=True)
