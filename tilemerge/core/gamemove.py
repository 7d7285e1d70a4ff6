"""
Game move utilities for the 2048 game, providing the terminal check and the set of directions that would
change the board.
"""

from typing import TYPE_CHECKING, Union

from numpy import asarray, ndarray

from tilemerge.core.direction import ACTION_ORDER, Direction

if TYPE_CHECKING:
    from tilemerge.core.state import GameState


def _grid(state: Union['GameState', ndarray]) -> ndarray:
    """Get the raw grid of a game state, or the grid itself."""
    return asarray(getattr(state, 'board', state))


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    board : ndarray
        The game board to check.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    board = asarray(board)
    if not board.all():
        return False
    return not bool((board[:-1] == board[1:]).any() or (board[:, :-1] == board[:, 1:]).any())


def can_move(state: Union['GameState', ndarray]) -> bool:
    """
    Check if any move is possible from the given state.

    Parameters
    ----------
    state : GameState or ndarray
        The game state, or its raw board.

    Returns
    -------
    bool
        True if an empty cell exists or two horizontally or vertically adjacent cells hold the same value.
    """
    return not is_done(_grid(state))


def legal_directions_mask(state: Union['GameState', ndarray]) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : GameState or ndarray
        The game state, or its raw board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move would change the board.

    Notes
    -----
    A direction is legal if an empty cell lies on the travel side of a non-empty cell, or if two equal
    non-empty cells are neighbours along its axis.
    """
    board = _grid(state)

    # ##>: Merges only depend on the axis.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = bool(((left_cols != 0) & (left_cols == right_cols)).any())
    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = bool(((top_rows != 0) & (top_rows == bottom_rows)).any())

    # ##>: Slides depend on the side of the gap.
    left = bool(((left_cols == 0) & (right_cols != 0)).any())
    right = bool(((right_cols == 0) & (left_cols != 0)).any())
    up = bool(((top_rows == 0) & (bottom_rows != 0)).any())
    down = bool(((bottom_rows == 0) & (top_rows != 0)).any())

    return left or h_can_merge, up or v_can_merge, right or h_can_merge, down or v_can_merge


def legal_directions(state: Union['GameState', ndarray]) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    state : GameState or ndarray
        The game state, or its raw board.

    Returns
    -------
    list[Direction]
        Legal directions, in action order (left, up, right, down).
    """
    mask = legal_directions_mask(state)
    return [direction for direction, legal in zip(ACTION_ORDER, mask) if legal]
