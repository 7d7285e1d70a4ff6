"""
Immutable snapshot of a 2048 game: the board, the score and the win/over flags.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from numpy import array, int64, isfinite, ndarray, trunc

from tilemerge.config import WIN_TILE
from tilemerge.core.gamemove import is_done


def _is_integral(raw: ndarray) -> bool:
    """Check that an array holds integers, or floats without a fractional part."""
    if raw.dtype.kind in 'iu':
        return True
    if raw.dtype.kind == 'f':
        return bool(isfinite(raw).all() and (raw == trunc(raw)).all())
    return False


def _is_valid_tiles(board: ndarray) -> bool:
    """Check that every cell is empty or holds a power of two of at least 2."""
    tile = board > 1
    power_of_two = (board & (board - 1)) == 0
    return bool(((board == 0) | (tile & power_of_two)).all())


@dataclass(frozen=True, eq=False)
class GameState:
    """
    State of a 2048 game.

    The board is copied on construction and made read-only, so a state never shares a writable grid with
    its caller or with the states derived from it.

    Parameters
    ----------
    board : ndarray
        Square grid of cell values, 0 for an empty cell.
    score : int, optional
        Accumulated score (default is 0).
    won : bool, optional
        Whether the winning tile has ever appeared (default is False). Always set when the board already
        holds a tile of at least 2048.
    size : int, optional
        Expected edge length of the board. Checked against the board shape when given.

    Raises
    ------
    ValueError
        If the board is ragged, not square, does not match ``size``, holds a non-integer or a value that is
        neither 0 nor a power of two of at least 2, or if the score is negative or not an integer.
    """

    board: ndarray
    score: int = 0
    won: bool = False
    size: Optional[int] = None

    def __post_init__(self):
        try:
            raw = array(self.board)
        except (TypeError, ValueError) as error:
            raise ValueError(f'Malformed board: {error}') from error
        if not _is_integral(raw):
            raise ValueError(f'Board cells must be integers, got {raw.dtype} values')
        board = raw.astype(int64)

        if board.ndim != 2 or board.shape[0] != board.shape[1] or board.shape[0] == 0:
            raise ValueError(f'Board must be a non-empty square grid, got shape {board.shape}')
        if self.size is not None and self.size != board.shape[0]:
            raise ValueError(f'Board of size {board.shape[0]} does not match declared size {self.size}')
        if not _is_valid_tiles(board):
            raise ValueError('Board cells must be 0 or a power of two of at least 2')

        try:
            score = int(self.score)
        except (TypeError, ValueError, OverflowError) as error:
            raise ValueError(f'Score must be an integer, got {self.score!r}') from error
        if score != self.score:
            raise ValueError(f'Score must be an integer, got {self.score!r}')
        if score < 0:
            raise ValueError(f'Score must be non-negative, got {score}')

        board.setflags(write=False)
        object.__setattr__(self, 'board', board)
        object.__setattr__(self, 'size', int(board.shape[0]))
        object.__setattr__(self, 'score', score)
        object.__setattr__(self, 'won', bool(self.won) or bool(board.max() >= WIN_TILE))

    @property
    def over(self) -> bool:
        """True when no empty cell exists and no two adjacent cells are equal."""
        return is_done(self.board)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.size == other.size
            and self.score == other.score
            and self.won == other.won
            and bool((self.board == other.board).all())
        )

    def __repr__(self) -> str:
        return f'GameState(board={self.board.tolist()}, score={self.score}, won={self.won}, over={self.over})'


class MoveResult(NamedTuple):
    """
    Outcome of a move.

    Attributes
    ----------
    state : GameState
        The state after the move (the input state itself when nothing moved).
    gained : int
        Sum of the tiles created by merges during the move.
    moved : bool
        Whether any tile changed position or value.
    """

    state: GameState
    gained: int
    moved: bool
