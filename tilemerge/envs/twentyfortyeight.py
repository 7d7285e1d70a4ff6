"""2048 game environment holding the current state of a single game."""

from typing import Optional, Union

from numpy import ndarray

from tilemerge.config import DEFAULT_SIZE
from tilemerge.core.direction import ACTION_ORDER, Direction, as_direction
from tilemerge.core.gameboard import create_initial_state, make_rng, move
from tilemerge.core.state import GameState


class TwentyFortyEight:
    """
    2048 game environment.

    This class keeps the current game state, replaces it after every move that changed the board, and
    exposes the board, the last reward and the game flags.
    """

    # ##: All Actions.
    ACTIONS = {direction.value: direction.action for direction in ACTION_ORDER}

    def __init__(self, size: int = DEFAULT_SIZE, seed: Optional[int] = None):
        """
        Initialize the 2048 game board.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        seed : int, optional
            Random seed for reproducibility.
        """
        self.size = size
        self._rng = make_rng(seed)
        self._state: Optional[GameState] = None
        self._reward = 0

        self.reset()

    @property
    def state(self) -> GameState:
        """Get the current game state."""
        return self._state

    @property
    def observation(self) -> ndarray:
        """Get a writable copy of the current game board."""
        return self._state.board.copy()

    @property
    def reward(self) -> int:
        """Get the score gained by the last move."""
        return self._reward

    @property
    def score(self) -> int:
        """Get the accumulated score."""
        return self._state.score

    @property
    def won(self) -> bool:
        """Check if the winning tile has appeared."""
        return self._state.won

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is finished (no more moves possible), False otherwise.
        """
        return self._state.over

    def reset(self, seed: Optional[int] = None) -> ndarray:
        """
        Initialize an empty board and add two random tiles.

        Parameters
        ----------
        seed : int, optional
            Random seed for reproducibility. The current random source is kept when omitted.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = make_rng(seed)
        self._state = create_initial_state(size=self.size, rng=self._rng)
        self._reward = 0
        return self.observation

    def step(self, action: Union[Direction, str, int]) -> tuple[ndarray, int, bool]:
        """
        Apply the selected action to the board.

        Parameters
        ----------
        action : Direction, str or int
            The direction to apply, as a ``Direction``, a name or an action code (0: left, 1: up, 2: right,
            3: down).

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The updated game board (ndarray)
            - The score gained by this action (int)
            - Whether the game has finished after this action (bool)

        Raises
        ------
        ValueError
            If the action does not name one of the four directions.

        Notes
        -----
        - The state is only replaced if the move changed the board.
        - A new tile (2 or 4) is added to the board after each successful move.
        """
        result = move(self._state, as_direction(action), rng=self._rng)
        if result.moved:
            self._state = result.state
        self._reward = result.gained
        return self.observation, self.reward, self.is_finished

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._state.board.tolist():
            print(' \t'.join(map(str, row)))
