"""
Move directions for the 2048 game.
"""

from enum import Enum
from numbers import Integral
from typing import Union


class Direction(Enum):
    """
    The four directions a move can push the tiles toward.

    Each direction is described by the axis of the lines it processes (0 for rows, 1 for columns) and by
    whether lines must be reversed so that tiles always travel toward index 0.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def axis(self) -> int:
        """Axis of the lines processed by this direction (0: rows, 1: columns)."""
        return 0 if self in (Direction.LEFT, Direction.RIGHT) else 1

    @property
    def reverse(self) -> bool:
        """Whether tiles travel toward the far end of each line."""
        return self in (Direction.RIGHT, Direction.DOWN)

    @property
    def action(self) -> int:
        """Action code of this direction (0: left, 1: up, 2: right, 3: down)."""
        return ACTION_ORDER.index(self)

    @classmethod
    def from_action(cls, action: int) -> 'Direction':
        """
        Get the direction matching an action code.

        Parameters
        ----------
        action : int
            The action code (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the action code is outside the four-valued set.
        """
        if isinstance(action, bool) or action not in range(len(ACTION_ORDER)):
            raise ValueError(f'Unknown action code: {action!r}')
        return ACTION_ORDER[action]


# ##>: Directions indexed by action code.
ACTION_ORDER: tuple[Direction, ...] = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


def as_direction(direction: Union[Direction, str, int]) -> Direction:
    """
    Coerce a direction, a direction name or an action code into a ``Direction``.

    Raises
    ------
    ValueError
        If the value does not name one of the four directions.
    """
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, str):
        return Direction(direction.lower())
    if isinstance(direction, Integral):
        return Direction.from_action(direction)
    raise ValueError(f'Unknown direction: {direction!r}')
