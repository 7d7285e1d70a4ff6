"""
Tests for the 2048 game environment.

Tests cover the environment interface, state replacement on moves, game termination and seeded
reproducibility.
"""

from contextlib import redirect_stdout
from io import StringIO
from unittest import TestCase, main

import numpy as np

from tilemerge.core.direction import Direction
from tilemerge.core.gamemove import legal_directions
from tilemerge.core.state import GameState
from tilemerge.envs import TwentyFortyEight


class TestEnvironmentInterface(TestCase):
    """Test TwentyFortyEight class API and state management."""

    def setUp(self):
        """Initialize fresh environment before each test."""
        self.env = TwentyFortyEight(size=4, seed=0)

    def test_reset_state_initialization(self):
        """Reset initializes board with exactly 2 tiles and zero reward."""
        obs = self.env.reset()

        # ##>: Exactly 2 non-zero tiles after reset.
        self.assertEqual(np.count_nonzero(obs), 2)

        # ##>: Tiles are only 2 or 4.
        tiles = obs[obs != 0]
        self.assertTrue(np.all((tiles == 2) | (tiles == 4)))

        self.assertEqual(self.env.reward, 0)
        self.assertEqual(self.env.score, 0)
        self.assertFalse(self.env.is_finished)
        self.assertFalse(self.env.won)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        board1 = self.env.reset(seed=42)
        board2 = self.env.reset(seed=42)

        np.testing.assert_array_equal(board1, board2)

    def test_observation_is_a_copy(self):
        """Writing into the observation does not touch the game."""
        obs = self.env.observation
        obs[:] = 0

        self.assertEqual(np.count_nonzero(self.env.state.board), 2)

    def test_step_return_signature(self):
        """Step returns tuple of (observation, reward, done)."""
        obs, reward, done = self.env.step(0)

        self.assertIsInstance(obs, np.ndarray)
        self.assertEqual(obs.shape, (4, 4))
        self.assertIsInstance(reward, int)
        self.assertIsInstance(done, bool)

    def test_step_accepts_all_action_forms(self):
        """Actions may be codes, names or directions."""
        self.env._state = GameState(board=[[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        _, reward, _ = self.env.step('left')
        self.assertEqual(reward, 4)

        for action in (self.env.ACTIONS['up'], Direction.RIGHT, 'down'):
            self.env.step(action)
        self.assertGreaterEqual(self.env.score, 4)

    def test_actions_match_directions(self):
        """Action codes agree with the direction enumeration."""
        self.assertEqual(self.env.ACTIONS, {'left': 0, 'up': 1, 'right': 2, 'down': 3})
        for name, action in self.env.ACTIONS.items():
            self.assertIs(Direction.from_action(action), Direction(name))

    def test_step_unknown_action(self):
        """Unknown actions are rejected."""
        with self.assertRaises(ValueError):
            self.env.step(7)
        with self.assertRaises(ValueError):
            self.env.step('jump')

    def test_noop_step_keeps_state(self):
        """A move that changes nothing keeps the held state."""
        state = GameState(board=[[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]], score=20)
        self.env._state = state

        obs, reward, done = self.env.step(self.env.ACTIONS['left'])

        self.assertIs(self.env.state, state)
        np.testing.assert_array_equal(obs, state.board)
        self.assertEqual(reward, 0)
        self.assertFalse(done)

    def test_valid_step_replaces_state(self):
        """A successful move replaces the held state and adds a tile."""
        state = GameState(board=[[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.env._state = state

        obs, reward, _ = self.env.step(Direction.LEFT)

        self.assertIsNot(self.env.state, state)
        self.assertEqual(reward, 4)
        self.assertEqual(self.env.score, 4)
        self.assertEqual(obs[0, 0], 4)
        self.assertEqual(np.count_nonzero(obs), 2)

    def test_render(self):
        """Render prints one tab-separated line per row."""
        self.env._state = GameState(board=[[2, 0], [0, 4]])
        output = StringIO()
        with redirect_stdout(output):
            self.env.render()

        self.assertEqual(output.getvalue(), '2 \t0\n0 \t4\n')


class TestIntegration(TestCase):
    """End-to-end integration tests."""

    def test_game_reaches_termination(self):
        """Game eventually terminates when playing legal moves."""
        env = TwentyFortyEight(size=4, seed=42)

        done = False
        for _ in range(10000):
            legal = legal_directions(env.state)
            if not legal:
                break
            _, _, done = env.step(legal[0])
            if done:
                break

        self.assertTrue(done)
        self.assertTrue(env.is_finished)
        self.assertEqual(legal_directions(env.state), [])

    def test_reset_after_game_over(self):
        """Environment resets correctly after game ends."""
        env = TwentyFortyEight(size=2, seed=1)
        env._state = GameState(board=[[2, 4], [4, 2]])
        self.assertTrue(env.is_finished)

        obs = env.reset()

        self.assertEqual(np.count_nonzero(obs), 2)
        self.assertEqual(env.reward, 0)
        self.assertEqual(env.score, 0)

    def test_seeded_games_are_reproducible(self):
        """Two environments with the same seed play the same game."""
        first, second = TwentyFortyEight(seed=3), TwentyFortyEight(seed=3)
        for action in [0, 1, 2, 3] * 10:
            obs1, reward1, _ = first.step(action)
            obs2, reward2, _ = second.step(action)
            np.testing.assert_array_equal(obs1, obs2)
            self.assertEqual(reward1, reward2)


if __name__ == '__main__':
    main()
