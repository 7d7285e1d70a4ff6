# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `TwentyFortyEight` class, which holds the current game state and plays moves on it.
"""

from .twentyfortyeight import TwentyFortyEight

__all__ = ["TwentyFortyEight"]
