"""
Snake game module for gridsnake.

The pygame host lives in .renderer and is imported separately so the game
logic can run headless.
"""

from .grid import Position, Offset, Board, UP, DOWN, LEFT, RIGHT
from .timer import RepeatingTimer
from .snake_game import SnakeGame, Snake, SnakeSegment, Food, restart_game
from .input_handler import InputHandler

__all__ = [
    'Position',
    'Offset',
    'Board',
    'UP',
    'DOWN',
    'LEFT',
    'RIGHT',
    'RepeatingTimer',
    'SnakeGame',
    'Snake',
    'SnakeSegment',
    'Food',
    'restart_game',
    'InputHandler',
]
