"""
Input Handler - Turns key edges into game commands.
"""
from typing import Callable

from ..core.host_interface import InputSource, Key
from .grid import UP, DOWN, LEFT, RIGHT
from .snake_game import SnakeGame, restart_game


DIRECTION_KEYS = (
    (Key.UP, UP),
    (Key.DOWN, DOWN),
    (Key.RIGHT, RIGHT),
    (Key.LEFT, LEFT),
)


class InputHandler:
    """
    Applies one frame of keyboard input to the game.

    Runs before the game update each frame so queued turns are visible to
    the tick that follows.
    """

    def __init__(self, request_exit: Callable[[], None]):
        """
        Args:
            request_exit: Called every frame Escape is held
        """
        self.request_exit = request_exit

    def handle(self, game: SnakeGame, keys: InputSource) -> SnakeGame:
        """
        Process input for the current frame.

        Args:
            game: The running game
            keys: Keyboard state for this frame

        Returns:
            The game to keep running; a new instance after a restart
        """
        if not game.dead:
            for key, direction in DIRECTION_KEYS:
                if keys.just_pressed(key):
                    game.queue_direction(direction)

        if keys.just_released(Key.RESTART):
            game = restart_game(game)

        if keys.pressed(Key.ESCAPE):
            self.request_exit()

        return game
