"""
Snake Game Core - Fixed-tick game state and update rules.

Visual entities live in the host; each segment and the food hold the handle
of their entity and keep it in sync with their grid position.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Deque
import logging
import random

from ..core.game_interface import GameInterface, GameMetadata
from ..core.host_interface import VisualHost, VisualHandle
from ..utils.config_loader import GameConfig
from .grid import Board, Offset, Position, RIGHT
from .timer import RepeatingTimer

logger = logging.getLogger(__name__)


@dataclass
class SnakeSegment:
    """One body cell and its visual entity."""
    position: Position
    handle: VisualHandle


@dataclass
class Food:
    """The single food item and its visual entity."""
    position: Position
    handle: VisualHandle


@dataclass
class Snake:
    """Body segments in tail-to-head order plus the current heading."""
    segments: List[SnakeSegment] = field(default_factory=list)
    facing: Offset = RIGHT

    @property
    def head(self) -> SnakeSegment:
        return self.segments[-1]

    def occupies(self, position: Position) -> bool:
        return any(s.position == position for s in self.segments)

    def count_at(self, position: Position) -> int:
        return sum(1 for s in self.segments if s.position == position)

    def __len__(self) -> int:
        return len(self.segments)


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake advances one cell every tick period. Eating food grows it by
    one cell; running into a wall or its own body kills it. A dead game
    stays dead: restarting builds a new SnakeGame.
    """

    def __init__(
        self,
        host: VisualHost,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the game and spawn its visuals.

        Args:
            host: Visual entity store for segments and food
            config: Board and timing settings (defaults if None)
            rng: Random source for food placement
        """
        self.host = host
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.board = Board(self.config.board_width, self.config.board_height)

        self.dead: bool = False
        self.food: Optional[Food] = None
        self.snake = Snake(facing=RIGHT)
        self.tick_timer = RepeatingTimer(self.config.tick_period)
        self.input_queue: Deque[Offset] = deque()

        self._spawn()

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat food to grow without hitting the walls or yourself",
        )

    def _spawn(self):
        """Create the starting snake and the first food item."""
        for i in range(self.config.initial_length):
            position = Position(self.config.start_x + i, self.config.start_y)
            self.snake.segments.append(self._new_segment(position))

        self.place_food()

        logger.debug(
            "New game: head at %s, food at %s",
            self.snake.head.position, self.food.position
        )

    def _new_segment(self, position: Position) -> SnakeSegment:
        return SnakeSegment(position, self.host.create_visual(position))

    def despawn(self) -> None:
        """Destroy every visual entity owned by this game."""
        for segment in self.snake.segments:
            self.host.destroy_visual(segment.handle)

        if self.food is not None:
            self.host.destroy_visual(self.food.handle)

    def queue_direction(self, direction: Offset) -> None:
        """Buffer a direction change for a later tick."""
        self.input_queue.append(direction)

    def place_food(self) -> None:
        """
        Move the food to a random free cell.

        Samples the whole board until a cell not covered by the snake
        turns up. Never returns if the snake fills the board.
        """
        while True:
            position = self.board.random_position(self.rng)
            if not self.snake.occupies(position):
                break

        if self.food is None:
            self.food = Food(position, self.host.create_visual(position))
        else:
            self.host.set_visual_position(self.food.handle, position)
            self.food.position = position

    def update(self, delta: float) -> bool:
        """
        Advance the tick timer and step the game if a period finished.

        Args:
            delta: Seconds since the previous frame

        Returns:
            True if a tick ran this frame
        """
        if self.dead or not self.tick_timer.tick(delta):
            return False

        if self.tick_timer.times_finished_this_tick > 1:
            logger.debug(
                "Frame spanned %d tick periods, running one tick",
                self.tick_timer.times_finished_this_tick
            )

        self.tick()
        return True

    def _consume_input(self) -> None:
        """Take the first queued direction that is an actual turn."""
        while self.input_queue:
            direction = self.input_queue.popleft()
            if direction != self.snake.facing and direction != -self.snake.facing:
                self.snake.facing = direction
                break

    def tick(self) -> None:
        """Run one simulation step."""
        self._consume_input()

        next_position = self.snake.head.position + self.snake.facing

        if self.food is not None and next_position == self.food.position:
            # Grow: the new head appears on the food and the tail stays put
            self.snake.segments.append(self._new_segment(next_position))
            logger.debug("Ate food at %s, length %d", next_position, len(self.snake))
            self.place_food()
        else:
            position = next_position
            for segment in reversed(self.snake.segments):
                position, segment.position = segment.position, position
                self.host.set_visual_position(segment.handle, segment.position)

        if self.snake.count_at(next_position) > 1 or self.board.is_out_of_bounds(next_position):
            self.dead = True
            logger.info("Snake died at %s with length %d", next_position, len(self.snake))

    @property
    def length(self) -> int:
        return len(self.snake)

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state.

        Returns:
            Dictionary with the body (tail first), food, heading and flags
        """
        return {
            "snake": [s.position.to_dict() for s in self.snake.segments],
            "food": self.food.position.to_dict() if self.food else None,
            "facing": {"x": self.snake.facing.x, "y": self.snake.facing.y},
            "dead": self.dead,
            "length": self.length,
            "queued_inputs": len(self.input_queue),
            "width": self.board.width,
            "height": self.board.height,
        }


def restart_game(game: SnakeGame) -> SnakeGame:
    """
    Throw a game away and start a fresh one on the same host.

    Args:
        game: The game to discard; its visuals are destroyed

    Returns:
        A new game with the same host, settings and random source
    """
    game.despawn()
    logger.info("Restarting game (previous length %d)", game.length)
    return SnakeGame(game.host, game.config, game.rng)
