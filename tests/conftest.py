"""
Pytest configuration and fixtures for gridsnake tests.

Provides in-memory stand-ins for the host (visual entities, keyboard) and
a pygame mock so the pygame host can be tested without a display.
"""

import sys
from pathlib import Path
from typing import Dict, List, Set
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from gridsnake.core.host_interface import VisualHost, InputSource, Key
from gridsnake.game.grid import Position


class RecordingHost(VisualHost):
    """Visual host that applies every call immediately and remembers it."""

    def __init__(self):
        self.entities: Dict[int, Position] = {}
        self.destroyed: List[int] = []
        self.moves = 0
        self._next_handle = 0

    def create_visual(self, position):
        handle = self._next_handle
        self._next_handle += 1
        self.entities[handle] = position
        return handle

    def destroy_visual(self, handle):
        del self.entities[handle]
        self.destroyed.append(handle)

    def set_visual_position(self, handle, position):
        if handle not in self.entities:
            raise KeyError(handle)
        self.entities[handle] = position
        self.moves += 1


class ScriptedInput(InputSource):
    """Keyboard state set directly by the test."""

    def __init__(self):
        self.down: Set[Key] = set()
        self.up: Set[Key] = set()
        self.held: Set[Key] = set()

    def clear(self):
        self.down.clear()
        self.up.clear()
        self.held.clear()

    def just_pressed(self, key):
        return key in self.down

    def just_released(self, key):
        return key in self.up

    def pressed(self, key):
        return key in self.held


class SequenceRandom:
    """Random source returning scripted randrange results."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture
def host():
    """Provide an empty recording host."""
    return RecordingHost()


@pytest.fixture
def keys():
    """Provide a keyboard with nothing pressed."""
    return ScriptedInput()


@pytest.fixture
def game(host):
    """Provide a default 50x40 game with food parked in a far corner."""
    import random
    from gridsnake.game.snake_game import SnakeGame

    game = SnakeGame(host, rng=random.Random(1234))
    park_food(game, Position(45, 35))
    return game


def park_food(game, position):
    """Move the food somewhere it will not be eaten by accident."""
    game.food.position = position
    game.host.set_visual_position(game.food.handle, position)


def set_body(game, cells, facing):
    """Replace the snake with the given cells (tail first)."""
    from gridsnake.game.snake_game import SnakeSegment

    for segment in game.snake.segments:
        game.host.destroy_visual(segment.handle)

    game.snake.segments = [
        SnakeSegment(Position(x, y), game.host.create_visual(Position(x, y)))
        for x, y in cells
    ]
    game.snake.facing = facing


def body_cells(game):
    return [(s.position.x, s.position.y) for s in game.snake.segments]


def create_mock_pygame():
    """Create a mock of the pygame module."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.fill.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Drawing
    mock_pygame.draw.rect.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114
    mock_pygame.K_SPACE = 32

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    Test modules import the pygame host inside test functions so it always
    binds to this mock.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def pygame_mock(mock_pygame_module):
    """Per-test view of the pygame mock with call history cleared."""
    mock_pygame_module.draw.rect.reset_mock()
    mock_pygame_module.display.set_mode.reset_mock()
    mock_pygame_module.display.set_caption.reset_mock()
    mock_pygame_module.display.flip.reset_mock()
    mock_pygame_module.quit.reset_mock()
    mock_pygame_module.event.get.return_value = []
    yield mock_pygame_module
    mock_pygame_module.event.get.return_value = []
