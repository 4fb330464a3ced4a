"""
Pygame host - window, visual entities, keyboard and frame clock.
"""
import pygame
from typing import Dict, List, Set, Tuple, Optional

from ..core.host_interface import VisualHost, InputSource, Key, VisualHandle
from .grid import Position


# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class PygameHost(VisualHost):
    """
    Owns the game window and draws every visual entity as a square.

    Entity changes are recorded as commands and applied by flush(), which
    the frame loop calls once per frame before draw().
    """

    def __init__(
        self,
        grid_width: int = 50,
        grid_height: int = 40,
        cell_size: int = 10,
        title: str = "snake",
        background_color: Tuple[int, int, int] = WHITE,
        entity_color: Tuple[int, int, int] = BLACK
    ):
        """
        Initialize the host with its own window.

        Args:
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            cell_size: Size of each cell in pixels
            title: Window title
            background_color: Fill colour behind the grid
            entity_color: Colour of snake segments and food
        """
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.cell_size = cell_size
        self.background_color = background_color
        self.entity_color = entity_color

        # One pixel gap between neighbouring cells
        self.window_width = grid_width * cell_size - 1
        self.window_height = grid_height * cell_size - 1

        pygame.init()
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

        self._next_handle: VisualHandle = 0
        self._live: Set[VisualHandle] = set()
        self._positions: Dict[VisualHandle, Position] = {}
        self._commands: List[Tuple[str, VisualHandle, Optional[Position]]] = []

    def _check_live(self, handle: VisualHandle):
        if handle not in self._live:
            raise KeyError(f"Unknown visual handle {handle}")

    def create_visual(self, position: Position) -> VisualHandle:
        """Reserve a handle now; the entity appears at the next flush."""
        handle = self._next_handle
        self._next_handle += 1
        self._live.add(handle)
        self._commands.append(("spawn", handle, position))
        return handle

    def destroy_visual(self, handle: VisualHandle) -> None:
        self._check_live(handle)
        self._live.discard(handle)
        self._commands.append(("despawn", handle, None))

    def set_visual_position(self, handle: VisualHandle, position: Position) -> None:
        self._check_live(handle)
        self._commands.append(("move", handle, position))

    def flush(self) -> None:
        """Apply recorded entity commands in order."""
        for command, handle, position in self._commands:
            if command == "despawn":
                del self._positions[handle]
            else:
                self._positions[handle] = position
        self._commands.clear()

    @property
    def entity_count(self) -> int:
        """Number of entities currently drawn."""
        return len(self._positions)

    def get_entity_position(self, handle: VisualHandle) -> Position:
        return self._positions[handle]

    def cell_rect(self, position: Position) -> pygame.Rect:
        """Screen rectangle of a grid cell."""
        return pygame.Rect(
            position.x * self.cell_size,
            position.y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1
        )

    def draw(self) -> None:
        """Draw all entities and present the frame."""
        self.surface.fill(self.background_color)

        for position in self._positions.values():
            pygame.draw.rect(self.surface, self.entity_color, self.cell_rect(position))

        pygame.display.flip()

    def frame_delta_time(self, fps: int = 0) -> float:
        """
        Wait for the next frame and report the time since the last one.

        Args:
            fps: Frame rate cap (0 for uncapped)

        Returns:
            Elapsed seconds
        """
        return self.clock.tick(fps) / 1000.0

    def close(self):
        """Close the window and pygame."""
        pygame.quit()


class PygameInput(InputSource):
    """
    Keyboard state built from the pygame event queue.

    Call poll() once per frame; edges only last until the next poll.
    """

    def __init__(self):
        self.bindings: Dict[int, Key] = {
            pygame.K_UP: Key.UP,
            pygame.K_w: Key.UP,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_s: Key.DOWN,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_a: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_d: Key.RIGHT,
            pygame.K_r: Key.RESTART,
            pygame.K_ESCAPE: Key.ESCAPE,
        }
        self._pressed: Set[Key] = set()
        self._just_pressed: Set[Key] = set()
        self._just_released: Set[Key] = set()
        self.quit_requested = False

    def poll(self) -> None:
        """Read this frame's events."""
        self._just_pressed.clear()
        self._just_released.clear()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True

            elif event.type == pygame.KEYDOWN:
                key = self.bindings.get(event.key)
                if key is not None:
                    self._just_pressed.add(key)
                    self._pressed.add(key)

            elif event.type == pygame.KEYUP:
                key = self.bindings.get(event.key)
                if key is not None:
                    self._just_released.add(key)
                    self._pressed.discard(key)

    def just_pressed(self, key: Key) -> bool:
        return key in self._just_pressed

    def just_released(self, key: Key) -> bool:
        return key in self._just_released

    def pressed(self, key: Key) -> bool:
        return key in self._pressed
