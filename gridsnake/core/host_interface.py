"""
Abstract host interfaces for gridsnake.

The host engine owns the window, the visual entities and the keyboard. The
game logic only sees these interfaces.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..game.grid import Position


# Opaque identifier of a visual entity owned by the host
VisualHandle = int


class Key(Enum):
    """Named keys the game reacts to."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"
    ESCAPE = "escape"


class VisualHost(ABC):
    """
    Abstract visual entity store.

    Hosts may defer applying these calls until their own synchronization
    point, but handles must be usable as soon as they are returned.
    """

    @abstractmethod
    def create_visual(self, position: "Position") -> VisualHandle:
        """
        Create a visual entity at a grid position.

        Args:
            position: Grid cell to place the entity on

        Returns:
            Handle identifying the new entity
        """
        pass

    @abstractmethod
    def destroy_visual(self, handle: VisualHandle) -> None:
        """
        Destroy a visual entity.

        Args:
            handle: Handle returned by create_visual
        """
        pass

    @abstractmethod
    def set_visual_position(self, handle: VisualHandle, position: "Position") -> None:
        """
        Move a visual entity to a grid position.

        Args:
            handle: Handle returned by create_visual
            position: New grid cell
        """
        pass


class InputSource(ABC):
    """
    Abstract keyboard state for the current frame.

    Edge queries are true only on the frame the edge happened.
    """

    @abstractmethod
    def just_pressed(self, key: Key) -> bool:
        """True if the key went down this frame."""
        pass

    @abstractmethod
    def just_released(self, key: Key) -> bool:
        """True if the key went up this frame."""
        pass

    @abstractmethod
    def pressed(self, key: Key) -> bool:
        """True while the key is held."""
        pass
