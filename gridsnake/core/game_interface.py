"""
Abstract game interface for gridsnake.

Games advance on real elapsed time and expose a state dictionary for
logging and inspection.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name, also the window title
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description
    version: str = "1.0.0"              # Game version


class GameInterface(ABC):
    """
    Abstract base class for real-time games.

    Games handle the core logic, rules, and state management.
    Drawing and keyboard access belong to the host.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def update(self, delta: float) -> bool:
        """
        Advance the game by one frame.

        Args:
            delta: Seconds elapsed since the previous frame

        Returns:
            True if the simulation stepped during this frame
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state.

        Returns:
            Dictionary describing the game state
        """
        pass

    @abstractmethod
    def despawn(self) -> None:
        """Release every host resource owned by this game."""
        pass
