"""
Core abstractions for gridsnake.

Provides the interfaces the game logic talks to, so the core never imports
the host engine directly.
"""

from .game_interface import GameInterface, GameMetadata
from .host_interface import VisualHost, InputSource, Key, VisualHandle

__all__ = [
    'GameInterface',
    'GameMetadata',
    'VisualHost',
    'InputSource',
    'Key',
    'VisualHandle',
]
