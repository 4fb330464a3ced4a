# gridsnake Source Package
"""
gridsnake - Fixed-tick grid snake game.

Modules:
- core: Abstract interfaces for the game and its host (visuals, input)
- game: Grid model, timer, input handling, game state and the pygame host
- utils: Configuration and logging
- app: Frame driver and command line entry point
"""

__version__ = "0.1.0"
