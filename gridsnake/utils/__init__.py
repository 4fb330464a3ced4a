"""
Utilities for gridsnake: configuration loading and logging setup.
"""

from .config_loader import Config, GameConfig, VisualizationConfig, LoggingConfig, load_config, save_config
from .logging_setup import setup_logging

__all__ = [
    'Config',
    'GameConfig',
    'VisualizationConfig',
    'LoggingConfig',
    'load_config',
    'save_config',
    'setup_logging',
]
