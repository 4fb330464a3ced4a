"""
Logging setup - rich console output plus an optional log file.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig


LOG_FORMAT = "[%(name)s] %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(config: LoggingConfig, level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        config: Logging settings
        level: Overrides config.level when given (e.g. from the command line)
    """
    level_name = (level or config.level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    handlers = [
        RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
    ]
    handlers[0].setFormatter(logging.Formatter(LOG_FORMAT))

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)
