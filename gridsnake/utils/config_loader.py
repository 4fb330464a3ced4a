"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml in the working directory or the project root.
Missing sections and keys fall back to the dataclass defaults.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Game configuration."""
    board_width: int = 50
    board_height: int = 40
    tick_rate: int = 30           # Simulation ticks per second
    initial_length: int = 5
    start_x: int = 5              # Tail cell; the snake extends to the right
    start_y: int = 5

    @property
    def tick_period(self) -> float:
        """Seconds between simulation ticks."""
        return 1.0 / self.tick_rate

    def validate(self) -> None:
        """
        Check the settings describe a playable board.

        Raises:
            ValueError: If a value is out of range
        """
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError(
                f"Board must be at least 1x1, got {self.board_width}x{self.board_height}"
            )
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be at least 1, got {self.initial_length}")

        last_x = self.start_x + self.initial_length - 1
        if (self.start_x < 0 or self.start_y < 0
                or last_x >= self.board_width or self.start_y >= self.board_height):
            raise ValueError("Initial snake does not fit on the board")
        if self.initial_length >= self.board_width * self.board_height:
            raise ValueError("Initial snake leaves no free cell for food")


@dataclass
class VisualizationConfig:
    """Window and drawing settings."""
    cell_size: int = 10
    render_fps: int = 60          # 0 means uncapped
    title: str = "snake"
    background_color: tuple = (255, 255, 255)
    entity_color: tuple = (0, 0, 0)

    def validate(self) -> None:
        if self.cell_size < 2:
            raise ValueError(f"cell_size must be at least 2, got {self.cell_size}")
        if self.render_fps < 0:
            raise ValueError(f"render_fps must not be negative, got {self.render_fps}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        self.game.validate()
        self.visualization.validate()


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    # YAML has no tuples
    for key, value in filtered_data.items():
        if isinstance(value, list):
            filtered_data[key] = tuple(value)

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in the common locations."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in the
            working directory or project root)

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If a setting is out of range
    """
    if config_path is None:
        path = _find_config_file()
        if path is None:
            logger.info("No config file found, using defaults")
            return Config()
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], GameConfig)

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    config.validate()
    logger.debug("Loaded config from %s", path)
    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    # Store colours as plain lists
    for key, value in data['visualization'].items():
        if isinstance(value, tuple):
            data['visualization'][key] = list(value)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
