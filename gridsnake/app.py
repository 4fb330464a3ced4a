"""
gridsnake - Play Snake

Usage:
    gridsnake                          # Play with config.yaml or defaults
    gridsnake --config my.yaml         # Use a specific config file
    gridsnake --seed 42                # Reproducible food placement

Controls:
    Arrow Keys or WASD: Move the snake
    R (on release): Restart game
    ESC: Quit
"""
import os
import argparse
import logging
import random
from typing import Optional, List

from .core.host_interface import InputSource
from .game.input_handler import InputHandler
from .game.snake_game import SnakeGame
from .utils.config_loader import Config, load_config
from .utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


class SnakeApp:
    """
    Frame driver: owns the single running game and the host.

    Each frame runs the input phase, then the update phase.
    """

    def __init__(
        self,
        config: Config,
        host,
        keys: InputSource,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            config: Application configuration
            host: Visual host; run() also needs flush, draw,
                frame_delta_time and close
            keys: Keyboard state source
            rng: Random source for food placement
        """
        self.config = config
        self.host = host
        self.keys = keys
        self.running = True
        self.input_handler = InputHandler(self.request_exit)
        self.game = SnakeGame(host, config.game, rng)

    def request_exit(self) -> None:
        """Ask the frame loop to stop after this frame. Safe to repeat."""
        if self.running:
            logger.info("Exit requested")
        self.running = False

    def run_frame(self, delta: float) -> bool:
        """
        Run one frame of game logic.

        Args:
            delta: Seconds since the previous frame

        Returns:
            True if the simulation ticked
        """
        self.game = self.input_handler.handle(self.game, self.keys)
        return self.game.update(delta)

    def run(self) -> None:
        """Loop until exit is requested, then close the host."""
        fps = self.config.visualization.render_fps
        logger.info(
            "Starting %dx%d board at %d ticks/s",
            self.config.game.board_width,
            self.config.game.board_height,
            self.config.game.tick_rate,
        )

        try:
            while self.running:
                delta = self.host.frame_delta_time(fps)

                self.keys.poll()
                if self.keys.quit_requested:
                    self.request_exit()

                self.run_frame(delta)

                self.host.flush()
                self.host.draw()
        finally:
            self.host.close()


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="gridsnake - fixed-tick grid snake",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Arrow Keys / WASD   Move
  R                   Restart
  ESC                 Quit
"""
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to config file (default: config.yaml if present)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Frame rate cap, 0 for uncapped (overrides config)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point for human play."""
    args = parse_args(argv)

    config = load_config(args.config)
    setup_logging(config.logging, args.log_level)

    if args.fps is not None:
        config.visualization.render_fps = args.fps

    # Suppress pygame banner
    os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
    from .game.renderer import PygameHost, PygameInput

    vis = config.visualization
    host = PygameHost(
        grid_width=config.game.board_width,
        grid_height=config.game.board_height,
        cell_size=vis.cell_size,
        title=vis.title,
        background_color=vis.background_color,
        entity_color=vis.entity_color,
    )

    rng = random.Random(args.seed)
    app = SnakeApp(config, host, PygameInput(), rng)
    app.run()


if __name__ == "__main__":
    main()
