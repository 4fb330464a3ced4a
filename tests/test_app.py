"""
Tests for the frame driver and command line parsing.
"""

import random

from conftest import RecordingHost, ScriptedInput
from gridsnake.app import SnakeApp, parse_args
from gridsnake.core.host_interface import Key
from gridsnake.game.grid import Position, DOWN
from gridsnake.utils.config_loader import Config


TICK = 1.0 / 30.0


class LoopHost(RecordingHost):
    """Recording host with the frame loop hooks."""

    def __init__(self, delta=TICK):
        super().__init__()
        self.delta = delta
        self.frames = 0
        self.flushes = 0
        self.closed = False

    def frame_delta_time(self, fps=0):
        self.frames += 1
        return self.delta

    def flush(self):
        self.flushes += 1

    def draw(self):
        pass

    def close(self):
        self.closed = True


class FrameScript(ScriptedInput):
    """Keyboard that replays one set of keys per polled frame."""

    def __init__(self, frames):
        super().__init__()
        self.frames = list(frames)
        self.quit_requested = False

    def poll(self):
        self.clear()
        if not self.frames:
            self.held.add(Key.ESCAPE)
            return
        frame = self.frames.pop(0)
        if frame == "quit":
            self.quit_requested = True
            return
        kind, key = frame
        getattr(self, kind).add(key)


def make_app(host, keys):
    return SnakeApp(Config(), host, keys, random.Random(99))


class TestRunFrame:
    """Tests for one frame of input then update."""

    def test_input_before_update(self):
        """Test a press is honoured by the tick in the same frame."""
        host = RecordingHost()
        keys = ScriptedInput()
        app = make_app(host, keys)
        app.game.food.position = Position(45, 35)
        keys.down.add(Key.DOWN)

        assert app.run_frame(TICK) is True
        assert app.game.snake.facing == DOWN
        assert app.game.snake.head.position == Position(9, 6)

    def test_restart_replaces_owned_game(self):
        """Test the app keeps the game returned by a restart."""
        host = RecordingHost()
        keys = ScriptedInput()
        app = make_app(host, keys)
        old_game = app.game
        keys.up.add(Key.RESTART)

        app.run_frame(0.0)

        assert app.game is not old_game
        assert len(host.entities) == 6

    def test_escape_stops_app(self):
        """Test holding Escape clears the running flag."""
        host = RecordingHost()
        keys = ScriptedInput()
        app = make_app(host, keys)
        keys.held.add(Key.ESCAPE)

        app.run_frame(0.0)
        app.run_frame(0.0)

        assert app.running is False


class TestRunLoop:
    """Tests for the main loop."""

    def test_runs_until_escape(self):
        """Test the loop stops after the Escape frame and closes the host."""
        host = LoopHost()
        keys = FrameScript([("down", Key.DOWN), ("down", Key.UP)])
        app = make_app(host, keys)

        app.run()

        assert host.frames == 3
        assert host.flushes == 3
        assert host.closed is True

    def test_window_close_exits(self):
        """Test a window close event stops the loop."""
        host = LoopHost()
        keys = FrameScript(["quit"])
        app = make_app(host, keys)

        app.run()

        assert host.frames == 1
        assert host.closed is True


class TestParseArgs:
    """Tests for command line options."""

    def test_defaults(self):
        """Test no options leaves every override unset."""
        args = parse_args([])

        assert args.config is None
        assert args.seed is None
        assert args.fps is None
        assert args.log_level is None

    def test_options(self):
        """Test options are parsed."""
        args = parse_args(["--config", "x.yaml", "--seed", "4", "--fps", "0", "--log-level", "DEBUG"])

        assert args.config == "x.yaml"
        assert args.seed == 4
        assert args.fps == 0
        assert args.log_level == "DEBUG"
