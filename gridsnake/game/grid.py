"""
Grid model - board cells, unit moves and bounds.
"""
from dataclasses import dataclass
import random


@dataclass(frozen=True)
class Offset:
    """A signed unit move on the grid."""
    x: int
    y: int

    def __neg__(self) -> "Offset":
        return Offset(-self.x, -self.y)


@dataclass(frozen=True)
class Position:
    """A cell on the game grid."""
    x: int
    y: int

    def __add__(self, other: Offset) -> "Position":
        if not isinstance(other, Offset):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


# y grows downwards, matching screen rows
UP = Offset(0, -1)
DOWN = Offset(0, 1)
LEFT = Offset(-1, 0)
RIGHT = Offset(1, 0)


@dataclass(frozen=True)
class Board:
    """Board dimensions in cells."""
    width: int
    height: int

    def is_out_of_bounds(self, position: Position) -> bool:
        """Check if a position lies outside the board."""
        return (
            position.x < 0 or position.x >= self.width
            or position.y < 0 or position.y >= self.height
        )

    def random_position(self, rng: random.Random) -> Position:
        """Pick a cell uniformly at random."""
        return Position(rng.randrange(self.width), rng.randrange(self.height))

    @property
    def cell_count(self) -> int:
        return self.width * self.height
