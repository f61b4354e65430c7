"""Arena geometry for the base defense game.

Pure functions over points in the rectangular arena. Coordinates follow the
host's screen convention: x grows to the right, y grows downward, the two
structures sit in the (0, 0) and (ARENA_WIDTH, ARENA_HEIGHT) corners.
"""

import math
from dataclasses import dataclass
from enum import Enum


ARENA_WIDTH = 17630
ARENA_HEIGHT = 9000


class MapTriangle(Enum):
    """Half of the arena on either side of the diagonal through both structures.

    UPPER holds the (0, ARENA_HEIGHT) corner, LOWER holds the (ARENA_WIDTH, 0)
    corner.
    """
    UPPER = "upper"
    LOWER = "lower"


@dataclass(frozen=True)
class Position:
    """A point in the arena."""
    x: float
    y: float

    @classmethod
    def center(cls) -> "Position":
        return cls(ARENA_WIDTH // 2, ARENA_HEIGHT // 2)

    @classmethod
    def top_left(cls) -> "Position":
        return cls(0, 0)

    @classmethod
    def top_right(cls) -> "Position":
        return cls(ARENA_WIDTH, 0)

    @classmethod
    def bottom_left(cls) -> "Position":
        return cls(0, ARENA_HEIGHT)

    @classmethod
    def bottom_right(cls) -> "Position":
        return cls(ARENA_WIDTH, ARENA_HEIGHT)

    def is_valid(self) -> bool:
        """True when both coordinates lie inside the arena (edges included)."""
        return 0 <= self.x <= ARENA_WIDTH and 0 <= self.y <= ARENA_HEIGHT


def distance(p: Position, q: Position) -> float:
    """Euclidean distance between two points."""
    dx = q.x - p.x
    dy = q.y - p.y
    return math.sqrt(dx * dx + dy * dy)


def distance_from_line(p: Position, start: Position, end: Position) -> float:
    """
    Distance from p to the line through start and end.

    Computed as the height of triangle (start, end, p) dropped from p, with
    the area taken from Heron's formula. Rounding can push the Heron product
    slightly below zero for collinear points, so it is floored at zero.
    """
    a = distance(start, end)
    if a == 0:
        return distance(start, p)
    b = distance(start, p)
    c = distance(end, p)
    s = (a + b + c) / 2
    area_squared = max(0.0, s * (s - a) * (s - b) * (s - c))
    return 2 * math.sqrt(area_squared) / a


def cosine_angle(p: Position, left: Position, right: Position) -> float:
    """
    Cosine of the angle at vertex p between the rays p->left and p->right.

    Law of cosines. A zero-length ray has no direction; it is treated as
    collinear and yields 1.0.
    """
    a = distance(p, left)
    c = distance(p, right)
    if a == 0 or c == 0:
        return 1.0
    b = distance(left, right)
    cos_value = (b * b - a * a - c * c) / (-2.0 * a * c)
    return max(-1.0, min(1.0, cos_value))


def containing_map_triangle(p: Position) -> MapTriangle:
    """Which side of the structure-to-structure diagonal p lies on.

    Sign of W*y - H*x: positive is UPPER, zero or negative is LOWER.
    """
    cross = ARENA_WIDTH * p.y - ARENA_HEIGHT * p.x
    return MapTriangle.UPPER if cross > 0 else MapTriangle.LOWER

