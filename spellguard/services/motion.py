"""Motion Prediction and Threat/Time Model.

Hazards (monsters) walk in a straight line at a fixed speed toward a heading
point supplied by the host each turn. This module extrapolates that walk,
estimates how long a hazard needs to hit each structure, and solves how long
a hero needs to get a hazard inside push range.

Every estimate here assumes the hazard keeps its current heading. Hazards
re-target between turns, so callers treat the numbers as a one-turn lookahead.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .geometry import Position, distance, distance_from_line, cosine_angle
from .rules import (
    HERO_SPEED, MONSTER_SPEED, MONSTER_DAMAGE_RANGE, MONSTER_VISIBILITY_RANGE,
    WIND_RANGE, TIME_EPSILON,
)


INFINITY = math.inf

# Returned by time_to_intercept when no pursuit solution exists.
NO_INTERCEPT = -1.0


class Threat(Enum):
    """Which structure a hazard's current trajectory ends in."""
    NEITHER = 0
    OWN_BASE = 1
    ENEMY_BASE = 2


@dataclass
class Structure:
    """A base: fixed corner position, health updated by the host each turn."""
    position: Position
    health: int = 0


@dataclass
class Monster:
    """
    A hazard as observed this turn.

    `heading` is the point the hazard is walking toward. Distances and
    times-to-impact are derived once, on construction, from the two
    structures.
    """
    id: int
    position: Position
    health: int
    heading: Position
    shield_life: int
    near_base: bool
    threat: Threat

    distance_from_my_base: float = field(init=False, default=INFINITY)
    distance_from_op_base: float = field(init=False, default=INFINITY)
    time_to_reach_my_base: float = field(init=False, default=INFINITY)
    time_to_reach_op_base: float = field(init=False, default=INFINITY)

    @classmethod
    def observe(
        cls,
        id: int,
        position: Position,
        health: int,
        heading: Position,
        shield_life: int,
        near_base: bool,
        threat: Threat,
        my_base: Position,
        op_base: Position,
    ) -> "Monster":
        """Build a hazard and derive its distances and impact times."""
        monster = cls(
            id=id,
            position=position,
            health=health,
            heading=heading,
            shield_life=shield_life,
            near_base=near_base,
            threat=threat,
        )
        monster.distance_from_my_base = distance(my_base, position)
        monster.distance_from_op_base = distance(op_base, position)
        monster.time_to_reach_my_base, monster.time_to_reach_op_base = time_to_impact(
            monster.distance_from_my_base,
            monster.distance_from_op_base,
            near_base,
            threat,
        )
        return monster

    @property
    def is_shielded(self) -> bool:
        return self.shield_life > 1

    @property
    def is_stationary(self) -> bool:
        """A hazard whose heading is its own position has no direction."""
        return self.heading == self.position

    @property
    def is_at_impact(self) -> bool:
        """Already hitting a structure; melee and spells no longer matter."""
        return (
            self.time_to_reach_my_base <= TIME_EPSILON
            or self.time_to_reach_op_base <= TIME_EPSILON
        )

    def position_after(self, turns: float) -> Position:
        return extrapolate(self, turns)


@dataclass
class Opponent:
    """An opponent hero. Only its position matters, it is never path-modeled."""
    id: int
    position: Position
    shield_life: int
    distance_from_middle_line: float = field(init=False, default=0.0)

    def __post_init__(self):
        # The middle line runs between the two corners that hold no structure.
        self.distance_from_middle_line = distance_from_line(
            self.position, Position.bottom_left(), Position.top_right()
        )

    @property
    def is_shielded(self) -> bool:
        return self.shield_life > 1


# =============================================================================
# PREDICTION
# =============================================================================

def extrapolate(monster: Monster, turns: float) -> Position:
    """
    Where the hazard will be after `turns`, walking straight at MONSTER_SPEED.

    The direction is the unit vector from the current position to the
    heading point. A stationary hazard stays where it is.
    """
    dx = monster.heading.x - monster.position.x
    dy = monster.heading.y - monster.position.y
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return monster.position
    step = MONSTER_SPEED * turns / length
    return Position(monster.position.x + dx * step, monster.position.y + dy * step)


def time_to_impact(
    distance_from_my_base: float,
    distance_from_op_base: float,
    near_base: bool,
    threat: Threat,
) -> Tuple[float, float]:
    """
    Estimated turns until the hazard hits (my base, opponent base).

    A committed hazard is assigned to whichever structure it is inside the
    visibility range of, own structure checked first. An uncommitted hazard
    follows its threat classification. Structures it is not heading for get
    infinity. Negative estimates are clamped to 0 (already arrived).
    """
    if near_base:
        if distance_from_my_base <= MONSTER_DAMAGE_RANGE:
            return 0.0, INFINITY
        if distance_from_my_base <= MONSTER_VISIBILITY_RANGE:
            return _walk_time(distance_from_my_base), INFINITY
        if distance_from_op_base <= MONSTER_DAMAGE_RANGE:
            return INFINITY, 0.0
        return INFINITY, _walk_time(distance_from_op_base)

    if threat == Threat.OWN_BASE:
        return _walk_time(distance_from_my_base), INFINITY
    if threat == Threat.ENEMY_BASE:
        return INFINITY, _walk_time(distance_from_op_base)
    return INFINITY, INFINITY


def _walk_time(distance_to_base: float) -> float:
    return max(0.0, (distance_to_base - MONSTER_DAMAGE_RANGE) / MONSTER_SPEED)


def time_to_intercept(
    hero_position: Position,
    monster: Monster,
    hero_speed: float = HERO_SPEED,
) -> float:
    """
    Turns a hero needs to bring the hazard inside push range.

    Pursuit on a fixed hazard heading: with d the gap beyond push range and
    theta the angle at the hazard between its heading and the hero,

        (hero_speed^2 - v^2) t^2 + 2 d v cos(theta) t - d^2 = 0

    Returns 0 when the hazard is already in range or not moving, and
    NO_INTERCEPT when the equation has no real root.
    """
    gap = distance(monster.position, hero_position) - WIND_RANGE
    if gap < 0:
        return 0.0
    if monster.is_stationary:
        return 0.0

    cos_a = cosine_angle(monster.position, monster.heading, hero_position)
    a = hero_speed * hero_speed - MONSTER_SPEED * MONSTER_SPEED
    b = 2 * gap * MONSTER_SPEED * cos_a
    c = -gap * gap

    if a == 0:
        # Equal speeds: the equation degrades to b t + c = 0.
        if b <= 0:
            return NO_INTERCEPT
        return -c / b

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return NO_INTERCEPT
    t = (-b + math.sqrt(discriminant)) / (2 * a)
    if t < 0:
        return NO_INTERCEPT
    return t
