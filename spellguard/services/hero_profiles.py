"""
Hero Profile System

Each of the three heroes plays a fixed character, chosen by its slot index
the first time it is seen:

- slot 0 "REX": home-guard, parks on the edge of the base and defends.
- slot 1 "TEX": raider, camps deep in the opponent half and feeds hazards
  into the opponent base.
- slot 2 "TAU": wing defender, covers the flank of the base.

A character is six weights that scale the benefit/cost products of the
decision engine, plus a guard post the hero drifts back to when idle.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .geometry import Position
from .rules import HERO_VISIBILITY_RANGE, GOLDEN_RATIO, COS_22_5, SIN_22_5


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Character:
    """Six positive weights describing how a hero values each kind of action."""
    attacker: float     # attacks the opponent base
    defender: float     # defends the own base
    duelist: float      # attacks opponent heroes
    hunter: float       # attacks hazards
    prodigal: float     # spends mana easily
    conservator: float  # returns to its guard post


@dataclass(frozen=True)
class HeroProfile:
    """Fixed character, display name and guard-post offset for one slot."""
    name: str
    character: Character
    guard_offset: Tuple[int, int]  # from the home corner, for a base at (0, 0)


def _guard_offsets() -> Dict[str, Tuple[int, int]]:
    radius = int(HERO_VISIBILITY_RANGE * GOLDEN_RATIO)
    side1 = int(radius * COS_22_5 * GOLDEN_RATIO)
    side2 = int(radius * SIN_22_5 * GOLDEN_RATIO)
    center = Position.center()
    return {
        "REX": (int(HERO_VISIBILITY_RANGE), int(HERO_VISIBILITY_RANGE)),
        "TEX": (int(center.x * GOLDEN_RATIO), int(center.y * GOLDEN_RATIO)),
        "TAU": (side2, side1),
    }


_OFFSETS = _guard_offsets()

PROFILES: List[HeroProfile] = [
    HeroProfile(
        name="REX",
        character=Character(
            attacker=5, defender=40000, duelist=1000000,
            hunter=0.5, prodigal=0.0001, conservator=0.0000002,
        ),
        guard_offset=_OFFSETS["REX"],
    ),
    HeroProfile(
        name="TEX",
        character=Character(
            attacker=2000, defender=3, duelist=1000000,
            hunter=20, prodigal=0.001, conservator=0.0000002,
        ),
        guard_offset=_OFFSETS["TEX"],
    ),
    HeroProfile(
        name="TAU",
        character=Character(
            attacker=50, defender=40000, duelist=100000,
            hunter=1, prodigal=0.0001, conservator=0.0000002,
        ),
        guard_offset=_OFFSETS["TAU"],
    ),
]


def profile_for(slot: int) -> HeroProfile:
    """Profile for a slot index. Every slot past the last profile reuses it."""
    if slot < 0:
        raise ValueError(f"Slot index must be non-negative, got {slot}")
    return PROFILES[min(slot, len(PROFILES) - 1)]


def guard_position(profile: HeroProfile, my_base: Position) -> Position:
    """Guard post mirrored into the home corner's quarter of the arena."""
    gx, gy = profile.guard_offset
    if my_base.x == 0:
        return Position(gx, gy)
    return Position(my_base.x - gx, my_base.y - gy)


@dataclass
class Hero:
    """One of our heroes: a fixed profile plus this turn's observation."""
    id: int
    slot: int
    profile: HeroProfile
    guard: Position
    position: Position
    shield_life: int = 0

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def character(self) -> Character:
        return self.profile.character

    @property
    def is_shielded(self) -> bool:
        return self.shield_life > 1


class HeroRoster:
    """
    Assigns slots to hero ids once and keeps them for the whole game.

    Slots are handed out in the order heroes are first observed. After that
    only position and shield life change.
    """

    def __init__(self, my_base: Position):
        self.my_base = my_base
        self._heroes: Dict[int, Hero] = {}

    def observe(self, hero_id: int, position: Position, shield_life: int) -> Hero:
        """Record a hero sighting, creating its profile on first sight."""
        hero = self._heroes.get(hero_id)
        if hero is None:
            slot = len(self._heroes)
            profile = profile_for(slot)
            hero = Hero(
                id=hero_id,
                slot=slot,
                profile=profile,
                guard=guard_position(profile, self.my_base),
                position=position,
                shield_life=shield_life,
            )
            self._heroes[hero_id] = hero
            logger.info(f"Hero {hero_id} assigned slot {slot} as {profile.name}, guarding {hero.guard}")
            return hero

        hero.position = position
        hero.shield_life = shield_life
        return hero

