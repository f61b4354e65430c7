"""Line protocol spoken with the game host.

Input is whitespace-separated integers, one record per line. Output is one
command line per hero per turn. This module only parses and formats; it
never decides anything.
"""

import logging
from typing import Iterator, List, Optional

from pydantic import ValidationError

from ..schemas.turn import BaseStatus, EntityRecord, GameSetup, TurnSnapshot
from .actions import Action, ActionType


logger = logging.getLogger(__name__)


TYPE_MONSTER = 0
TYPE_HERO = 1
TYPE_OPPONENT = 2

ENTITY_FIELDS = [
    "id", "type", "x", "y", "shield_life", "is_controlled",
    "health", "vx", "vy", "near_base", "threat_for",
]


class ProtocolError(ValueError):
    """A host line that cannot be understood."""

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message if line is None else f"{message}: {line!r}")
        self.line = line


def _read_ints(lines: Iterator[str], count: int) -> List[int]:
    try:
        line = next(lines)
    except StopIteration:
        raise EOFError("Host closed the input stream") from None

    fields = line.split()
    if len(fields) != count:
        raise ProtocolError(f"Expected {count} fields, got {len(fields)}", line)
    try:
        return [int(f) for f in fields]
    except ValueError:
        raise ProtocolError("Non-integer field", line) from None


def read_setup(lines: Iterator[str]) -> GameSetup:
    """Read the two setup lines: base corner, then heroes per player."""
    base_x, base_y = _read_ints(lines, 2)
    (heroes_per_player,) = _read_ints(lines, 1)
    try:
        return GameSetup(base_x=base_x, base_y=base_y, heroes_per_player=heroes_per_player)
    except ValidationError as e:
        raise ProtocolError(f"Invalid game setup ({e.error_count()} errors)") from e


def read_turn(lines: Iterator[str]) -> TurnSnapshot:
    """Read one turn: two base status lines, an entity count, the entities."""
    my_health, my_mana = _read_ints(lines, 2)
    op_health, op_mana = _read_ints(lines, 2)
    (entity_count,) = _read_ints(lines, 1)
    if entity_count < 0:
        raise ProtocolError(f"Negative entity count {entity_count}")
    logger.debug(f"Reading {entity_count} entities")

    entities = []
    for _ in range(entity_count):
        values = _read_ints(lines, len(ENTITY_FIELDS))
        try:
            entities.append(EntityRecord(**dict(zip(ENTITY_FIELDS, values))))
        except ValidationError as e:
            raise ProtocolError(
                f"Invalid entity record ({e.error_count()} errors)",
                " ".join(str(v) for v in values),
            ) from e

    try:
        return TurnSnapshot(
            my_base=BaseStatus(health=my_health, mana=my_mana),
            op_base=BaseStatus(health=op_health, mana=op_mana),
            entities=entities,
        )
    except ValidationError as e:
        raise ProtocolError(f"Invalid base status ({e.error_count()} errors)") from e


def _parameters(action: Action) -> List[int]:
    params: List[int] = []
    if action.target_id is not None:
        params.append(action.target_id)
    if action.destination is not None:
        params.append(int(round(action.destination.x)))
        params.append(int(round(action.destination.y)))
    return params


def format_action(action: Action, hero_name: Optional[str] = None) -> str:
    """
    Render an action as a host command line.

    Coordinates are rounded to integers. With a hero name the line is
    signed with the name and the action's incantation, which the host shows
    as a speech bubble.
    """
    parts = [action.kind.value]
    if action.kind != ActionType.WAIT:
        parts.extend(str(p) for p in _parameters(action))
    if hero_name:
        parts.extend([hero_name, action.kind.incantation])
    return " ".join(parts)
