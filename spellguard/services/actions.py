"""Action records produced by the decision engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .geometry import Position
from .rules import SPELL_COST


class ActionType(Enum):
    """The five commands a hero can issue, with their protocol keyword."""
    WAIT = "WAIT"
    MOVE = "MOVE"
    WIND = "SPELL WIND"
    SHIELD = "SPELL SHIELD"
    CONTROL = "SPELL CONTROL"

    @property
    def is_spell(self) -> bool:
        return self in (ActionType.WIND, ActionType.SHIELD, ActionType.CONTROL)

    @property
    def incantation(self) -> str:
        return INCANTATIONS[self]


INCANTATIONS = {
    ActionType.WAIT: "Confundo",
    ActionType.MOVE: "Accio",
    ActionType.WIND: "Leviossa",
    ActionType.SHIELD: "Patronum",
    ActionType.CONTROL: "Imperius",
}


@dataclass(frozen=True)
class Action:
    """
    One hero's command for one turn.

    `claimed` lists the entity ids this action takes care of; heroes deciding
    later in the same turn no longer see them. Only spells claim anything.
    """
    kind: ActionType
    destination: Optional[Position] = None
    target_id: Optional[int] = None
    claimed: List[int] = field(default_factory=list)

    @property
    def mana_cost(self) -> int:
        return SPELL_COST if self.kind.is_spell else 0

    @classmethod
    def wait(cls) -> "Action":
        return cls(ActionType.WAIT)

    @classmethod
    def move(cls, destination: Position) -> "Action":
        return cls(ActionType.MOVE, destination=destination)

    @classmethod
    def wind(cls, destination: Position, claimed: List[int]) -> "Action":
        return cls(ActionType.WIND, destination=destination, claimed=list(claimed))

    @classmethod
    def shield(cls, target_id: int) -> "Action":
        return cls(ActionType.SHIELD, target_id=target_id, claimed=[target_id])

    @classmethod
    def control(cls, target_id: int, destination: Position) -> "Action":
        return cls(ActionType.CONTROL, target_id=target_id, destination=destination, claimed=[target_id])
