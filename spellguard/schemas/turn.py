from pydantic import BaseModel, Field
from typing import List


class GameSetup(BaseModel):
    """Sent once before the first turn."""
    base_x: int = Field(ge=0)  # corner of the map holding our base
    base_y: int = Field(ge=0)
    heroes_per_player: int = Field(default=3, ge=1)


class BaseStatus(BaseModel):
    health: int
    mana: int = Field(ge=0)


class EntityRecord(BaseModel):
    """One visible entity, as the host describes it."""
    id: int
    type: int = Field(ge=0, le=2)  # 0=monster, 1=own hero, 2=opponent hero
    x: int
    y: int
    shield_life: int = Field(ge=0)  # turns until the shield fades
    is_controlled: bool
    health: int
    vx: int  # heading point of a monster, -1 for heroes
    vy: int
    near_base: int  # monster has committed to a base, -1 for heroes
    threat_for: int  # 0=neither, 1=our base, 2=opponent base, -1 for heroes


class TurnSnapshot(BaseModel):
    my_base: BaseStatus
    op_base: BaseStatus
    entities: List[EntityRecord] = []
