from .turn import GameSetup, BaseStatus, EntityRecord, TurnSnapshot

__all__ = [
    "GameSetup", "BaseStatus", "EntityRecord", "TurnSnapshot",
]
