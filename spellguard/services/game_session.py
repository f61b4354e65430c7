"""Game session: turns host snapshots into engine inputs, one turn at a time."""

import logging
from typing import List, Optional, Tuple

from ..schemas.turn import EntityRecord, GameSetup, TurnSnapshot
from .geometry import Position
from .hero_profiles import Hero, HeroRoster
from .motion import Monster, Opponent, Structure, Threat
from .protocol import TYPE_HERO, TYPE_MONSTER, TYPE_OPPONENT, ProtocolError, format_action
from .turn_coordinator import TurnCoordinator, TurnResult


logger = logging.getLogger(__name__)


def _monster_fields(record: EntityRecord) -> Tuple[bool, Threat]:
    """Commitment flag and threat of a monster row; hero rows carry -1 here."""
    if record.near_base not in (0, 1):
        raise ProtocolError(f"Monster {record.id} has near_base {record.near_base}")
    try:
        threat = Threat(record.threat_for)
    except ValueError:
        raise ProtocolError(f"Monster {record.id} has threat_for {record.threat_for}") from None
    return record.near_base == 1, threat


def opponent_base_for(my_base: Position) -> Position:
    """The opponent base sits in the corner diagonally opposite ours."""
    if my_base.x == 0:
        return Position.bottom_right()
    return Position.top_left()


class GameSession:
    """
    State that outlives a single turn: the two bases, the hero roster and the
    turn counter. Everything else is rebuilt from each snapshot.
    """

    def __init__(
        self,
        setup: GameSetup,
        coordinator: Optional[TurnCoordinator] = None,
        sign_actions: bool = True,
    ):
        my_corner = Position(setup.base_x, setup.base_y)
        self.my_base = Structure(my_corner)
        self.op_base = Structure(opponent_base_for(my_corner))
        self.roster = HeroRoster(my_corner)
        self.coordinator = coordinator or TurnCoordinator()
        self.sign_actions = sign_actions
        self.turn = 0

        logger.info(f"Base at {my_corner}, opponent base at {self.op_base.position}")

    def play(self, snapshot: TurnSnapshot) -> TurnResult:
        """Advance the turn counter and decide every hero's action."""
        self.turn += 1
        self.my_base.health = snapshot.my_base.health
        self.op_base.health = snapshot.op_base.health

        heroes: List[Hero] = []
        monsters: List[Monster] = []
        opponents: List[Opponent] = []

        for record in snapshot.entities:
            position = Position(record.x, record.y)
            if record.type == TYPE_HERO:
                heroes.append(self.roster.observe(record.id, position, record.shield_life))
            elif record.type == TYPE_MONSTER:
                near_base, threat = _monster_fields(record)
                monsters.append(Monster.observe(
                    id=record.id,
                    position=position,
                    health=record.health,
                    heading=Position(record.vx, record.vy),
                    shield_life=record.shield_life,
                    near_base=near_base,
                    threat=threat,
                    my_base=self.my_base.position,
                    op_base=self.op_base.position,
                ))
            elif record.type == TYPE_OPPONENT:
                opponents.append(Opponent(
                    id=record.id,
                    position=position,
                    shield_life=record.shield_life,
                ))

        return self.coordinator.play_turn(
            heroes=heroes,
            monsters=monsters,
            opponents=opponents,
            my_base=self.my_base,
            op_base=self.op_base,
            mana=snapshot.my_base.mana,
            turn=self.turn,
        )

    def play_lines(self, snapshot: TurnSnapshot) -> List[str]:
        """Play a turn and render each hero's action as a host command line."""
        result = self.play(snapshot)
        return [
            format_action(d.action, d.hero.name if self.sign_actions else None)
            for d in result.decisions
        ]
