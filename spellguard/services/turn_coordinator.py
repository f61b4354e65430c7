"""Turn Coordinator.

Runs the decision engine for each hero in slot order and applies the
consequences between heroes: the mana of a spell is spent, and every entity
the spell claimed disappears from the pools the next heroes see. This is how
two heroes avoid spending mana on the same target in one turn.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .actions import Action
from .decision_engine import DecisionContext, DecisionEngine
from .hero_profiles import Hero
from .motion import Monster, Opponent, Structure


logger = logging.getLogger(__name__)


@dataclass
class TurnDecision:
    """The action one hero committed to, in the order it was decided."""
    hero: Hero
    action: Action


@dataclass
class TurnResult:
    decisions: List[TurnDecision] = field(default_factory=list)
    mana_left: int = 0

    @property
    def actions(self) -> List[Action]:
        return [d.action for d in self.decisions]


class TurnCoordinator:
    """Sequential per-turn driver over a DecisionEngine."""

    def __init__(self, engine: Optional[DecisionEngine] = None):
        self.engine = engine or DecisionEngine()

    def play_turn(
        self,
        heroes: List[Hero],
        monsters: List[Monster],
        opponents: List[Opponent],
        my_base: Structure,
        op_base: Structure,
        mana: int,
        turn: int,
    ) -> TurnResult:
        """
        Decide one action per hero.

        Hazards already hitting a structure are dropped first; passive melee
        handles them. The caller's lists are never mutated.
        """
        if not heroes:
            raise ValueError("Cannot play a turn without heroes")

        squad = sorted(heroes, key=lambda h: h.slot)
        monster_pool = [m for m in monsters if not m.is_at_impact]
        opponent_pool = list(opponents)
        result = TurnResult(mana_left=mana)

        logger.debug(
            f"Turn {turn}: mana {mana}, {len(monster_pool)}/{len(monsters)} hazards in play, "
            f"{len(opponent_pool)} opponents"
        )

        for hero in squad:
            ctx = DecisionContext(
                hero=hero,
                heroes=squad,
                monsters=list(monster_pool),
                opponents=list(opponent_pool),
                my_base=my_base,
                op_base=op_base,
                mana=result.mana_left,
                turn=turn,
            )
            action = self.engine.decide(ctx)
            result.mana_left -= action.mana_cost
            result.decisions.append(TurnDecision(hero=hero, action=action))

            if action.claimed:
                claimed = set(action.claimed)
                logger.debug(f"Hero {hero.name} claims {sorted(claimed)}")
                monster_pool = [m for m in monster_pool if m.id not in claimed]
                opponent_pool = [o for o in opponent_pool if o.id not in claimed]

        return result
