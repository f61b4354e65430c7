"""
Decision Engine - per-hero greedy utility scorer

Each turn every hero walks the same ordered list of candidate evaluators:

1. EMERGENCY PUSH      - wind a hazard that melee cannot kill in time
2. CHARM OPPONENT      - control the opponent hero deepest in a half
3. SHIELD HAZARD       - protect a hazard on its way into the opponent base
4. CHARM HAZARD        - emergency control, else steer a wandering hazard
                         toward the opponent base
5. INTERCEPT / DEFEND  - move to meet a hazard
6. RETURN TO GUARD     - drift back to the guard post
7. SUPPORT SHIELD      - nothing else to do: shield an ally
8. WAIT

Evaluators yield scored candidates. The running best only changes on a
strictly greater score, so ties keep the earlier candidate. An emergency
candidate stops the walk and is committed unscored.

The engine is pure: it returns an Action and never touches mana or the
shared pools. The TurnCoordinator owns those side effects.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from .actions import Action
from .geometry import Position, MapTriangle, distance, containing_map_triangle
from .hero_profiles import Hero
from .motion import Monster, Opponent, Structure, Threat, time_to_intercept
from .rules import (
    HERO_DAMAGE, HERO_DAMAGE_RANGE, HERO_SPEED, MELEE_KILL_FACTOR,
    MONSTER_VISIBILITY_RANGE, SPELL_COST, WIND_RANGE, SHIELD_RANGE,
    SHIELD_LIFE, CONTROL_RANGE, GOLDEN_RATIO,
)
from .utility import utility_score


logger = logging.getLogger(__name__)


@dataclass
class DecisionContext:
    """Everything one hero sees when it decides."""
    hero: Hero
    heroes: List[Hero]          # the whole squad, including `hero`
    monsters: List[Monster]     # hazards not yet claimed this turn
    opponents: List[Opponent]   # opponent heroes not yet claimed this turn
    my_base: Structure
    op_base: Structure
    mana: int
    turn: int

    @property
    def can_cast(self) -> bool:
        return self.mana >= SPELL_COST


@dataclass
class Candidate:
    """A scored action. Emergency candidates bypass scoring."""
    label: str
    score: float
    action: Action
    emergency: bool = False


# =============================================================================
# RANGE HELPERS
# =============================================================================

def monsters_in_range(hero: Hero, monsters: List[Monster], reach: float) -> List[Monster]:
    return [m for m in monsters if distance(m.position, hero.position) <= reach]


def opponents_in_range(hero: Hero, opponents: List[Opponent], reach: float) -> List[Opponent]:
    """Opponents that stay in reach even after stepping a full turn away."""
    return [o for o in opponents if distance(o.position, hero.position) <= reach - HERO_SPEED]


def allies_in_range(hero: Hero, heroes: List[Hero], reach: float) -> List[Hero]:
    return [
        h for h in heroes
        if h.id != hero.id and distance(h.position, hero.position) <= reach - HERO_SPEED
    ]


def melee_cannot_stop(monster: Monster) -> bool:
    """True when the hazard reaches our base before the squad can cut it down."""
    turns_to_kill = math.ceil(monster.health / (HERO_DAMAGE * MELEE_KILL_FACTOR))
    return monster.time_to_reach_my_base <= turns_to_kill


def about_to_be_meleed(monster: Monster, ctx: DecisionContext) -> bool:
    """Any hero, ours or theirs, within one step of hitting the hazard."""
    reach = HERO_DAMAGE_RANGE + HERO_SPEED
    if any(distance(h.position, monster.position) <= reach for h in ctx.heroes):
        return True
    return any(distance(o.position, monster.position) <= reach for o in ctx.opponents)


def ahead_of_squad(monster: Monster, ctx: DecisionContext) -> bool:
    """The hazard is closer to the opponent base than every one of our heroes."""
    return all(
        monster.distance_from_op_base < distance(ctx.op_base.position, h.position)
        for h in ctx.heroes
    )


def control_aim_point(monster: Monster, op_base: Position) -> Position:
    """
    Corner of the opponent base's visibility range on the hazard's side of
    the diagonal, so the charmed hazard walks in along an arena edge.
    """
    offset = MONSTER_VISIBILITY_RANGE / GOLDEN_RATIO
    op_at_origin = op_base.x == 0
    if containing_map_triangle(monster.position) == MapTriangle.UPPER:
        if op_at_origin:
            return Position(0, offset)
        return Position(op_base.x - offset, op_base.y)
    if op_at_origin:
        return Position(offset, 0)
    return Position(op_base.x, op_base.y - offset)


# =============================================================================
# DECISION ENGINE
# =============================================================================

class DecisionEngine:
    """
    Picks exactly one action per hero per turn.

    Candidate evaluators are plain generator methods, walked in a fixed
    order. See the module docstring for the order and the tie rules.
    """

    def __init__(self, log_candidate_scores: bool = False):
        self.log_candidate_scores = log_candidate_scores
        self.evaluators: List[Callable[[DecisionContext], Iterator[Candidate]]] = [
            self._emergency_push,
            self._charm_opponent,
            self._shield_monster,
            self._charm_monster,
            self._intercept_monsters,
            self._return_to_guard,
        ]

    def decide(self, ctx: DecisionContext) -> Action:
        """Score every candidate for ctx.hero and return the winner."""
        best: Optional[Candidate] = None
        best_score = 0.0

        for evaluator in self.evaluators:
            for candidate in evaluator(ctx):
                if candidate.emergency:
                    logger.debug(f"Hero {ctx.hero.name} commits emergency {candidate.label}")
                    return candidate.action
                if self.log_candidate_scores:
                    logger.debug(f"{candidate.label} weight = {candidate.score} for hero {ctx.hero.name}")
                if candidate.score > best_score:
                    best = candidate
                    best_score = candidate.score

        if best is None:
            best = self._support_shield(ctx)

        action = best.action if best is not None else Action.wait()
        logger.debug(f"Hero {ctx.hero.name} chooses {action.kind.value}")
        return action

    # =========================================================================
    # SPELL CANDIDATES (all need mana for one cast)
    # =========================================================================

    def _emergency_push(self, ctx: DecisionContext) -> Iterator[Candidate]:
        """Wind everything in reach toward the opponent base if melee is too slow."""
        if not ctx.can_cast:
            return
        in_reach = [
            m for m in monsters_in_range(ctx.hero, ctx.monsters, WIND_RANGE)
            if not m.is_shielded
        ]
        if any(melee_cannot_stop(m) for m in in_reach):
            yield Candidate(
                label="Emergency wind",
                score=1.0,
                action=Action.wind(ctx.op_base.position, [m.id for m in in_reach]),
                emergency=True,
            )

    def _charm_opponent(self, ctx: DecisionContext) -> Iterator[Candidate]:
        """Send the opponent hero farthest from the middle line to the center."""
        if not ctx.can_cast:
            return
        in_reach = [
            o for o in opponents_in_range(ctx.hero, ctx.opponents, CONTROL_RANGE)
            if not o.is_shielded
        ]
        if not in_reach:
            return

        farthest = in_reach[0]
        for opponent in in_reach[1:]:
            if farthest.distance_from_middle_line < opponent.distance_from_middle_line:
                farthest = opponent

        character = ctx.hero.character
        score = utility_score(
            ctx.turn * ctx.mana * character.prodigal * character.duelist
            * farthest.distance_from_middle_line,
            1,
        )
        # The center is away from both bases.
        yield Candidate(
            label="Op control",
            score=score,
            action=Action.control(farthest.id, Position.center()),
        )

    def _shield_monster(self, ctx: DecisionContext) -> Iterator[Candidate]:
        """Shield a hazard that is about to hit the opponent base unopposed."""
        if not ctx.can_cast:
            return
        character = ctx.hero.character
        for monster in monsters_in_range(ctx.hero, ctx.monsters, SHIELD_RANGE):
            if monster.is_shielded or not ahead_of_squad(monster, ctx):
                continue
            heading_in = (
                monster.threat == Threat.ENEMY_BASE
                or monster.time_to_reach_op_base <= SHIELD_LIFE
            )
            if not heading_in or about_to_be_meleed(monster, ctx):
                continue

            score = utility_score(
                ctx.turn * ctx.mana * character.prodigal * monster.health * character.attacker,
                monster.distance_from_op_base * character.hunter,
            )
            yield Candidate(label="Shield", score=score, action=Action.shield(monster.id))

    def _charm_monster(self, ctx: DecisionContext) -> Iterator[Candidate]:
        """Control a hazard away from our base, or steer a stray into theirs."""
        if not ctx.can_cast:
            return
        in_reach = [
            m for m in monsters_in_range(ctx.hero, ctx.monsters, CONTROL_RANGE)
            if not m.is_shielded
        ]

        # A single control does not fully neutralise the threat; only the
        # controlled hazard is claimed.
        wanted = next((m for m in in_reach if melee_cannot_stop(m)), None)
        if wanted is not None:
            yield Candidate(
                label="Emergency control",
                score=1.0,
                action=Action.control(wanted.id, ctx.op_base.position),
                emergency=True,
            )
            return

        character = ctx.hero.character
        for monster in in_reach:
            if monster.threat != Threat.NEITHER:
                continue
            if not ahead_of_squad(monster, ctx) or about_to_be_meleed(monster, ctx):
                continue

            score = utility_score(
                ctx.turn * ctx.mana * character.prodigal * monster.health * character.attacker,
                monster.distance_from_op_base * character.hunter,
            )
            yield Candidate(
                label="Control",
                score=score,
                action=Action.control(monster.id, control_aim_point(monster, ctx.op_base.position)),
            )

    # =========================================================================
    # MOVEMENT CANDIDATES
    # =========================================================================

    def _intercept_monsters(self, ctx: DecisionContext) -> Iterator[Candidate]:
        """Head for the point where each hazard can be met, one turn ahead."""
        hero = ctx.hero
        character = hero.character
        for monster in ctx.monsters:
            if monster.threat == Threat.ENEMY_BASE:
                continue

            t = time_to_intercept(hero.position, monster)
            meeting_point = monster.position_after(1 if t <= 0 else t + 1)
            if not meeting_point.is_valid():
                continue

            hunt_score = utility_score(
                character.hunter * monster.health,
                ctx.turn * ctx.mana * distance(hero.position, monster.position),
            )
            defend_score = utility_score(
                ctx.turn * character.defender,
                monster.distance_from_my_base,
            )
            yield Candidate(
                label="Move",
                score=max(hunt_score, defend_score),
                action=Action.move(meeting_point),
            )

    def _return_to_guard(self, ctx: DecisionContext) -> Iterator[Candidate]:
        hero = ctx.hero
        score = utility_score(
            distance(hero.position, hero.guard) * hero.character.conservator,
            ctx.turn * hero.character.hunter,
        )
        yield Candidate(label="Guard", score=score, action=Action.move(hero.guard))

    # =========================================================================
    # FALLBACK
    # =========================================================================

    def _support_shield(self, ctx: DecisionContext) -> Optional[Candidate]:
        """Quiet turn with spare mana: shield the first unshielded ally in reach."""
        if not ctx.can_cast:
            return None
        if any(m.threat != Threat.ENEMY_BASE for m in ctx.monsters):
            return None
        # TODO: pick the ally closest to an opponent hero instead of the first one found.
        for ally in allies_in_range(ctx.hero, ctx.heroes, SHIELD_RANGE):
            if not ally.is_shielded:
                return Candidate(label="Support shield", score=0.0, action=Action.shield(ally.id))
        return None
