# Core decision engine
from .geometry import Position, MapTriangle
from .motion import Monster, Opponent, Structure, Threat
from .utility import utility_score
from .hero_profiles import Hero, HeroRoster, Character, HeroProfile, profile_for
from .actions import Action, ActionType
from .decision_engine import DecisionEngine, DecisionContext
from .turn_coordinator import TurnCoordinator, TurnResult, TurnDecision

# Host protocol
from .protocol import ProtocolError, read_setup, read_turn, format_action
from .game_session import GameSession

__all__ = [
    "Position",
    "MapTriangle",
    "Monster",
    "Opponent",
    "Structure",
    "Threat",
    "utility_score",
    "Hero",
    "HeroRoster",
    "Character",
    "HeroProfile",
    "profile_for",
    "Action",
    "ActionType",
    "DecisionEngine",
    "DecisionContext",
    "TurnCoordinator",
    "TurnResult",
    "TurnDecision",
    "ProtocolError",
    "read_setup",
    "read_turn",
    "format_action",
    "GameSession",
]
