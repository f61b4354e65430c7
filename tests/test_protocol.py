"""Tests for protocol.py"""

import pytest

from spellguard.services.actions import Action
from spellguard.services.geometry import Position
from spellguard.services.protocol import (
    TYPE_HERO, TYPE_MONSTER, TYPE_OPPONENT, ProtocolError, format_action, read_setup,
    read_turn,
)


TURN_LINES = [
    "3 10",
    "3 0",
    "2",
    "5 0 1000 2000 0 0 12 1200 2100 1 1",
    "0 1 2200 2200 0 0 0 0 0 0 0",
]


class TestReadSetup:
    """Tests for the game setup lines."""

    def test_reads_base_and_hero_count(self):
        setup = read_setup(iter(["17630 9000", "3"]))

        assert (setup.base_x, setup.base_y) == (17630, 9000)
        assert setup.heroes_per_player == 3

    def test_negative_corner_rejected(self):
        with pytest.raises(ProtocolError):
            read_setup(iter(["-1 0", "3"]))

    def test_empty_input_is_end_of_game(self):
        with pytest.raises(EOFError):
            read_setup(iter([]))


class TestReadTurn:
    """Tests for the per-turn snapshot."""

    def test_reads_bases_and_entities(self):
        snapshot = read_turn(iter(TURN_LINES))

        assert snapshot.my_base.health == 3
        assert snapshot.my_base.mana == 10
        assert len(snapshot.entities) == 2

        monster, hero = snapshot.entities
        assert monster.type == TYPE_MONSTER
        assert (monster.id, monster.health, monster.vx, monster.vy) == (5, 12, 1200, 2100)
        assert monster.near_base == 1
        assert monster.is_controlled is False
        assert monster.threat_for == 1
        assert hero.type == TYPE_HERO

    def test_hero_rows_carry_minus_one_in_monster_fields(self):
        lines = ["3 0", "3 0", "2", "0 1 1414 849 0 0 -1 -1 -1 -1 -1", "3 2 16216 8151 0 0 -1 -1 -1 -1 -1"]
        hero, opponent = read_turn(iter(lines)).entities

        assert (hero.health, hero.near_base, hero.threat_for) == (-1, -1, -1)
        assert opponent.type == TYPE_OPPONENT

    def test_no_entities(self):
        snapshot = read_turn(iter(["3 0", "3 0", "0"]))
        assert snapshot.entities == []

    def test_wrong_field_count(self):
        lines = TURN_LINES[:3] + ["5 0 1000 2000 0 0 12"]
        with pytest.raises(ProtocolError) as exc_info:
            read_turn(iter(lines))
        assert exc_info.value.line == "5 0 1000 2000 0 0 12"

    def test_non_integer_field(self):
        with pytest.raises(ProtocolError):
            read_turn(iter(["3 ten", "3 0", "0"]))

    def test_unknown_entity_type(self):
        lines = TURN_LINES[:2] + ["1", "5 7 1000 2000 0 0 12 1200 2100 1 1"]
        with pytest.raises(ProtocolError):
            read_turn(iter(lines))

    def test_negative_entity_count(self):
        with pytest.raises(ProtocolError):
            read_turn(iter(["3 0", "3 0", "-2"]))

    def test_negative_mana(self):
        with pytest.raises(ProtocolError):
            read_turn(iter(["3 -5", "3 0", "0"]))

    def test_stream_closed_mid_turn(self):
        with pytest.raises(EOFError):
            read_turn(iter(TURN_LINES[:4]))


class TestFormatAction:
    """Tests for command lines sent back to the host."""

    def test_wait(self):
        assert format_action(Action.wait()) == "WAIT"

    def test_signed_wait(self):
        assert format_action(Action.wait(), "REX") == "WAIT REX Confundo"

    def test_signed_move(self):
        assert format_action(Action.move(Position(2200, 2200)), "REX") == "MOVE 2200 2200 REX Accio"

    def test_coordinates_are_rounded(self):
        assert format_action(Action.move(Position(100.6, 200.4))) == "MOVE 101 200"

    def test_wind(self):
        action = Action.wind(Position.bottom_right(), [1, 2])
        assert format_action(action, "TAU") == "SPELL WIND 17630 9000 TAU Leviossa"

    def test_shield(self):
        assert format_action(Action.shield(3)) == "SPELL SHIELD 3"

    def test_control(self):
        assert format_action(Action.control(7, Position.center())) == "SPELL CONTROL 7 8815 4500"
        assert format_action(Action.control(7, Position.center()), "TEX").endswith("TEX Imperius")
