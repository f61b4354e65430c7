"""Spellguard - per-turn decision engine for a three-hero base defense bot."""

__version__ = "1.0.0"
