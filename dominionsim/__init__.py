"""Dominion card game simulator: rules, seeded randomness, a buying bot, a scripted match and a console."""

__version__ = "0.1.0"
__all__ = ["cards", "effects", "game", "interface", "player", "playdom", "rngs", "rt"]