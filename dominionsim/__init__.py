"""Simulator of the Dominion deck-building card game, with an interactive text player and a scripted game."""

__version__ = "0.1.0"
__all__ = ["cards", "effects", "game", "interface", "playdom", "player", "rngs"]