"""A two-player, turn-based card game played in the terminal, with a text display."""

__version__ = "0.1.0"