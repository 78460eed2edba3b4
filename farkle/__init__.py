"""Farkle: scoring, turn and round logic for the dice game, with a console shell."""

__version__ = "0.1.0"
