"""
Farkle - Console Application

Main entry point. Run with:
    python -m farkle
or the ``farkle`` console script.
"""

from __future__ import annotations

import logging
from typing import Callable

from farkle.config import configure_logging, get_settings
from farkle.engine import GameOutcome, RandomDieSource, play_game
from farkle.ui.console import ConsoleDisplay, ConsolePlayer

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = """
Welcome to Farkle! The rules are simple. You roll 6 dice and try to get
scoring combinations.

Scoring combinations are as follows:
1's: 100 points each
5's: 50 points each
3 of a kind: 1000 points for 3 ones, 200 for 3 twos, 300 for 3 threes, etc.
4 of a kind: 2000 points
5 of a kind: 3000 points
6 of a kind: 5000 points
3 pairs: 1500 points
straight: 1500 points
2 triplets: 2500 points

If you'd like to keep the 1st, 3rd, and 5th dice, you would type '135'.
After every scoring roll you can bank your points for the round by
answering 'y', or keep rolling the dice you have left. If you keep every
die you rolled, you get all six dice back. If you don't get any scoring
combinations, you lose all your points for that round.
Type 'q' at any prompt to quit.
Reach 10,000 points to win!
Good luck!
"""


def main(
    input_fn: Callable[[], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    """Play one game of Farkle on the console. Returns the exit code."""
    settings = get_settings()
    configure_logging(settings)
    logger.debug("Starting game with seed %s", settings.seed)

    if settings.show_welcome:
        output(WELCOME_MESSAGE)

    player = ConsolePlayer(input_fn=input_fn, output=output)
    result = play_game(
        die_source=RandomDieSource(settings.seed),
        keep_prompt=player,
        bank_prompt=player,
        display=ConsoleDisplay(output=output),
    )

    if result.outcome == GameOutcome.WON:
        output("You win! Thanks for playing!")
    else:
        output("Thanks for playing!")
    return 0
