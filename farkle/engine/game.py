"""
Farkle - Game Loop

Plays rounds, adding each round's score to a running total, until the total
reaches the winning score or the player quits.
"""

import logging

from farkle.engine.base import (
    WINNING_SCORE,
    GameOutcome,
    GameResult,
    RoundOutcome,
    RoundResult,
)
from farkle.engine.collaborators import (
    BankPrompt,
    DieSource,
    DisplaySink,
    KeepPrompt,
    NullDisplay,
)
from farkle.engine.round import play_round

logger = logging.getLogger(__name__)


def play_game(
    die_source: DieSource,
    keep_prompt: KeepPrompt,
    bank_prompt: BankPrompt,
    display: DisplaySink | None = None,
    target: int = WINNING_SCORE,
) -> GameResult:
    """
    Play rounds until ``target`` points are banked.

    Args:
        die_source: Supplies each die face
        keep_prompt: Chooses which rolled dice to keep
        bank_prompt: Decides whether to bank after each scoring turn
        display: Receives progress for display
        target: Total needed to win

    Returns:
        GameResult; outcome QUIT keeps the total banked before quitting
    """
    display = display or NullDisplay()
    total = 0
    rounds: list[RoundResult] = []

    while total < target:
        result = play_round(die_source, keep_prompt, bank_prompt, display)
        rounds.append(result)
        if result.outcome == RoundOutcome.QUIT:
            logger.info("Game ended by player after %d rounds with %d points", len(rounds), total)
            return GameResult(outcome=GameOutcome.QUIT, total_score=total, rounds=tuple(rounds))

        total += result.score
        display.show_total(result.score, total)

    logger.info("Game won with %d points in %d rounds", total, len(rounds))
    return GameResult(outcome=GameOutcome.WON, total_score=total, rounds=tuple(rounds))
