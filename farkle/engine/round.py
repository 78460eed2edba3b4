"""
Farkle - Round State Machine

Plays turns until the player busts or banks. Busting forfeits every
unbanked point in the round.
"""

import logging

from farkle.engine.base import (
    TOTAL_DICE,
    RoundOutcome,
    RoundResult,
    TurnOutcome,
    TurnResult,
)
from farkle.engine.collaborators import (
    BankPrompt,
    DieSource,
    DisplaySink,
    KeepPrompt,
    NullDisplay,
    QuitRequested,
)
from farkle.engine.turn import play_turn

logger = logging.getLogger(__name__)


def play_round(
    die_source: DieSource,
    keep_prompt: KeepPrompt,
    bank_prompt: BankPrompt,
    display: DisplaySink | None = None,
) -> RoundResult:
    """
    Play a round, starting from a full pool of six dice.

    Returns:
        RoundResult with the banked score, or 0 if the round busted or the
        player quit
    """
    display = display or NullDisplay()
    round_score = 0
    pool_size = TOTAL_DICE
    turns: list[TurnResult] = []

    while True:
        turn = play_turn(pool_size, die_source, keep_prompt, display)
        turns.append(turn)

        if turn.outcome == TurnOutcome.QUIT:
            return RoundResult(outcome=RoundOutcome.QUIT, score=0, turns=tuple(turns))

        if turn.outcome == TurnOutcome.BUSTED:
            logger.info("Round busted after %d turns, %d points lost", len(turns), round_score)
            return RoundResult(outcome=RoundOutcome.BUSTED, score=0, turns=tuple(turns))

        round_score += turn.score
        pool_size = turn.next_pool_size
        display.show_round_score(round_score)

        reply = bank_prompt.prompt_bank()
        if isinstance(reply, QuitRequested):
            logger.info("Player quit with %d unbanked points", round_score)
            return RoundResult(outcome=RoundOutcome.QUIT, score=0, turns=tuple(turns))
        if reply.bank:
            logger.info("Round banked for %d points after %d turns", round_score, len(turns))
            return RoundResult(outcome=RoundOutcome.BANKED, score=round_score, turns=tuple(turns))
