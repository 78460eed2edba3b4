"""
Farkle - Turn State Machine

One roll-keep cycle:

    ROLLING -> AWAITING_KEEP_SELECTION -> SCORED -> CONTINUE | BUSTED

A cycle busts when no dice are kept or the kept dice score nothing.
Otherwise the next pool is the dice left over, or a fresh six when every
rolled die was kept (hot dice).
"""

import logging
from typing import Iterable

from farkle.engine.base import (
    TOTAL_DICE,
    InvalidInputError,
    TurnOutcome,
    TurnPhase,
    TurnResult,
)
from farkle.engine.collaborators import (
    DieSource,
    DisplaySink,
    KeepPrompt,
    NullDisplay,
    QuitRequested,
)
from farkle.engine.dice import roll_dice
from farkle.engine.scoring import calculate_score
from farkle.engine.validators import (
    validate_dice_values,
    validate_keep_positions,
    validate_pool_size,
)

logger = logging.getLogger(__name__)


def next_pool_size(pool_size: int, kept_count: int) -> int:
    """Dice to roll next cycle: what is left, or all six after hot dice."""
    remaining = pool_size - kept_count
    if remaining <= 0:
        return TOTAL_DICE
    return remaining


def select_kept(dice: tuple[int, ...], positions: Iterable[int]) -> tuple[int, ...]:
    """Dice at the given 1-indexed positions, in roll order."""
    chosen = set(validate_keep_positions(positions, len(dice)))
    return tuple(die for pos, die in enumerate(dice, start=1) if pos in chosen)


def resolve_turn(
    pool_size: int,
    rolled: Iterable[int],
    positions: Iterable[int]
) -> TurnResult:
    """
    Score a keep selection against a roll and decide how the cycle ends.

    Args:
        pool_size: Number of dice that were rolled
        rolled: The rolled dice
        positions: 1-indexed positions of the kept dice

    Returns:
        TurnResult with outcome BUSTED or CONTINUE

    Raises:
        InvalidInputError: If the roll does not match the pool or positions are invalid
    """
    validate_pool_size(pool_size)
    dice = validate_dice_values(tuple(rolled))
    if len(dice) != pool_size:
        raise InvalidInputError(f"Expected {pool_size} rolled dice, got {len(dice)}.")

    kept = select_kept(dice, positions)
    score = calculate_score(kept).points

    if not kept or score == 0:
        logger.debug("Turn busted: kept %s from %s", kept, dice)
        return TurnResult(
            outcome=TurnOutcome.BUSTED,
            pool_size=pool_size,
            rolled=dice,
            kept=kept,
            score=0,
        )

    next_pool = next_pool_size(pool_size, len(kept))
    logger.debug(
        "Turn scored %d with %d of %d dice kept; next pool %d",
        score, len(kept), pool_size, next_pool,
    )
    return TurnResult(
        outcome=TurnOutcome.CONTINUE,
        pool_size=pool_size,
        rolled=dice,
        kept=kept,
        score=score,
        next_pool_size=next_pool,
    )


def play_turn(
    pool_size: int,
    die_source: DieSource,
    keep_prompt: KeepPrompt,
    display: DisplaySink | None = None,
) -> TurnResult:
    """
    Run one roll-keep cycle against the collaborators.

    Args:
        pool_size: Number of dice to roll (1-6)
        die_source: Supplies each die face
        keep_prompt: Chooses which rolled dice to keep
        display: Receives the roll, the kept dice and the score

    Returns:
        TurnResult; outcome QUIT if the player quit at the keep prompt
    """
    display = display or NullDisplay()

    phase = TurnPhase.ROLLING
    logger.debug("Turn phase %s for %d dice", phase.name, pool_size)
    dice = roll_dice(pool_size, die_source)
    display.show_roll(dice)

    phase = TurnPhase.AWAITING_KEEP_SELECTION
    logger.debug("Turn phase %s", phase.name)
    reply = keep_prompt.prompt_keep(pool_size)
    if isinstance(reply, QuitRequested):
        logger.info("Player quit while choosing dice to keep")
        return TurnResult(outcome=TurnOutcome.QUIT, pool_size=pool_size, rolled=dice)

    phase = TurnPhase.SCORED
    result = resolve_turn(pool_size, dice, reply.positions)
    logger.debug("Turn phase %s -> %s", phase.name, result.outcome.name)

    display.show_kept(result.kept)
    if result.outcome == TurnOutcome.BUSTED:
        display.show_farkle()
    else:
        display.show_turn_score(result.score, result.is_hot_dice)
    return result
