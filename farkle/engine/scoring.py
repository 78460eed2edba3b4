"""
Farkle - Score Calculator

Scores a kept set of dice. All functions are pure.

Scoring Rules:
    - Two triplets: 2,500 points
    - Three pair: 1,500 points
    - 1-2-3-4-5-6 (Straight): 1,500 points
    - Six of a kind: 5,000 points
    - Five of a kind: 3,000 points, plus leftover singles
    - Four of a kind: 2,000 points, plus leftover singles
    - Three 1s: 1,000 points, plus leftover singles
    - Three of X (2-6): X × 100 points, plus leftover singles
    - Single 1: 100 points
    - Single 5: 50 points

A set in which nothing scores is a Farkle.
"""

import logging
from typing import Sequence

from farkle.engine.base import (
    FIVE_OF_A_KIND_POINTS,
    FOUR_OF_A_KIND_POINTS,
    SINGLE_FIVE_POINTS,
    SINGLE_ONE_POINTS,
    SIX_OF_A_KIND_POINTS,
    STRAIGHT_POINTS,
    THREE_OF_A_KIND_MULTIPLIER,
    THREE_ONES_POINTS,
    THREE_PAIR_POINTS,
    TWO_TRIPLETS_POINTS,
    Combination,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from farkle.engine.combinations import classify, keep_repeats, strip_repeats
from farkle.engine.validators import validate_dice_values

logger = logging.getLogger(__name__)

_FIXED_POINTS: dict[Combination, int] = {
    Combination.TWO_TRIPLETS: TWO_TRIPLETS_POINTS,
    Combination.THREE_PAIR: THREE_PAIR_POINTS,
    Combination.STRAIGHT: STRAIGHT_POINTS,
    Combination.SIX_OF_A_KIND: SIX_OF_A_KIND_POINTS,
    Combination.FIVE_OF_A_KIND: FIVE_OF_A_KIND_POINTS,
    Combination.FOUR_OF_A_KIND: FOUR_OF_A_KIND_POINTS,
}

_DESCRIPTIONS: dict[Combination, str] = {
    Combination.TWO_TRIPLETS: "Two triplets",
    Combination.THREE_PAIR: "Three pair",
    Combination.STRAIGHT: "Straight (1-2-3-4-5-6)",
    Combination.SIX_OF_A_KIND: "Six of a kind",
    Combination.FIVE_OF_A_KIND: "Five of a kind",
    Combination.FOUR_OF_A_KIND: "Four of a kind",
}


def three_of_a_kind_points(value: int) -> int:
    """Three 1s score 1000; three of any other value score value × 100."""
    if value == 1:
        return THREE_ONES_POINTS
    return value * THREE_OF_A_KIND_MULTIPLIER


def _group_breakdown(
    combination: Combination,
    values: tuple[int, ...]
) -> ScoringBreakdown | None:
    """Score the named combination on its own, without leftovers."""
    if combination == Combination.NONE:
        return None

    if combination.consumes_all_dice:
        group = values
    else:
        group = keep_repeats(values)

    if combination == Combination.THREE_OF_A_KIND:
        face = group[0]
        points = three_of_a_kind_points(face)
        description = f"Three {face}s"
    else:
        points = _FIXED_POINTS[combination]
        description = _DESCRIPTIONS[combination]

    return ScoringBreakdown(
        category=ScoringCategory.COMBINATION,
        dice_values=group,
        points=points,
        description=description,
        combination=combination,
    )


def _leftover_breakdown(values: tuple[int, ...]) -> list[ScoringBreakdown]:
    """
    Score single 1s and 5s among the dice outside any 3+ group.

    Pairs count as two singles.
    """
    breakdown: list[ScoringBreakdown] = []
    leftovers = strip_repeats(values)

    ones = leftovers.count(1)
    if ones:
        breakdown.append(ScoringBreakdown(
            category=ScoringCategory.SINGLE_ONE,
            dice_values=(1,) * ones,
            points=ones * SINGLE_ONE_POINTS,
            description=f"{ones}x Single 1{'s' if ones > 1 else ''}",
        ))

    fives = leftovers.count(5)
    if fives:
        breakdown.append(ScoringBreakdown(
            category=ScoringCategory.SINGLE_FIVE,
            dice_values=(5,) * fives,
            points=fives * SINGLE_FIVE_POINTS,
            description=f"{fives}x Single 5{'s' if fives > 1 else ''}",
        ))

    return breakdown


def calculate_score(dice: Sequence[int]) -> ScoringResult:
    """
    Calculate the score for a kept set of dice.

    The combination is scored first. Two triplets, three pair, a straight
    and six of a kind use every die and end scoring there. Three, four and
    five of a kind add their group score to the leftover 1s and 5s found
    outside the group.

    Args:
        dice: The kept dice (zero to six values in 1..6)

    Returns:
        ScoringResult with total points, verdict and breakdown

    Raises:
        InvalidInputError: If the dice set is out of domain
    """
    values = validate_dice_values(dice)
    combination = classify(values)

    breakdown: list[ScoringBreakdown] = []
    group = _group_breakdown(combination, values)
    if group is not None:
        breakdown.append(group)

    if not combination.consumes_all_dice:
        breakdown.extend(_leftover_breakdown(values))

    points = sum(item.points for item in breakdown)
    if points == 0:
        logger.debug("No scoring dice in %s", values)
    else:
        logger.debug("Scored %s as %s for %d points", values, combination.name, points)

    return ScoringResult(
        dice=values,
        combination=combination,
        points=points,
        breakdown=tuple(breakdown),
    )


def get_score(dice: Sequence[int]) -> int:
    """Point total for a kept set of dice; 0 means Farkle."""
    return calculate_score(dice).points
