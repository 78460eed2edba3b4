"""
Farkle - Combination Classifier

Detectors for the named scoring patterns, and ``classify`` which picks the
single pattern that applies to a kept set.

Precedence (first match wins):
    1. Two triplets
    2. Three pair
    3. Straight
    4. Six of a kind
    5. Five of a kind
    6. Four of a kind
    7. Three of a kind
    8. None

Six of a kind also satisfies three of a kind, so detection must run from
the rarest pattern down.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from farkle.engine.base import MAX_FACE, MIN_FACE, Combination, InvalidInputError
from farkle.engine.dice import count_dice

logger = logging.getLogger(__name__)

OF_A_KIND_SIZES = (3, 4, 5, 6)


def is_two_triplets(dice: Sequence[int]) -> bool:
    """True if exactly two values each appear three or more times."""
    counts = count_dice(dice)
    return sum(1 for count in counts.values() if count >= 3) == 2


def is_three_pair(dice: Sequence[int]) -> bool:
    """True if exactly three values each appear exactly twice."""
    counts = count_dice(dice)
    return sum(1 for count in counts.values() if count == 2) == 3


def is_straight(dice: Sequence[int]) -> bool:
    """True if every face 1-6 appears at least once."""
    counts = count_dice(dice)
    return all(counts[face] >= 1 for face in range(MIN_FACE, MAX_FACE + 1))


def is_of_a_kind(n: int, dice: Sequence[int]) -> bool:
    """
    True if some value appears ``n`` or more times.

    Raises:
        InvalidInputError: If n is not one of 3, 4, 5, 6
    """
    if n not in OF_A_KIND_SIZES:
        raise InvalidInputError(f"Of-a-kind size must be one of {OF_A_KIND_SIZES}, got {n}.")
    counts = count_dice(dice)
    return any(count >= n for count in counts.values())


def strip_repeats(dice: Sequence[int]) -> tuple[int, ...]:
    """Dice whose value appears fewer than three times, in their original order."""
    counts = count_dice(dice)
    return tuple(die for die in dice if counts[die] < 3)


def keep_repeats(dice: Sequence[int]) -> tuple[int, ...]:
    """Dice whose value appears three or more times, in their original order."""
    counts = count_dice(dice)
    return tuple(die for die in dice if counts[die] >= 3)


def _of_a_kind(n: int) -> Callable[[Sequence[int]], bool]:
    return lambda dice: is_of_a_kind(n, dice)


_PRECEDENCE: tuple[tuple[Combination, Callable[[Sequence[int]], bool]], ...] = (
    (Combination.TWO_TRIPLETS, is_two_triplets),
    (Combination.THREE_PAIR, is_three_pair),
    (Combination.STRAIGHT, is_straight),
    (Combination.SIX_OF_A_KIND, _of_a_kind(6)),
    (Combination.FIVE_OF_A_KIND, _of_a_kind(5)),
    (Combination.FOUR_OF_A_KIND, _of_a_kind(4)),
    (Combination.THREE_OF_A_KIND, _of_a_kind(3)),
)


def classify(dice: Sequence[int]) -> Combination:
    """
    Return the one combination that applies to ``dice``.

    Args:
        dice: A dice set of at most six values in 1..6

    Returns:
        The first matching Combination in precedence order, or Combination.NONE

    Raises:
        InvalidInputError: If the dice set is out of domain
    """
    for combination, matches in _PRECEDENCE:
        if matches(dice):
            logger.debug("Classified %s as %s", tuple(dice), combination.name)
            return combination
    return Combination.NONE
