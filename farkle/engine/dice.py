"""
Farkle - Dice

Counting dice values and rolling dice from a die source.
"""

import logging
import random
from collections import Counter
from typing import Sequence

from farkle.engine.base import MAX_FACE, MIN_FACE
from farkle.engine.collaborators import DieSource
from farkle.engine.validators import (
    validate_dice_values,
    validate_die_value,
    validate_pool_size,
)

logger = logging.getLogger(__name__)


def count_dice(dice: Sequence[int]) -> Counter[int]:
    """Map each die value to how many times it appears in ``dice``."""
    return Counter(validate_dice_values(dice))


class RandomDieSource:
    """Uniform, independent D6 draws. Pass a seed for reproducible games."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next_die(self) -> int:
        return self._rng.randint(MIN_FACE, MAX_FACE)


def roll_dice(count: int, source: DieSource) -> tuple[int, ...]:
    """
    Roll ``count`` dice, drawing each one from ``source``.

    Raises:
        InvalidInputError: If count is outside 1..6 or the source yields a bad face
    """
    validate_pool_size(count)
    values = tuple(validate_die_value(source.next_die()) for _ in range(count))
    logger.debug("Rolled %d dice: %s", count, values)
    return values
