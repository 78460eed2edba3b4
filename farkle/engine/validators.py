"""
Farkle - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise a descriptive InvalidInputError.
"""

from typing import Iterable, Sequence

from farkle.engine.base import MAX_FACE, MIN_FACE, TOTAL_DICE, InvalidInputError


def validate_die_value(value: int) -> int:
    """
    Validate a single die face.

    Raises:
        InvalidInputError: If value is not an integer in 1..6
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Die value must be an integer, got {type(value).__name__}.")
    if not (MIN_FACE <= value <= MAX_FACE):
        raise InvalidInputError(
            f"Die value is {value}, must be between {MIN_FACE} and {MAX_FACE}."
        )
    return value


def validate_dice_values(
    values: Sequence[int],
    max_count: int = TOTAL_DICE
) -> tuple[int, ...]:
    """
    Validate and normalize a dice set.

    Args:
        values: Sequence of dice values to validate
        max_count: Maximum number of dice allowed

    Returns:
        Validated values as a tuple

    Raises:
        InvalidInputError: If there are too many dice or a face is out of range
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count > max_count:
        raise InvalidInputError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (MIN_FACE <= value <= MAX_FACE):
            raise InvalidInputError(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_tuple


def validate_pool_size(pool_size: int) -> int:
    """
    Validate the number of dice to roll.

    Raises:
        InvalidInputError: If pool_size is not in 1..6
    """
    if isinstance(pool_size, bool) or not isinstance(pool_size, int):
        raise InvalidInputError(f"Pool size must be an integer, got {type(pool_size).__name__}.")
    if not (1 <= pool_size <= TOTAL_DICE):
        raise InvalidInputError(f"Pool size must be between 1 and {TOTAL_DICE}, got {pool_size}.")
    return pool_size


def validate_keep_positions(
    positions: Iterable[int],
    pool_size: int
) -> tuple[int, ...]:
    """
    Validate 1-indexed positions of dice to keep.

    Args:
        positions: Positions of the dice to keep, counting from 1
        pool_size: Number of dice that were rolled

    Returns:
        Positions as a sorted tuple

    Raises:
        InvalidInputError: If a position is duplicated or out of range
    """
    positions_tuple = tuple(positions)
    if len(set(positions_tuple)) != len(positions_tuple):
        raise InvalidInputError(f"Keep positions must not repeat, got {positions_tuple}.")

    for pos in positions_tuple:
        if isinstance(pos, bool) or not isinstance(pos, int):
            raise InvalidInputError(f"Keep position must be an integer, got {type(pos).__name__}.")
        if not (1 <= pos <= pool_size):
            raise InvalidInputError(
                f"Keep position {pos} is out of range. Must be between 1 and {pool_size}."
            )

    return tuple(sorted(positions_tuple))
