"""
Farkle - Game Engine Base Classes

This module defines the foundational constants, enums and result types used
throughout the game engine. All result classes are immutable (frozen
dataclasses) so that state is passed between the turn, round and game loops
by value rather than shared.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


# Standing pool size and die faces
TOTAL_DICE = 6
MIN_FACE = 1
MAX_FACE = 6

# Score needed to finish a game
WINNING_SCORE = 10_000

# Scoring values
TWO_TRIPLETS_POINTS = 2500
THREE_PAIR_POINTS = 1500
STRAIGHT_POINTS = 1500
SIX_OF_A_KIND_POINTS = 5000
FIVE_OF_A_KIND_POINTS = 3000
FOUR_OF_A_KIND_POINTS = 2000
THREE_ONES_POINTS = 1000
THREE_OF_A_KIND_MULTIPLIER = 100
SINGLE_ONE_POINTS = 100
SINGLE_FIVE_POINTS = 50


class InvalidInputError(ValueError):
    """Raised when the engine is handed dice or selections outside its domain."""


class Combination(Enum):
    """Named scoring patterns, in the order they are tested."""
    TWO_TRIPLETS = auto()
    THREE_PAIR = auto()
    STRAIGHT = auto()
    SIX_OF_A_KIND = auto()
    FIVE_OF_A_KIND = auto()
    FOUR_OF_A_KIND = auto()
    THREE_OF_A_KIND = auto()
    NONE = auto()

    @property
    def consumes_all_dice(self) -> bool:
        """True for patterns scored without any leftover 1s/5s."""
        return self in (
            Combination.TWO_TRIPLETS,
            Combination.THREE_PAIR,
            Combination.STRAIGHT,
            Combination.SIX_OF_A_KIND,
        )


class ScoringCategory(Enum):
    """Kinds of scoring component reported in a breakdown."""
    COMBINATION = auto()
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()


class TurnPhase(Enum):
    """Phases of a single roll-keep cycle."""
    ROLLING = auto()
    AWAITING_KEEP_SELECTION = auto()
    SCORED = auto()


class TurnOutcome(Enum):
    """How a single roll-keep cycle ended."""
    CONTINUE = auto()
    BUSTED = auto()
    QUIT = auto()


class RoundOutcome(Enum):
    """How a round ended."""
    BANKED = auto()
    BUSTED = auto()
    QUIT = auto()


class GameOutcome(Enum):
    """How a game ended."""
    WON = auto()
    QUIT = auto()


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a kept set.

    Attributes:
        category: Whether this is a named combination or a leftover single
        dice_values: The dice that contributed to this score
        points: Points awarded for this component
        description: Human-readable description
        combination: The combination verdict (COMBINATION category only)
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str
    combination: Combination = Combination.NONE


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a kept set of dice.

    Attributes:
        dice: The dice that were scored
        combination: The single combination verdict that applied
        points: Total points scored
        breakdown: Individual scoring components
    """
    dice: tuple[int, ...]
    combination: Combination
    points: int
    breakdown: tuple[ScoringBreakdown, ...] = field(default_factory=tuple)

    @property
    def is_farkle(self) -> bool:
        """Returns True if nothing in the set scored."""
        return self.points == 0

    def __str__(self) -> str:
        if self.is_farkle:
            return "FARKLE! No scoring dice."
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class TurnResult:
    """
    Result of one roll-keep cycle.

    Attributes:
        outcome: CONTINUE, BUSTED or QUIT
        pool_size: Number of dice that were rolled
        rolled: The rolled dice, in roll order
        kept: The kept dice, in roll order
        score: Points scored by the kept dice (0 on bust or quit)
        next_pool_size: Dice to roll next cycle (None unless CONTINUE)
    """
    outcome: TurnOutcome
    pool_size: int
    rolled: tuple[int, ...] = field(default_factory=tuple)
    kept: tuple[int, ...] = field(default_factory=tuple)
    score: int = 0
    next_pool_size: int | None = None

    @property
    def kept_count(self) -> int:
        return len(self.kept)

    @property
    def is_hot_dice(self) -> bool:
        """All rolled dice were kept and scored."""
        return self.outcome == TurnOutcome.CONTINUE and self.kept_count >= self.pool_size

    def as_tuple(self) -> tuple[int, int]:
        """The (turn score, dice kept count) pair."""
        return self.score, self.kept_count


@dataclass(frozen=True)
class RoundResult:
    """
    Result of a round.

    Attributes:
        outcome: BANKED, BUSTED or QUIT
        score: Banked score, or 0 when busted or quit
        turns: Every turn played during the round
    """
    outcome: RoundOutcome
    score: int
    turns: tuple[TurnResult, ...] = field(default_factory=tuple)

    @property
    def unbanked_score(self) -> int:
        """Points accrued by scoring turns, whether or not they were banked."""
        return sum(
            turn.score for turn in self.turns
            if turn.outcome == TurnOutcome.CONTINUE
        )


@dataclass(frozen=True)
class GameResult:
    """
    Result of a whole game.

    Attributes:
        outcome: WON or QUIT
        total_score: Sum of every round's score
        rounds: Every round played
    """
    outcome: GameOutcome
    total_score: int
    rounds: tuple[RoundResult, ...] = field(default_factory=tuple)

    @property
    def rounds_played(self) -> int:
        return len(self.rounds)
