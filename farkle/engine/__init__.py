"""
Farkle Game Engine.

Pure Python game logic with zero console dependencies.
Handles combination classification, scoring, turns, rounds and the game loop.
"""

from farkle.engine.base import (
    TOTAL_DICE,
    WINNING_SCORE,
    Combination,
    GameOutcome,
    GameResult,
    InvalidInputError,
    RoundOutcome,
    RoundResult,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    TurnOutcome,
    TurnPhase,
    TurnResult,
)
from farkle.engine.collaborators import (
    BankDecision,
    NullDisplay,
    QuitRequested,
    Selection,
)
from farkle.engine.combinations import (
    classify,
    is_of_a_kind,
    is_straight,
    is_three_pair,
    is_two_triplets,
    keep_repeats,
    strip_repeats,
)
from farkle.engine.dice import RandomDieSource, count_dice, roll_dice
from farkle.engine.game import play_game
from farkle.engine.round import play_round
from farkle.engine.scoring import calculate_score, get_score
from farkle.engine.turn import next_pool_size, play_turn, resolve_turn

__all__ = [
    # Constants
    "TOTAL_DICE",
    "WINNING_SCORE",
    # Data Classes
    "GameResult",
    "RoundResult",
    "ScoringBreakdown",
    "ScoringResult",
    "TurnResult",
    # Enums
    "Combination",
    "GameOutcome",
    "RoundOutcome",
    "ScoringCategory",
    "TurnOutcome",
    "TurnPhase",
    # Errors
    "InvalidInputError",
    # Collaborator replies
    "BankDecision",
    "NullDisplay",
    "QuitRequested",
    "Selection",
    # Dice
    "RandomDieSource",
    "count_dice",
    "roll_dice",
    # Classifier
    "classify",
    "is_of_a_kind",
    "is_straight",
    "is_three_pair",
    "is_two_triplets",
    "keep_repeats",
    "strip_repeats",
    # Scoring
    "calculate_score",
    "get_score",
    # State machines
    "next_pool_size",
    "play_game",
    "play_round",
    "play_turn",
    "resolve_turn",
]
