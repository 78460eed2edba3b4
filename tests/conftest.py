"""
Farkle - Test Configuration and Fixtures

Common fixtures, test data and scripted collaborators for all test modules.
"""

from __future__ import annotations

from typing import Callable, Iterable

import pytest

from farkle.config.settings import get_settings
from farkle.engine.collaborators import (
    BankDecision,
    BankReply,
    KeepReply,
    QuitRequested,
    Selection,
)


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def farkle_scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Kept dice patterns with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Six-dice combinations
        "two_triplets": ((1, 1, 1, 2, 2, 2), 2500, "Two triplets"),
        "three_pair": ((1, 1, 2, 2, 3, 3), 1500, "Three pair"),
        "straight": ((1, 2, 3, 4, 5, 6), 1500, "Straight"),
        "straight_shuffled": ((6, 4, 2, 5, 3, 1), 1500, "Straight shuffled"),
        "six_ones": ((1, 1, 1, 1, 1, 1), 5000, "Six 1s"),
        "six_fours": ((4, 4, 4, 4, 4, 4), 5000, "Six 4s"),

        # N of a kind
        "five_ones": ((1, 1, 1, 1, 1), 3000, "Five 1s"),
        "four_ones": ((1, 1, 1, 1), 2000, "Four 1s"),
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_twos": ((2, 2, 2), 200, "Three 2s"),
        "three_sixes": ((6, 6, 6), 600, "Three 6s"),

        # Group plus leftovers
        "three_ones_plus_five": ((1, 1, 1, 5), 1050, "Three 1s + single 5"),
        "three_ones_plus_two_fives": ((1, 1, 1, 5, 5), 1100, "Three 1s + two 5s"),
        "three_fives_plus_two_ones": ((1, 1, 5, 5, 5), 700, "Three 5s + two 1s"),
        "two_ones_and_five": ((1, 1, 5), 250, "Two 1s + single 5"),
        "four_fours_one_five": ((4, 4, 4, 4, 1, 5), 2150, "Four 4s + 1 + 5"),
        "five_twos_plus_one": ((2, 2, 2, 2, 2, 1), 3100, "Five 2s + single 1"),

        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),

        # Farkle
        "bust_roll": ((2, 3, 4, 6), 0, "Bust roll"),
        "empty": ((), 0, "Nothing kept"),
    }


# =============================================================================
# SCRIPTED COLLABORATORS
# =============================================================================

class ScriptedDieSource:
    """Die source that returns a fixed sequence of faces."""

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = list(faces)
        self.draws = 0

    def next_die(self) -> int:
        face = self._faces[self.draws]
        self.draws += 1
        return face


class ScriptedKeepPrompt:
    """Keep prompt that replays scripted positions; ``None`` means quit."""

    def __init__(self, replies: Iterable[Iterable[int] | None]) -> None:
        self._replies = list(replies)
        self.pool_sizes: list[int] = []

    def prompt_keep(self, pool_size: int) -> KeepReply:
        self.pool_sizes.append(pool_size)
        reply = self._replies[len(self.pool_sizes) - 1]
        if reply is None:
            return QuitRequested()
        return Selection(positions=frozenset(reply))


class ScriptedBankPrompt:
    """Bank prompt that replays scripted answers; ``None`` means quit."""

    def __init__(self, replies: Iterable[bool | None]) -> None:
        self._replies = list(replies)
        self.calls = 0

    def prompt_bank(self) -> BankReply:
        reply = self._replies[self.calls]
        self.calls += 1
        if reply is None:
            return QuitRequested()
        return BankDecision(bank=reply)


class RecordingDisplay:
    """Display sink that records every call as (method, args)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, tuple]] = []

    def show_roll(self, dice):
        self.events.append(("roll", (dice,)))

    def show_kept(self, kept):
        self.events.append(("kept", (kept,)))

    def show_turn_score(self, score, hot_dice):
        self.events.append(("turn_score", (score, hot_dice)))

    def show_farkle(self):
        self.events.append(("farkle", ()))

    def show_round_score(self, round_score):
        self.events.append(("round_score", (round_score,)))

    def show_total(self, round_score, total):
        self.events.append(("total", (round_score, total)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def die_source() -> Callable[[Iterable[int]], ScriptedDieSource]:
    return ScriptedDieSource


@pytest.fixture
def keep_prompt() -> Callable[..., ScriptedKeepPrompt]:
    return ScriptedKeepPrompt


@pytest.fixture
def bank_prompt() -> Callable[..., ScriptedBankPrompt]:
    return ScriptedBankPrompt


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from FARKLE_* variables and the settings cache."""
    for var in ("FARKLE_DEBUG", "FARKLE_LOG_LEVEL", "FARKLE_SEED", "FARKLE_SHOW_WELCOME"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
