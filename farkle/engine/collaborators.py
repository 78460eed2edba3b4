"""
Farkle - Collaborator Contracts

The engine never reads input, prints, or exits. It talks to whatever shell
embeds it through these small interfaces and reply types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union


@dataclass(frozen=True)
class Selection:
    """Positions (1-indexed) of the dice the player keeps."""

    positions: frozenset[int] = field(default_factory=frozenset)


@dataclass(frozen=True)
class BankDecision:
    """Whether the player stops rolling and banks the round score."""

    bank: bool


@dataclass(frozen=True)
class QuitRequested:
    """The player asked to leave the game."""


KeepReply = Union[Selection, QuitRequested]
BankReply = Union[BankDecision, QuitRequested]


class DieSource(Protocol):
    def next_die(self) -> int:
        """Return one die face in 1..6."""
        ...


class KeepPrompt(Protocol):
    def prompt_keep(self, pool_size: int) -> KeepReply:
        """Ask which of the ``pool_size`` rolled dice to keep."""
        ...


class BankPrompt(Protocol):
    def prompt_bank(self) -> BankReply:
        """Ask whether to bank the round score."""
        ...


class DisplaySink(Protocol):
    """Receives game progress for display. Nothing is read back."""

    def show_roll(self, dice: tuple[int, ...]) -> None: ...

    def show_kept(self, kept: tuple[int, ...]) -> None: ...

    def show_turn_score(self, score: int, hot_dice: bool) -> None: ...

    def show_farkle(self) -> None: ...

    def show_round_score(self, round_score: int) -> None: ...

    def show_total(self, round_score: int, total: int) -> None: ...


class NullDisplay:
    """Display sink that discards everything."""

    def show_roll(self, dice: tuple[int, ...]) -> None:
        pass

    def show_kept(self, kept: tuple[int, ...]) -> None:
        pass

    def show_turn_score(self, score: int, hot_dice: bool) -> None:
        pass

    def show_farkle(self) -> None:
        pass

    def show_round_score(self, round_score: int) -> None:
        pass

    def show_total(self, round_score: int, total: int) -> None:
        pass
