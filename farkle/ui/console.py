"""
Farkle - Console Collaborators

Reads keep and bank choices from the terminal and prints game progress.
All validation of typed input happens here; the engine only ever sees a
clean Selection, BankDecision or QuitRequested.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from farkle.engine.base import TOTAL_DICE
from farkle.engine.collaborators import (
    BankDecision,
    BankReply,
    KeepReply,
    QuitRequested,
    Selection,
)

DIGITS = "123456"
QUIT_KEY = "q"
BANK_KEY = "y"
SEPARATORS = ", "


class KeepSelection(BaseModel):
    """Dice positions typed by the player, e.g. ``"135"`` for dice 1, 3 and 5."""

    pool_size: int = Field(ge=1, le=TOTAL_DICE)
    positions: tuple[int, ...] = ()

    @field_validator("positions", mode="before")
    @classmethod
    def _split_digits(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        chars = [c for c in value if c not in SEPARATORS]
        for c in chars:
            if c not in DIGITS:
                raise ValueError(f"Invalid input {c}. Try again.")
        return tuple(int(c) for c in chars)

    @model_validator(mode="after")
    def _check_positions(self) -> "KeepSelection":
        if len(set(self.positions)) != len(self.positions):
            raise ValueError("You can't keep the same die twice.")
        for pos in self.positions:
            if pos > self.pool_size:
                raise ValueError(
                    f"Invalid input {pos}. There {'is' if self.pool_size == 1 else 'are'} "
                    f"only {self.pool_size} {'die' if self.pool_size == 1 else 'dice'}."
                )
        return self

    def to_selection(self) -> Selection:
        return Selection(positions=frozenset(self.positions))


def _error_messages(exc: ValidationError) -> list[str]:
    """Plain messages for each validation error, without pydantic's prefixes."""
    messages = []
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        messages.append(str(cause) if cause is not None else error["msg"])
    return messages


class ConsolePlayer:
    """Keep and bank prompts backed by ``input``."""

    def __init__(
        self,
        input_fn: Callable[[], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output

    def _read(self) -> str | None:
        """One line of input, or None when input is closed or interrupted."""
        try:
            return self._input()
        except (EOFError, KeyboardInterrupt):
            return None

    def prompt_keep(self, pool_size: int) -> KeepReply:
        while True:
            self._output(f"Enter dice to keep (1-{pool_size}):")
            text = self._read()
            if text is None or QUIT_KEY in text.strip().lower():
                return QuitRequested()

            self._output(f"You entered: {text.strip()}")
            try:
                selection = KeepSelection(pool_size=pool_size, positions=text.strip())
            except ValidationError as exc:
                for message in _error_messages(exc):
                    self._output(message)
                continue
            return selection.to_selection()

    def prompt_bank(self) -> BankReply:
        self._output("Would you like to keep this score? (y = bank, q = quit)")
        text = self._read()
        if text is None:
            return QuitRequested()
        answer = text.strip().lower()
        if BANK_KEY in answer:
            return BankDecision(bank=True)
        if QUIT_KEY in answer:
            return QuitRequested()
        return BankDecision(bank=False)


class ConsoleDisplay:
    """Display sink that prints to the terminal."""

    def __init__(self, output: Callable[[str], None] = print) -> None:
        self._output = output

    def show_roll(self, dice: tuple[int, ...]) -> None:
        self._output(f"Dice: {list(dice)}")

    def show_kept(self, kept: tuple[int, ...]) -> None:
        self._output(f"You kept: {list(kept)}")

    def show_turn_score(self, score: int, hot_dice: bool) -> None:
        self._output(f"Turn score: {score}")
        if hot_dice:
            self._output("You got all keepers! Good job!\n")

    def show_farkle(self) -> None:
        self._output("No scoring dice.\nYour turn is over.\n")

    def show_round_score(self, round_score: int) -> None:
        self._output(f"Your score this round is {round_score}")

    def show_total(self, round_score: int, total: int) -> None:
        self._output(f"Round score: {round_score}")
        self._output(f"Total score: {total}\n")
