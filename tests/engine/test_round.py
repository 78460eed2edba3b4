"""
Farkle - Round State Machine and Game Loop Tests
"""

import pytest
from farkle.engine.base import (
    GameOutcome,
    RoundOutcome,
    TurnOutcome,
)
from farkle.engine.game import play_game
from farkle.engine.round import play_round


class TestPlayRound:
    """Tests for play_round()."""

    def test_bank_after_first_turn(self, die_source, keep_prompt, bank_prompt, display):
        result = play_round(
            die_source([1, 1, 1, 2, 3, 4]),
            keep_prompt([[1, 2, 3]]),
            bank_prompt([True]),
            display,
        )
        assert result.outcome == RoundOutcome.BANKED
        assert result.score == 1000
        assert len(result.turns) == 1
        assert ("round_score", (1000,)) in display.events

    def test_scores_accumulate_until_bank(self, die_source, keep_prompt, bank_prompt):
        # 6 dice: keep the 1 -> 5 dice: keep the 5 -> 4 dice: keep three 2s
        source = die_source([1, 2, 3, 4, 6, 6] + [5, 3, 4, 6, 6] + [2, 2, 2, 3])
        keeps = keep_prompt([[1], [1], [1, 2, 3]])
        result = play_round(source, keeps, bank_prompt([False, False, True]))

        assert keeps.pool_sizes == [6, 5, 4]
        assert result.outcome == RoundOutcome.BANKED
        assert result.score == 100 + 50 + 200

    def test_bust_forfeits_accumulated_score(self, die_source, keep_prompt, bank_prompt):
        source = die_source([1, 1, 1, 2, 3, 4] + [2, 3, 4])
        result = play_round(source, keep_prompt([[1, 2, 3], [1]]), bank_prompt([False]))

        assert result.outcome == RoundOutcome.BUSTED
        assert result.score == 0
        assert result.unbanked_score == 1000
        assert result.turns[-1].outcome == TurnOutcome.BUSTED

    def test_empty_keep_busts_round(self, die_source, keep_prompt, bank_prompt):
        bank = bank_prompt([])
        result = play_round(die_source([1] * 6), keep_prompt([[]]), bank)
        assert result.outcome == RoundOutcome.BUSTED
        assert result.score == 0
        assert bank.calls == 0

    def test_hot_dice_pool_sizes(self, die_source, keep_prompt, bank_prompt):
        source = die_source([1, 5, 2, 3, 4, 6] + [1, 5, 5, 1] + [2, 2, 2, 3, 4, 1])
        keeps = keep_prompt([[1, 2], [1, 2, 3, 4], [1, 2, 3, 6]])
        result = play_round(source, keeps, bank_prompt([False, False, True]))

        assert keeps.pool_sizes == [6, 4, 6]
        assert result.turns[1].is_hot_dice
        assert result.score == 150 + 300 + 300

    def test_quit_at_keep_prompt(self, die_source, keep_prompt, bank_prompt):
        source = die_source([1, 2, 3, 4, 6, 6] + [1, 1, 1, 1, 1])
        result = play_round(source, keep_prompt([[1], None]), bank_prompt([False]))
        assert result.outcome == RoundOutcome.QUIT
        assert result.score == 0

    def test_quit_at_bank_prompt(self, die_source, keep_prompt, bank_prompt):
        result = play_round(
            die_source([1, 2, 3, 4, 6, 6]),
            keep_prompt([[1]]),
            bank_prompt([None]),
        )
        assert result.outcome == RoundOutcome.QUIT
        assert result.score == 0

    @pytest.mark.parametrize("turns_before_bust", [0, 1, 2, 3])
    def test_any_bust_returns_zero(self, die_source, keep_prompt, bank_prompt, turns_before_bust):
        faces: list[int] = []
        keeps: list[list[int]] = []
        pool = 6
        for _ in range(turns_before_bust):
            faces += [1] + [2] * (pool - 1)
            keeps.append([1])
            pool -= 1
        faces += [3] * pool
        keeps.append([1])

        result = play_round(
            die_source(faces),
            keep_prompt(keeps),
            bank_prompt([False] * turns_before_bust),
        )
        assert result.outcome == RoundOutcome.BUSTED
        assert result.score == 0


class TestPlayGame:
    """Tests for play_game()."""

    def test_plays_until_target(self, die_source, keep_prompt, bank_prompt, display):
        # Every round: six 1s, keep all, bank 5000
        source = die_source([1] * 12)
        result = play_game(
            source,
            keep_prompt([[1, 2, 3, 4, 5, 6]] * 2),
            bank_prompt([True, True]),
            display,
        )
        assert result.outcome == GameOutcome.WON
        assert result.total_score == 10_000
        assert result.rounds_played == 2
        assert ("total", (5000, 5000)) in display.events
        assert ("total", (5000, 10_000)) in display.events

    def test_busted_rounds_add_nothing(self, die_source, keep_prompt, bank_prompt):
        source = die_source([2, 3, 4, 6, 2, 3] + [1] * 6)
        result = play_game(
            source,
            keep_prompt([[1], [1, 2, 3, 4, 5, 6]]),
            bank_prompt([True]),
            target=5000,
        )
        assert result.outcome == GameOutcome.WON
        assert [r.score for r in result.rounds] == [0, 5000]

    def test_quit_keeps_banked_total(self, die_source, keep_prompt, bank_prompt):
        source = die_source([1, 1, 1, 2, 3, 4] + [5, 2, 3, 4, 6, 6])
        result = play_game(
            source,
            keep_prompt([[1, 2, 3], None]),
            bank_prompt([True]),
        )
        assert result.outcome == GameOutcome.QUIT
        assert result.total_score == 1000
        assert result.rounds_played == 2
