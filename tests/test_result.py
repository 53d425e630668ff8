"""
Round result assembler tests
"""
import pytest

from showjumping.exceptions import UnknownMarkError
from showjumping.result import RoundResultRow, calculate_time_penalty, score_round
from showjumping.values import BLANK, Verdict

CLEAR = [["/", "/", "/", "/"], ["/", "/", "/", "/"]]


class TestTimePenalty:
    """Time penalty rounding"""

    def test_within_time(self):
        """No penalty inside the time allowed"""
        assert calculate_time_penalty(59.9, 60) == 0
        assert calculate_time_penalty(60, 60) == 0

    def test_started_period(self):
        """Every started 4 seconds costs 1"""
        assert calculate_time_penalty(60.01, 60) == 1
        assert calculate_time_penalty(64, 60) == 1
        assert calculate_time_penalty(67, 60) == 2
        assert calculate_time_penalty(68.5, 60) == 3

    def test_custom_period_and_amount(self):
        """1 second per 0.25 penalty"""
        assert calculate_time_penalty(63, 60, period=1, amount=0.25) == 0.75

    def test_fractional_time_allowed_on_boundary(self):
        """12s over a 52.4s time allowed is exactly 3 periods"""
        assert calculate_time_penalty(64.4, 52.4) == 3
        row = score_round(100, 52.4, [["/", "/"]], 64.4)
        assert row.time_including_rebuild == 64.4
        assert row.time_penalty == 3
        assert row.total_penalty == 3

    def test_rebuild_on_boundary(self):
        """58.1s + 6s rebuild against 56.1s is exactly 2 periods"""
        row = score_round(100, 56.1, [["RB"]], 58.1)
        assert row.time_including_rebuild == 64.1
        assert row.time_penalty == 2


class TestScoreRound:
    """Published row"""

    def test_clear_inside_time(self):
        """Clear round inside the time"""
        row = score_round(100, 60, CLEAR, 55.3)
        assert row == RoundResultRow(55.3, 0, 0, 0)

    def test_time_penalty_example(self):
        """67s against 60s allowed = 2 time penalties"""
        row = score_round(100, 60, CLEAR, 67)
        assert row.time_including_rebuild == 67
        assert row.time_penalty == 2
        assert row.jump_penalty == 0
        assert row.total_penalty == 2

    def test_jump_and_time_penalties(self):
        """Knockdown plus time"""
        row = score_round(100, 60, [["4", "/", "/"]], 62)
        assert row.jump_penalty == 4
        assert row.time_penalty == 1
        assert row.total_penalty == 5

    def test_rebuild_adds_time(self):
        """Rebuild adds 6s before time penalties"""
        row = score_round(100, 60, [["RB", "/", "/"]], 58)
        assert row.time_including_rebuild == 64
        assert row.time_penalty == 1
        assert row.jump_penalty == 4
        assert row.total_penalty == 5

    def test_overtime_elimination(self):
        """More than twice the time allowed eliminates"""
        row = score_round(100, 60, CLEAR, 125)
        assert row.total_penalty == Verdict.ELIMINATED
        assert row.jump_penalty == BLANK
        assert row.time_including_rebuild == BLANK
        assert row.time_penalty == BLANK

    def test_exactly_twice_time_allowed(self):
        """Exactly double is not over"""
        row = score_round(100, 60, CLEAR, 120)
        assert row.total_penalty == 15

    def test_rebuild_pushes_over_limit(self):
        """The 6s rebuild counts toward the limit"""
        row = score_round(100, 60, [["RB"]], 118)
        assert row.is_eliminated

    def test_eliminated_round(self):
        """E total, everything else blank"""
        row = score_round(100, 60, [["/", "FR"]], 40)
        assert row == RoundResultRow(BLANK, BLANK, BLANK, Verdict.ELIMINATED)
        assert row.is_eliminated

    def test_retired_round(self):
        """RET total, everything else blank"""
        row = score_round(100, 60, [["/", "RET"]], None)
        assert row == RoundResultRow(BLANK, BLANK, BLANK, Verdict.RETIRED)
        assert row.is_retired

    def test_empty_round(self):
        """No marks, blank row, never zero"""
        row = score_round(100, 60, [["", ""]], 50)
        assert row.is_blank
        assert row.total_penalty == BLANK

    def test_marks_without_time(self):
        """Jump penalty only until the time is entered"""
        row = score_round(100, 60, [["4"]], "")
        assert row.jump_penalty == 4
        assert row.total_penalty == BLANK

    def test_idempotent(self):
        """Same input, same row"""
        args = (110, 72, [["4,R", "RB"], ["/", "/"]], 70.5, 4, 1)
        assert score_round(*args) == score_round(*args)

    def test_unknown_mark_propagates(self):
        """No best-effort scoring"""
        with pytest.raises(UnknownMarkError):
            score_round(100, 60, [["/", "Q"]], 50)

    def test_to_dict(self):
        """Verdicts render as their sheet codes"""
        assert score_round(100, 60, [["FH"]], 10).to_dict() == {
            "time_including_rebuild": "",
            "time_penalty": "",
            "jump_penalty": "",
            "total_penalty": "E",
        }
