"""
Result value tests
"""
import pytest

from showjumping.exceptions import InvalidHeightError
from showjumping.values import BLANK, Verdict, is_blank, is_terminal, normalize_height, parse_score


class TestValues:
    """Blank / verdict handling"""

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank("  ")
        assert not is_blank(0)
        assert not is_blank(Verdict.ELIMINATED)

    def test_is_terminal(self):
        assert is_terminal(Verdict.RETIRED)
        assert not is_terminal(0)
        assert not is_terminal(BLANK)

    def test_parse_score(self):
        assert parse_score("E") == Verdict.ELIMINATED
        assert parse_score("ret") is Verdict.RETIRED
        assert parse_score("12") == 12
        assert parse_score("0.5") == 0.5
        assert parse_score(None) == BLANK

    def test_verdict_str(self):
        """Verdicts print as their sheet codes"""
        assert str(Verdict.ELIMINATED) == "E"
        assert f"{Verdict.RETIRED}" == "RET"


class TestNormalizeHeight:
    """Height normalisation"""

    def test_numbers(self):
        assert normalize_height(110) == 110
        assert normalize_height("95") == 95
        assert normalize_height(" 1.5e2 ") == 150

    def test_lead_line(self):
        for marker in ("LL", "Lead Line", "lead-line", "leadline"):
            assert normalize_height(marker) == 0

    def test_invalid(self):
        for bad in ("tall", None, True, [100]):
            with pytest.raises(InvalidHeightError):
                normalize_height(bad)
