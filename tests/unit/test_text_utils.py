"""텍스트 유틸리티 유닛 테스트"""
from barbook.utils.text import (
    escape_html,
    format_price,
    is_non_empty,
    normalize_amount,
    normalize_search_term,
    score_match,
    split_words,
)


class TestIsNonEmpty:
    def test_values(self):
        assert is_non_empty(" a")
        assert not is_non_empty("   ")
        assert not is_non_empty("")
        assert not is_non_empty(None)
        assert not is_non_empty(3)


class TestEscapeHtml:
    """HTML 이스케이프"""

    def test_all_special_characters(self):
        assert escape_html("<a href='x'>&\"</a>") == "&lt;a href=&#039;x&#039;&gt;&amp;&quot;&lt;/a&gt;"

    def test_plain_text_untouched(self):
        assert escape_html("Lime Juice") == "Lime Juice"


class TestSearchTerms:
    def test_normalize_search_term(self):
        assert normalize_search_term("Lime Juice") == "limejuice"
        assert normalize_search_term("  Sweet\tVermouth ") == "sweetvermouth"

    def test_split_words(self):
        assert split_words("  Lime  Juice ") == ["lime", "juice"]
        assert split_words("") == []


class TestScoreMatch:
    """관련도 점수 (낮을수록 관련)"""

    def test_prefix_is_best(self):
        assert score_match("Lime Juice", "lime") == 1

    def test_word_start(self):
        assert score_match("Fresh Lime", "lime") == 101

    def test_compact_contains(self):
        assert score_match("Lime Juice", "ejui") == 100 + 50 + 1

    def test_no_match(self):
        assert score_match("Gin", "lime") == 350


class TestFormatPrice:
    def test_numbers(self):
        assert format_price(12) == "$12.00"
        assert format_price(7.5) == "$7.50"
        assert format_price("14") == "$14.00"

    def test_missing_or_invalid(self):
        assert format_price(None) == "—"
        assert format_price("") == "—"
        assert format_price("abc") == "—"
        assert format_price(float("nan")) == "—"


class TestNormalizeAmount:
    def test_integers_drop_decimals(self):
        assert normalize_amount(2.0) == "2"
        assert normalize_amount(2) == "2"

    def test_fractions(self):
        assert normalize_amount(0.75) == "0.75"
        assert normalize_amount(1.5) == "1.5"

    def test_non_numeric(self):
        assert normalize_amount(None) == ""
        assert normalize_amount("splash") == "splash"
