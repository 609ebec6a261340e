"""Tests for flag formatting, ordering and explanations."""

from fraudshield_ai.models.analysis import Classification, Flag
from fraudshield_ai.services.taxonomy import (
    DEFAULT_PATTERNS,
    Category,
    CategorySpec,
    build_category,
)
from fraudshield_ai.utils.explainability import (
    EXPLANATIONS,
    category_flag,
    format_category_message,
    get_explanation,
    pattern_flag,
    sort_flags,
)


class TestCategoryMessages:
    """Tests for category flag text."""

    def test_quotes_first_three_keywords(self):
        spec = build_category(Category.MONEY)
        text = format_category_message(spec, ["winner", "won", "prize", "lottery"])
        assert text == 'Money-related fraud keywords: "winner, won, prize"'

    def test_every_category_has_template_and_icon(self):
        for category in Category:
            spec = build_category(category)
            assert spec.template
            assert spec.icon != "🚩"

    def test_custom_category_uses_default_message(self):
        spec = CategorySpec(name="crypto", keywords=("bitcoin",))
        assert format_category_message(spec, ["bitcoin"]) == "Suspicious content detected"

    def test_category_flag_fields(self):
        spec = build_category(Category.THREATS)
        flag = category_flag(spec, ["arrest"], 25)
        assert flag == Flag(
            category="threats",
            icon="⚠️",
            text='Threatening language detected: "arrest"',
            severity=25,
        )

    def test_pattern_flag_fields(self):
        flag = pattern_flag(DEFAULT_PATTERNS[0])
        assert flag.category == "pattern"
        assert flag.text == "Suspicious pattern detected: Credit card number"
        assert flag.severity == 15


class TestFlagOrdering:
    """Tests for stable descending-severity ordering."""

    def test_sorted_by_descending_severity(self):
        flags = [
            Flag("a", "", "low", 5),
            Flag("b", "", "high", 30),
            Flag("c", "", "mid", 15),
        ]
        assert [f.severity for f in sort_flags(flags)] == [30, 15, 5]

    def test_ties_keep_generation_order(self):
        flags = [
            Flag("urgency", "", "first", 15),
            Flag("banking", "", "top", 30),
            Flag("pattern", "", "second", 15),
            Flag("pattern", "", "third", 15),
        ]
        assert [f.text for f in sort_flags(flags)] == ["top", "first", "second", "third"]


class TestExplanations:
    """Tests for classification explanations."""

    def test_one_explanation_per_classification(self):
        assert set(EXPLANATIONS) == set(Classification)

    def test_explanation_texts(self):
        assert get_explanation(Classification.SAFE).startswith("This message appears to be safe")
        assert "Exercise caution" in get_explanation(Classification.SUSPICIOUS)
        assert "Do not respond" in get_explanation(Classification.FRAUD)
