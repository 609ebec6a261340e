"""
Explainability utilities.
Turns raw detections into human-readable flags and explanations.
"""

from typing import Dict, Iterable, List, Sequence

from fraudshield_ai.models.analysis import Classification, Flag
from fraudshield_ai.services.taxonomy import (
    DEFAULT_CATEGORY_MESSAGE,
    PATTERN_CATEGORY,
    PATTERN_ICON,
    CategorySpec,
    SuspiciousPattern,
)


# Only this many matched keywords are quoted in a flag
MAX_QUOTED_KEYWORDS = 3

NO_MESSAGE_EXPLANATION = "No message provided"

EXPLANATIONS: Dict[Classification, str] = {
    Classification.SAFE: "This message appears to be safe with no significant fraud indicators.",
    Classification.SUSPICIOUS: (
        "This message contains some suspicious elements. Exercise caution and verify the sender."
    ),
    Classification.FRAUD: (
        "This message shows strong fraud indicators. Do not respond or share any information."
    ),
}

PUNCTUATION_FLAG_TEXT = "Excessive punctuation detected (urgency tactic)"
SHOUTING_FLAG_TEXT = "Excessive capitalization detected (pressure tactic)"


def format_category_message(spec: CategorySpec, matched: Sequence[str]) -> str:
    """Describe a category hit, quoting at most the first three keywords."""
    if not spec.template:
        return DEFAULT_CATEGORY_MESSAGE
    return spec.template.format(keywords=", ".join(matched[:MAX_QUOTED_KEYWORDS]))


def category_flag(spec: CategorySpec, matched: Sequence[str], severity: int) -> Flag:
    return Flag(
        category=spec.name,
        icon=spec.icon,
        text=format_category_message(spec, matched),
        severity=severity,
    )


def pattern_flag(pattern: SuspiciousPattern) -> Flag:
    return Flag(
        category=PATTERN_CATEGORY,
        icon=PATTERN_ICON,
        text=f"Suspicious pattern detected: {pattern.description}",
        severity=pattern.weight,
    )


def sort_flags(flags: Iterable[Flag]) -> List[Flag]:
    """
    Order flags by descending severity.

    sorted() is stable, so equal severities keep generation order:
    categories, then patterns, then structural checks.
    """
    return sorted(flags, key=lambda f: f.severity, reverse=True)


def get_explanation(classification: Classification) -> str:
    return EXPLANATIONS[classification]
