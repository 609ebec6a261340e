"""
Keyword taxonomy and suspicious-content patterns.

Everything here is immutable and built once at import time. A custom
taxonomy can be assembled from the same building blocks and handed to
ScoringEngine(config=...) for isolated tests or experiments.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Union


DEFAULT_CATEGORY_WEIGHT = 10
DEFAULT_CATEGORY_ICON = "🚩"
DEFAULT_CATEGORY_MESSAGE = "Suspicious content detected"

PATTERN_CATEGORY = "pattern"
PATTERN_ICON = "🔍"
PATTERN_WEIGHT = 15


class Category(str, Enum):
    URGENCY = "urgency"
    MONEY = "money"
    BANKING = "banking"
    THREATS = "threats"
    REQUESTS = "requests"
    IMPERSONATION = "impersonation"


CATEGORY_KEYWORDS: Dict[Category, Tuple[str, ...]] = {
    Category.URGENCY: (
        "urgent", "immediately", "now", "asap", "hurry", "quick", "fast",
        "expire", "limited time",
    ),
    Category.MONEY: (
        "winner", "won", "prize", "lottery", "million", "thousand", "cash",
        "reward", "claim", "free money",
    ),
    Category.BANKING: (
        "bank account", "credit card", "debit card", "cvv", "pin", "otp",
        "password", "verify account", "suspended", "blocked",
    ),
    Category.THREATS: (
        "suspend", "block", "terminate", "legal action", "arrest", "police",
        "court", "fine",
    ),
    Category.REQUESTS: (
        "click here", "click link", "download", "install", "update", "verify",
        "confirm", "send money", "transfer",
    ),
    Category.IMPERSONATION: (
        "bank", "government", "tax department", "irs", "police", "courier",
        "delivery", "amazon", "paypal",
    ),
}

CATEGORY_WEIGHTS: Dict[Category, int] = {
    Category.URGENCY: 15,
    Category.MONEY: 25,
    Category.BANKING: 30,
    Category.THREATS: 25,
    Category.REQUESTS: 20,
    Category.IMPERSONATION: 20,
}

CATEGORY_ICONS: Dict[Category, str] = {
    Category.URGENCY: "⚡",
    Category.MONEY: "💰",
    Category.BANKING: "🏦",
    Category.THREATS: "⚠️",
    Category.REQUESTS: "🔗",
    Category.IMPERSONATION: "🎭",
}

# "{keywords}" is replaced by the first three matched keywords
CATEGORY_TEMPLATES: Dict[Category, str] = {
    Category.URGENCY: 'Urgency tactics detected: "{keywords}"',
    Category.MONEY: 'Money-related fraud keywords: "{keywords}"',
    Category.BANKING: 'Banking/financial information requested: "{keywords}"',
    Category.THREATS: 'Threatening language detected: "{keywords}"',
    Category.REQUESTS: 'Suspicious action requests: "{keywords}"',
    Category.IMPERSONATION: 'Possible impersonation attempt: "{keywords}"',
}


@dataclass(frozen=True)
class CategorySpec:
    """One keyword category: its keywords, weight and display details."""
    name: str
    keywords: Tuple[str, ...]
    weight: int = DEFAULT_CATEGORY_WEIGHT
    icon: str = DEFAULT_CATEGORY_ICON
    template: Optional[str] = None  # None -> DEFAULT_CATEGORY_MESSAGE

    def __post_init__(self):
        name = self.name.value if isinstance(self.name, Category) else str(self.name)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "keywords", tuple(k.lower() for k in self.keywords))


@dataclass(frozen=True)
class SuspiciousPattern:
    """A named content rule. Scores a flat weight once if it matches at all."""
    name: str
    regex: "re.Pattern[str]"
    description: str
    weight: int = PATTERN_WEIGHT

    @classmethod
    def compile(
        cls,
        name: str,
        pattern: str,
        description: str,
        flags: int = 0,
        weight: int = PATTERN_WEIGHT,
    ) -> "SuspiciousPattern":
        return cls(name=name, regex=re.compile(pattern, flags), description=description, weight=weight)

    def count(self, text: str) -> int:
        """Number of non-overlapping matches in text."""
        return sum(1 for _ in self.regex.finditer(text))

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True)
class EngineConfig:
    """Immutable bundle of everything the scoring engine reads."""
    categories: Tuple[CategorySpec, ...]
    patterns: Tuple[SuspiciousPattern, ...]

    # Keyword scoring
    max_keyword_multiplier: int = 3

    # Structural heuristics
    short_message_length: int = 20
    short_message_points: int = 5
    punctuation_points: int = 10
    shouting_points: int = 10
    shouting_min_words: int = 3

    # Classification (0-100 scale)
    suspicious_threshold: int = 30  # Score >= this = suspicious
    fraud_threshold: int = 70  # Score >= this = fraud

    def category_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.categories)


def build_category(category: Union[Category, str], keywords: Optional[Iterable[str]] = None) -> CategorySpec:
    """
    Build a CategorySpec from the standard mappings.

    Unknown category names fall back to the default weight, icon and message.
    """
    try:
        known: Optional[Category] = Category(category)
    except ValueError:
        known = None

    if keywords is None:
        keywords = CATEGORY_KEYWORDS.get(known, ()) if known else ()

    if known is None:
        return CategorySpec(name=str(category), keywords=tuple(keywords))

    return CategorySpec(
        name=known,
        keywords=tuple(keywords),
        weight=CATEGORY_WEIGHTS.get(known, DEFAULT_CATEGORY_WEIGHT),
        icon=CATEGORY_ICONS.get(known, DEFAULT_CATEGORY_ICON),
        template=CATEGORY_TEMPLATES.get(known),
    )


DEFAULT_CATEGORIES: Tuple[CategorySpec, ...] = tuple(build_category(c) for c in Category)

# Evaluation order matters: flags for equal severities keep this order.
DEFAULT_PATTERNS: Tuple[SuspiciousPattern, ...] = (
    SuspiciousPattern.compile(
        "credit_card_number", r"\b\d{16}\b", "Credit card number", re.ASCII,
    ),
    SuspiciousPattern.compile(
        "social_security_number", r"\b\d{3}-\d{2}-\d{4}\b", "Social security number", re.ASCII,
    ),
    # Whitelist is a lookahead over the rest of the line, not a hostname parse.
    # Lines end at \n, \r, U+2028 and U+2029. Case folding stays ASCII.
    SuspiciousPattern.compile(
        "suspicious_url",
        r"https?://(?![^\n\r\u2028\u2029]*(?:google|facebook|amazon|apple|microsoft))"
        r"[^\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+",
        "Suspicious URL",
        re.IGNORECASE | re.ASCII,
    ),
    SuspiciousPattern.compile(
        "dollar_amount", r"\$\d+[,\d]*(?:\.\d{2})?", "Money amount", re.ASCII,
    ),
    SuspiciousPattern.compile(
        "rupee_amount", r"₹\d+[,\d]*(?:\.\d{2})?", "Money amount", re.ASCII,
    ),
)

DEFAULT_CONFIG = EngineConfig(categories=DEFAULT_CATEGORIES, patterns=DEFAULT_PATTERNS)
