import re
from typing import List, Tuple

from fraudshield_ai.models.analysis import Flag
from fraudshield_ai.services.taxonomy import CATEGORY_ICONS, Category, EngineConfig
from fraudshield_ai.utils.explainability import PUNCTUATION_FLAG_TEXT, SHOUTING_FLAG_TEXT
from fraudshield_ai.utils.preprocessing import utf16_length


EXCESSIVE_PUNCTUATION = re.compile(r"[!?]{3,}")
SHOUTED_WORD = re.compile(r"\b[A-Z]{4,}\b", re.ASCII)

SHOUTING_ICON = "📢"


def is_short(message: str, config: EngineConfig) -> bool:
    return utf16_length(message) < config.short_message_length


def has_excessive_punctuation(message: str) -> bool:
    return EXCESSIVE_PUNCTUATION.search(message) is not None


def count_shouted_words(message: str) -> int:
    """Words of four or more capitals. Needs the original-case message."""
    return len(SHOUTED_WORD.findall(message))


def score_structure(message: str, config: EngineConfig) -> Tuple[int, List[Flag]]:
    """Length, punctuation and capitalization checks. Returns (points, flags)."""
    points = 0
    flags: List[Flag] = []

    # Silent: adds points without a flag
    if is_short(message, config):
        points += config.short_message_points

    if has_excessive_punctuation(message):
        points += config.punctuation_points
        flags.append(Flag(
            category=Category.URGENCY.value,
            icon=CATEGORY_ICONS[Category.URGENCY],
            text=PUNCTUATION_FLAG_TEXT,
            severity=config.punctuation_points,
        ))

    if count_shouted_words(message) >= config.shouting_min_words:
        points += config.shouting_points
        flags.append(Flag(
            category=Category.URGENCY.value,
            icon=SHOUTING_ICON,
            text=SHOUTING_FLAG_TEXT,
            severity=config.shouting_points,
        ))

    return points, flags
