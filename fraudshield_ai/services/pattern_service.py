from typing import List, Sequence, Tuple

from fraudshield_ai.models.analysis import Flag
from fraudshield_ai.services.taxonomy import SuspiciousPattern
from fraudshield_ai.utils.explainability import pattern_flag


def matched_patterns(message: str, patterns: Sequence[SuspiciousPattern]) -> List[SuspiciousPattern]:
    """Patterns with at least one match in the original-case message."""
    return [pattern for pattern in patterns if pattern.count(message) > 0]


def score_patterns(message: str, patterns: Sequence[SuspiciousPattern]) -> Tuple[int, List[Flag]]:
    """
    Score structured suspicious content. Returns (points, flags).

    A pattern scores its flat weight once, however many times it matches.
    """
    points = 0
    flags: List[Flag] = []

    for pattern in matched_patterns(message, patterns):
        points += pattern.weight
        flags.append(pattern_flag(pattern))

    return points, flags
