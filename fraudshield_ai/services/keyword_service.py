from typing import List, Sequence, Tuple

from fraudshield_ai.models.analysis import Flag
from fraudshield_ai.services.taxonomy import CategorySpec, EngineConfig
from fraudshield_ai.utils.explainability import category_flag


def match_keywords(normalized: str, spec: CategorySpec) -> List[str]:
    """
    Keywords of one category found in an already lower-cased message.

    Plain substring test ("bank" hits "banking"), declared order kept.
    """
    return [keyword for keyword in spec.keywords if keyword in normalized]


def match_categories(
    normalized: str,
    categories: Sequence[CategorySpec],
) -> List[Tuple[CategorySpec, List[str]]]:
    """All categories with at least one hit, in taxonomy order."""
    hits = []
    for spec in categories:
        matched = match_keywords(normalized, spec)
        if matched:
            hits.append((spec, matched))
    return hits


def category_risk(spec: CategorySpec, match_count: int, max_multiplier: int = 3) -> int:
    return spec.weight * min(match_count, max_multiplier)


def score_keywords(message: str, config: EngineConfig) -> Tuple[int, List[Flag]]:
    """Score the keyword taxonomy against a message. Returns (points, flags)."""
    normalized = message.lower()
    points = 0
    flags: List[Flag] = []

    for spec, matched in match_categories(normalized, config.categories):
        risk = category_risk(spec, len(matched), config.max_keyword_multiplier)
        points += risk
        flags.append(category_flag(spec, matched, risk))

    return points, flags
