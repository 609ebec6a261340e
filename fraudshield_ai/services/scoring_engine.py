import logging
from typing import Optional

from fraudshield_ai.models.analysis import AnalysisResult, Classification
from fraudshield_ai.services.keyword_service import score_keywords
from fraudshield_ai.services.pattern_service import score_patterns
from fraudshield_ai.services.structure_service import score_structure
from fraudshield_ai.services.taxonomy import DEFAULT_CONFIG, EngineConfig
from fraudshield_ai.utils.explainability import NO_MESSAGE_EXPLANATION, get_explanation, sort_flags
from fraudshield_ai.utils.preprocessing import is_blank
from fraudshield_ai.utils.risk_levels import clamp_score, classify_score

logger = logging.getLogger(__name__)


class ScoringEngine:
    """
    Deterministic heuristic fraud scorer for short messages.

    Holds only the immutable EngineConfig, so one instance can be shared
    by any number of callers.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config

    def analyze(self, message: Optional[str]) -> AnalysisResult:
        if is_blank(message):
            return AnalysisResult(
                classification=Classification.SAFE,
                risk_score=0,
                flags=(),
                explanation=NO_MESSAGE_EXPLANATION,
            )

        keyword_points, keyword_flags = score_keywords(message, self.config)
        pattern_points, pattern_flags = score_patterns(message, self.config.patterns)
        structure_points, structure_flags = score_structure(message, self.config)

        raw_score = keyword_points + pattern_points + structure_points
        risk_score = clamp_score(raw_score)
        classification = classify_score(
            risk_score,
            self.config.suspicious_threshold,
            self.config.fraud_threshold,
        )
        flags = sort_flags([*keyword_flags, *pattern_flags, *structure_flags])

        logger.debug(
            f"Scored message: raw={raw_score} score={risk_score} "
            f"classification={classification.value} flags={len(flags)}"
        )

        return AnalysisResult(
            classification=classification,
            risk_score=risk_score,
            flags=tuple(flags),
            explanation=get_explanation(classification),
        )


# Global engine instance
scoring_engine = ScoringEngine()
