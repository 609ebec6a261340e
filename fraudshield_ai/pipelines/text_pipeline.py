from typing import Any, Dict, Optional

from fraudshield_ai.services.scoring_engine import ScoringEngine, scoring_engine
from fraudshield_ai.utils.logging_config import StructuredLogger, track_analysis
from fraudshield_ai.utils.preprocessing import preview

logger = StructuredLogger(__name__)


@track_analysis("text")
def analyze_text(message: Optional[str], engine: Optional[ScoringEngine] = None) -> Dict[str, Any]:
    """
    Main text pipeline for /api/analyze.
    Runs the scoring engine and returns the JSON-ready result.
    """
    engine = engine or scoring_engine
    result = engine.analyze(message)

    logger.info(
        "Message analyzed",
        classification=result.classification.value,
        risk_score=result.risk_score,
        flag_count=len(result.flags),
        message_length=len(message or ""),
    )
    logger.debug("Message preview", preview=preview(message))

    return result.to_dict()
