"""
Risk level utilities.
Score clamping and threshold classification on the 0-100 scale.
"""

from fraudshield_ai.models.analysis import Classification


MIN_SCORE = 0
MAX_SCORE = 100

SUSPICIOUS_THRESHOLD = 30
FRAUD_THRESHOLD = 70


def clamp_score(raw_score: int) -> int:
    """Clamp a raw point total into [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, raw_score))


def classify_score(
    score: int,
    suspicious_threshold: int = SUSPICIOUS_THRESHOLD,
    fraud_threshold: int = FRAUD_THRESHOLD,
) -> Classification:
    """
    Derive the classification from an already clamped score.

    Args:
        score: Risk score (0-100)
        suspicious_threshold: Score >= this = suspicious
        fraud_threshold: Score >= this = fraud

    Returns:
        Classification.SAFE, SUSPICIOUS or FRAUD
    """
    if score < suspicious_threshold:
        return Classification.SAFE
    elif score < fraud_threshold:
        return Classification.SUSPICIOUS
    else:
        return Classification.FRAUD
