"""
FraudShield AI - heuristic fraud scoring for short messages.

Usage:
    from fraudshield_ai.services.scoring_engine import scoring_engine

    result = scoring_engine.analyze("URGENT: verify your bank account now")
    result.classification   # Classification.FRAUD / SUSPICIOUS / SAFE
    result.to_dict()        # JSON-ready payload
"""

__version__ = "0.1.0"
