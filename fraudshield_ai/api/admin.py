"""
Admin API endpoints: metrics and a read-only view of the active taxonomy.
"""

from fastapi import APIRouter, Depends

from fraudshield_ai.api.security import verify_api_token
from fraudshield_ai.schemas.analyze_schemas import (
    CategoryInfo,
    MetricsResponse,
    PatternInfo,
    TaxonomyResponse,
)
from fraudshield_ai.services.scoring_engine import scoring_engine
from fraudshield_ai.utils.logging_config import metrics


router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(verify_api_token)],
)


@router.get("/metrics", response_model=MetricsResponse)
async def get_metrics():
    """Get current application metrics."""
    return metrics.get_stats()


@router.post("/metrics/reset")
async def reset_metrics():
    """Reset all metrics (use with caution)."""
    metrics.reset()
    return {"message": "Metrics reset"}


@router.get("/taxonomy", response_model=TaxonomyResponse)
async def get_taxonomy():
    """Categories, patterns and thresholds the engine is scoring with."""
    config = scoring_engine.config
    return TaxonomyResponse(
        categories=[
            CategoryInfo(name=spec.name, weight=spec.weight, icon=spec.icon, keywords=list(spec.keywords))
            for spec in config.categories
        ],
        patterns=[
            PatternInfo(name=p.name, description=p.description, weight=p.weight)
            for p in config.patterns
        ],
        thresholds={
            "suspicious": config.suspicious_threshold,
            "fraud": config.fraud_threshold,
        },
    )
