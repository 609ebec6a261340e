from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Any


class AnalyzeRequest(BaseModel):
    """Body of /api/analyze. `text` is accepted for older clients."""
    message: Optional[str] = None
    text: Optional[str] = None

    def content(self) -> Optional[str]:
        return self.message if self.message is not None else self.text


class FlagSchema(BaseModel):
    """Single piece of evidence behind a score."""
    category: str
    icon: str
    text: str
    severity: int


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    classification: str  # safe / suspicious / fraud
    risk_score: int = Field(alias="riskScore", ge=0, le=100)
    flags: List[FlagSchema]
    explanation: str


class DemoMessageResponse(BaseModel):
    kind: str
    message: str


class CallStep(BaseModel):
    type: str  # caller / ai-status
    text: str


class CallSimulationResponse(BaseModel):
    kind: str
    caller: str
    steps: List[CallStep]
    analysis: AnalyzeResponse  # score of the caller's lines


class PatternInfo(BaseModel):
    name: str
    description: str
    weight: int


class CategoryInfo(BaseModel):
    name: str
    weight: int
    icon: str
    keywords: List[str]


class TaxonomyResponse(BaseModel):
    categories: List[CategoryInfo]
    patterns: List[PatternInfo]
    thresholds: Dict[str, int]


class MetricsResponse(BaseModel):
    uptime_seconds: float
    counters: Dict[str, int]
    timings: Dict[str, Any]
