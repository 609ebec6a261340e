from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class Classification(str, Enum):
    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    FRAUD = "fraud"


@dataclass(frozen=True)
class Flag:
    """A single piece of evidence produced during one analysis."""
    category: str   # urgency / money / ... / pattern
    icon: str
    text: str
    severity: int   # points contributed to the score

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "icon": self.icon,
            "text": self.text,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class AnalysisResult:
    classification: Classification
    risk_score: int                  # 0-100
    flags: Tuple[Flag, ...] = field(default_factory=tuple)
    explanation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Wire format used by the HTTP layer."""
        return {
            "classification": self.classification.value,
            "riskScore": self.risk_score,
            "flags": [f.to_dict() for f in self.flags],
            "explanation": self.explanation,
        }
