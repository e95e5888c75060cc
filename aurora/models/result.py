from dataclasses import dataclass, field

from .classification import ResponseStatus
from .reference import ReferenceSummary


@dataclass
class PipelineResult:
    """The answer payload returned to the caller for one question."""

    answer: str
    references: list[ReferenceSummary]
    is_in_domain: bool
    confidence: float
    status: ResponseStatus
    response_time_ms: int = 0
    detected_topics: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.response_time_ms < 0:
            raise ValueError(f"Negative response time: {self.response_time_ms}")

    def to_dict(self) -> dict:
        """Convert result to the JSON payload sent to the browser."""
        return {
            "answer": self.answer,
            "references": [ref.to_dict() for ref in self.references],
            "isInDomain": self.is_in_domain,
            "confidence": self.confidence,
            "responseTimeMs": self.response_time_ms,
            "status": self.status.value,
        }
