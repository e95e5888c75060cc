"""Classification result and response status types."""

from dataclasses import dataclass, field
from enum import Enum


class ResponseStatus(str, Enum):
    """Terminal status of a processed question."""

    SUCCESS = "success"
    OFF_TOPIC = "off_topic"
    ERROR = "error"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of intent classification for a single question."""

    is_in_domain: bool
    confidence: float
    reasoning: str = ""
    detected_topics: tuple[str, ...] = ()

    # Diagnostic only, filled by the keyword classifier
    matched_keywords: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence out of range: {self.confidence}")

    def to_dict(self) -> dict:
        """Convert classification to dictionary for serialization."""
        return {
            "isInDomain": self.is_in_domain,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "detectedTopics": list(self.detected_topics),
        }
