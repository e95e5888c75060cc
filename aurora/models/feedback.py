"""Feedback data models for learning from user votes."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Vote(str, Enum):
    """A user's verdict on an answer."""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @classmethod
    def from_string(cls, value: "str | Vote | None") -> "Vote | None":
        """Create Vote from string value."""
        if isinstance(value, Vote):
            return value
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass
class QuestionCounter:
    """Vote count for one normalized question and one polarity."""

    count: int = 0
    first_seen: datetime = field(default_factory=datetime.now)
    last_updated: datetime = field(default_factory=datetime.now)


@dataclass
class PatternCounter:
    """Vote counts for one pattern tag across all questions."""

    positive_count: int = 0
    negative_count: int = 0
    total_count: int = 0
    last_updated: datetime = field(default_factory=datetime.now)

    @property
    def positive_rate(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.positive_count / self.total_count

    def to_dict(self, pattern: str) -> dict:
        return {
            "pattern": pattern,
            "positiveCount": self.positive_count,
            "negativeCount": self.negative_count,
            "totalCount": self.total_count,
            "positiveRate": round(self.positive_rate, 4),
            "lastUpdated": self.last_updated.isoformat(),
        }


@dataclass(frozen=True)
class ImprovementSuggestion:
    """A pattern whose answers are rated poorly, with a remediation hint."""

    pattern: str
    positive_rate: float
    total_feedback: int
    suggestion: str

    def to_dict(self) -> dict:
        return {
            "pattern": self.pattern,
            "positiveRate": f"{self.positive_rate:.0%}",
            "totalFeedback": self.total_feedback,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class FeedbackAck:
    """Acknowledgment returned after recording a vote."""

    feedback_id: str
    vote: Vote
    total_positive: int
    total_negative: int
    success: bool = True
    message: str = "Thank you for your feedback!"

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "feedbackId": self.feedback_id,
            "vote": self.vote.value,
            "message": self.message,
            "totals": {
                "positive": self.total_positive,
                "negative": self.total_negative,
            },
        }


@dataclass
class AnalyticsSnapshot:
    """Read-only view over the aggregated feedback."""

    total_feedback: int
    positive_count: int
    negative_count: int
    positive_rate: float
    top_patterns: list[tuple[str, PatternCounter]] = field(default_factory=list)
    improvements: list[ImprovementSuggestion] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalFeedback": self.total_feedback,
            "positiveCount": self.positive_count,
            "negativeCount": self.negative_count,
            "positiveRate": f"{self.positive_rate:.0%}",
            "topPatterns": [
                counter.to_dict(pattern) for pattern, counter in self.top_patterns
            ],
            "improvements": [suggestion.to_dict() for suggestion in self.improvements],
        }
