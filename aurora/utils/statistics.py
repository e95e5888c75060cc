"""Utility functions for calculating feedback statistics."""

from dataclasses import dataclass


@dataclass
class FeedbackStatistics:
    """Container for vote totals."""

    total: int
    positive: int
    negative: int
    positive_rate: float

    def to_display_string(self) -> str:
        """Format statistics for log lines."""
        return (
            f"Total: {self.total} | +: {self.positive} | -: {self.negative} | "
            f"Positive: {self.positive_rate:.0%}"
        )


def calculate_feedback_statistics(positive: int, negative: int) -> FeedbackStatistics:
    """Calculate vote totals and the positive rate.

    Args:
        positive: Number of positive votes
        negative: Number of negative votes

    Returns:
        FeedbackStatistics object containing calculated statistics

    """
    total = positive + negative

    if total == 0:
        return FeedbackStatistics(total=0, positive=0, negative=0, positive_rate=0.0)

    return FeedbackStatistics(
        total=total,
        positive=positive,
        negative=negative,
        positive_rate=positive / total,
    )
