"""Manages user feedback for improving Aurora's answers."""

import logging
from datetime import datetime
from threading import Lock
from uuid import uuid4

from ..config import (
    COMPLEX_QUESTION_MIN_WORDS,
    FEEDBACK_MIN_SAMPLES,
    FEEDBACK_POSITIVE_RATE_THRESHOLD,
    FEEDBACK_TOPIC_TAGS,
    QUESTION_WORDS,
    SIMPLE_QUESTION_MAX_WORDS,
    TOP_PATTERNS_LIMIT,
)
from ..constants import GENERIC_IMPROVEMENT, IMPROVEMENT_SUGGESTIONS
from ..exceptions import ValidationError
from ..models.feedback import (
    AnalyticsSnapshot,
    FeedbackAck,
    ImprovementSuggestion,
    PatternCounter,
    QuestionCounter,
    Vote,
)
from ..utils.statistics import calculate_feedback_statistics
from ..utils.text import normalize_user_input, word_count

logger = logging.getLogger(__name__)


def extract_pattern_tags(question: str) -> list[str]:
    """Derive pattern tags from a normalized question.

    Tags cover the leading question word (``how_questions``), topic keywords
    (``sensory_topics``) and question length (``complex_questions`` /
    ``simple_questions``).
    """
    tags = []

    for question_word in QUESTION_WORDS:
        if question.startswith(question_word):
            tags.append(f"{question_word}_questions")
            break

    for topic in FEEDBACK_TOPIC_TAGS:
        if topic in question:
            tags.append(f"{topic}_topics")

    words = word_count(question)
    if words > COMPLEX_QUESTION_MIN_WORDS:
        tags.append("complex_questions")
    elif words < SIMPLE_QUESTION_MAX_WORDS:
        tags.append("simple_questions")

    return tags


class FeedbackManager:
    """Aggregates votes per question and per pattern for the process lifetime."""

    def __init__(
        self,
        min_samples: int = FEEDBACK_MIN_SAMPLES,
        positive_rate_threshold: float = FEEDBACK_POSITIVE_RATE_THRESHOLD,
        top_patterns_limit: int = TOP_PATTERNS_LIMIT,
        suggestions: dict[str, str] | None = None,
    ) -> None:
        self.min_samples = min_samples
        self.positive_rate_threshold = positive_rate_threshold
        self.top_patterns_limit = top_patterns_limit
        self.suggestions = IMPROVEMENT_SUGGESTIONS if suggestions is None else suggestions

        self._lock = Lock()
        self._question_counts: dict[Vote, dict[str, QuestionCounter]] = {
            Vote.POSITIVE: {},
            Vote.NEGATIVE: {},
        }
        self._patterns: dict[str, PatternCounter] = {}
        self._improvements: list[ImprovementSuggestion] = []

    def record_feedback(
        self,
        feedback_id: str | None,
        vote: str | Vote,
        question: str,
        answer: str = "",
    ) -> FeedbackAck:
        """Record a vote on an answer.

        Args:
            feedback_id: Caller's id for the answer being rated
            vote: "positive" or "negative"
            question: The question that was answered
            answer: The answer that was rated. Only its length is logged, the
                text is not kept

        Returns:
            FeedbackAck with running vote totals

        Raises:
            ValidationError: If the vote or question is missing or invalid

        """
        parsed_vote = Vote.from_string(vote)
        if parsed_vote is None:
            raise ValidationError(f"Invalid vote: {vote!r}. Must be 'positive' or 'negative'")

        normalized = normalize_user_input(question)
        if not normalized:
            raise ValidationError("Question is required for feedback")

        feedback_id = feedback_id or str(uuid4())
        tags = extract_pattern_tags(normalized)
        now = datetime.now()

        with self._lock:
            counters = self._question_counts[parsed_vote]
            counter = counters.get(normalized)
            if counter is None:
                counters[normalized] = QuestionCounter(count=1, first_seen=now, last_updated=now)
            else:
                counter.count += 1
                counter.last_updated = now

            for tag in tags:
                pattern = self._patterns.setdefault(tag, PatternCounter(last_updated=now))
                pattern.total_count += 1
                if parsed_vote == Vote.POSITIVE:
                    pattern.positive_count += 1
                else:
                    pattern.negative_count += 1
                pattern.last_updated = now

            self._improvements = self._compute_improvements()

            total_positive = self._total_votes(Vote.POSITIVE)
            total_negative = self._total_votes(Vote.NEGATIVE)

        logger.info(
            f"Recorded {parsed_vote.value} feedback {feedback_id} "
            f"(patterns: {', '.join(tags) or 'none'}, answer: {len(answer or '')} chars)"
        )

        return FeedbackAck(
            feedback_id=feedback_id,
            vote=parsed_vote,
            total_positive=total_positive,
            total_negative=total_negative,
        )

    def _total_votes(self, vote: Vote) -> int:
        return sum(counter.count for counter in self._question_counts[vote].values())

    def _compute_improvements(self) -> list[ImprovementSuggestion]:
        """Rebuild the suggestion list from the pattern counters."""
        improvements = []
        for pattern, counter in self._patterns.items():
            if counter.total_count < self.min_samples:
                continue
            if counter.positive_rate >= self.positive_rate_threshold:
                continue
            improvements.append(
                ImprovementSuggestion(
                    pattern=pattern,
                    positive_rate=counter.positive_rate,
                    total_feedback=counter.total_count,
                    suggestion=self.suggestions.get(pattern, GENERIC_IMPROVEMENT),
                )
            )
        return improvements

    def get_analytics(self) -> AnalyticsSnapshot:
        """Get a snapshot of the aggregated feedback."""
        with self._lock:
            stats = calculate_feedback_statistics(
                self._total_votes(Vote.POSITIVE), self._total_votes(Vote.NEGATIVE)
            )
            logger.debug(f"Feedback analytics: {stats.to_display_string()}")
            top_patterns = sorted(
                self._patterns.items(),
                key=lambda item: item[1].total_count,
                reverse=True,
            )[: self.top_patterns_limit]

            return AnalyticsSnapshot(
                total_feedback=stats.total,
                positive_count=stats.positive,
                negative_count=stats.negative,
                positive_rate=stats.positive_rate,
                top_patterns=[
                    (pattern, PatternCounter(**vars(counter))) for pattern, counter in top_patterns
                ],
                improvements=list(self._improvements),
            )

    def get_question_counts(self, question: str) -> dict[str, int]:
        """Get vote counts for one question (normalized before lookup)."""
        normalized = normalize_user_input(question)
        with self._lock:
            return {
                vote.value: (
                    self._question_counts[vote][normalized].count
                    if normalized in self._question_counts[vote]
                    else 0
                )
                for vote in Vote
            }

    def get_pattern_counts(self) -> dict[str, PatternCounter]:
        with self._lock:
            return {pattern: PatternCounter(**vars(c)) for pattern, c in self._patterns.items()}

    def has_feedback(self) -> bool:
        """Check if any feedback has been recorded."""
        with self._lock:
            return any(self._question_counts[vote] for vote in Vote)

    def reset(self) -> None:
        """Clear all recorded feedback."""
        with self._lock:
            count = self._total_votes(Vote.POSITIVE) + self._total_votes(Vote.NEGATIVE)
            for counters in self._question_counts.values():
                counters.clear()
            self._patterns.clear()
            self._improvements = []
        logger.info(f"Cleared {count} feedback votes")
