"""Deterministic intent classifier based on keyword and typo-pattern matching.

Used whenever no text-generation service is configured.
"""

import logging
from re import Pattern

from ...config import (
    CONFIDENCE_PER_MATCH,
    DOMAIN_KEYWORDS,
    FUZZY_KEYWORD_PATTERNS,
    MAX_CLASSIFICATION_CONFIDENCE,
)
from ...data.knowledge_base import KnowledgeBase
from ...models.classification import ClassificationResult
from ...utils.text import contains_term

logger = logging.getLogger(__name__)


class KeywordIntentClassifier:
    """Classify questions by counting distinct domain keyword matches."""

    strategy = "deterministic"

    def __init__(
        self,
        knowledge_base: KnowledgeBase | None = None,
        keywords: list[str] | None = None,
        fuzzy_patterns: list[tuple[Pattern, str]] | None = None,
        confidence_per_match: float = CONFIDENCE_PER_MATCH,
        max_confidence: float = MAX_CLASSIFICATION_CONFIDENCE,
    ) -> None:
        self.knowledge_base = knowledge_base or KnowledgeBase()
        self.keywords = DOMAIN_KEYWORDS if keywords is None else keywords
        self.fuzzy_patterns = FUZZY_KEYWORD_PATTERNS if fuzzy_patterns is None else fuzzy_patterns
        self.confidence_per_match = confidence_per_match
        self.max_confidence = max_confidence

    def match_keywords(self, question: str) -> list[str]:
        """Return the distinct domain keywords found in a question.

        Keywords of up to four letters only count as whole words.

        Typo patterns count as a match for the keyword they stand for, so
        "autism" and "autisim" in the same question count once.
        """
        text = question.lower()
        matches = [keyword for keyword in self.keywords if contains_term(text, keyword)]
        for pattern, keyword in self.fuzzy_patterns:
            if keyword not in matches and pattern.search(text):
                matches.append(keyword)
        return matches

    def confidence_for(self, match_count: int) -> float:
        return round(min(match_count * self.confidence_per_match, self.max_confidence), 2)

    def evaluate(self, question: str) -> ClassificationResult:
        """Classify synchronously."""
        if not question:
            return ClassificationResult(
                is_in_domain=False,
                confidence=0.0,
                reasoning="Empty question",
            )

        matches = self.match_keywords(question)
        if not matches:
            return ClassificationResult(
                is_in_domain=False,
                confidence=0.0,
                reasoning="No autism-related keywords found",
            )

        detected_topics = self.knowledge_base.keywords_in(question, matches)
        return ClassificationResult(
            is_in_domain=True,
            confidence=self.confidence_for(len(matches)),
            reasoning=f"Matched {len(matches)} autism-related keyword(s): {', '.join(matches)}",
            detected_topics=tuple(detected_topics),
            matched_keywords=tuple(matches),
        )

    async def classify(self, question: str) -> ClassificationResult:
        return self.evaluate(question)
