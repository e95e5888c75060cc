"""Reference attribution: rank catalog sources against a question and its answer."""

import logging

from ...config import MAX_REFERENCES, REFERENCE_KEYWORDS
from ...data.references import ReferenceCatalog
from ...models.reference import Reference, ReferenceSummary
from ...utils.text import contains_term
from ..state import QuestionState

logger = logging.getLogger(__name__)


class ReferenceSelector:
    """Score references by keyword overlap weighted by credibility."""

    def __init__(
        self,
        catalog: ReferenceCatalog | None = None,
        keywords: list[str] | None = None,
    ) -> None:
        self.catalog = catalog or ReferenceCatalog()
        self.keywords = REFERENCE_KEYWORDS if keywords is None else keywords

    def extract_keywords(self, text: str) -> list[str]:
        """Return the topical keywords present in text."""
        text = text.lower()
        return [keyword for keyword in self.keywords if contains_term(text, keyword)]

    @staticmethod
    def score(reference: Reference, keywords: list[str]) -> float:
        """Keyword hits in the reference text times its credibility weight."""
        ref_text = reference.searchable_text()
        hits = sum(1 for keyword in keywords if contains_term(ref_text, keyword))
        return hits * reference.credibility_weight

    def rank(self, question: str, answer_text: str) -> list[tuple[Reference, float]]:
        """Score every reference and sort the relevant ones.

        Sorting is by score, then credibility weight, both descending. The
        sort is stable, so exact ties keep catalog order.
        """
        keywords = self.extract_keywords(f"{question} {answer_text}")
        if not keywords:
            return []

        scored = []
        for reference in self.catalog:
            score = self.score(reference, keywords)
            if score > 0:
                scored.append((reference, score))

        scored.sort(key=lambda item: (item[1], item[0].credibility_weight), reverse=True)
        return scored

    def select(
        self,
        question: str,
        answer_text: str,
        max_results: int = MAX_REFERENCES,
    ) -> list[ReferenceSummary]:
        """Return up to max_results reference summaries, best first."""
        if max_results <= 0:
            return []
        return [reference.summary() for reference, _ in self.rank(question, answer_text)[:max_results]]


def select_references(state: QuestionState, selector: ReferenceSelector) -> dict:
    """Attach ranked references for the answered question."""
    if state.get("error"):
        return {}

    try:
        references = selector.select(
            state.get("question") or "",
            state.get("answer") or "",
            state.get("max_references", MAX_REFERENCES),
        )
    except Exception as e:
        logger.warning(f"Reference selection error, using default references: {e!s}")
        return {"references": selector.catalog.get_default_references()}

    logger.debug(f"Selected {len(references)} references")
    return {"references": references}
