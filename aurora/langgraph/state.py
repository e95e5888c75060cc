from typing import TypedDict

from ..models.classification import ClassificationResult
from ..models.reference import ReferenceSummary


class QuestionState(TypedDict):
    """State that flows through the LangGraph workflow."""

    # Input fields
    raw_question: str
    max_references: int

    # Normalization
    question: str | None

    # Classification results
    classification: ClassificationResult | None

    # Generation results
    answer: str | None
    references: list[ReferenceSummary] | None

    # Workflow control
    error: str | None
