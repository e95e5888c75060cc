import logging

from ...constants import QUESTION_PREVIEW_LENGTH
from ...utils.text import normalize_user_input, preview
from ..state import QuestionState

logger = logging.getLogger(__name__)


def normalize_question(state: QuestionState) -> dict:
    """Normalize the raw question into its canonical form."""
    question = normalize_user_input(state.get("raw_question"))
    logger.debug(f"Normalized question: '{preview(question, QUESTION_PREVIEW_LENGTH)}'")
    return {"question": question}
