import logging

from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from ..config import MAX_REFERENCES
from ..utils.error_handling import check_state_for_errors
from .nodes.classifier import classify_question
from .nodes.normalizer import normalize_question
from .nodes.reference_selector import ReferenceSelector, select_references
from .nodes.responder import generate_answer
from .state import QuestionState

logger = logging.getLogger(__name__)


def route_after_classification(state: QuestionState) -> str:
    """Route in-domain questions to generation, everything else to the end."""
    if check_state_for_errors(state):
        return "end"

    classification = state.get("classification")
    if classification is None or not classification.is_in_domain:
        logger.info("Question is out of domain, skipping generation")
        return "end"
    return "generate"


def build_workflow(
    classifier,
    responder,
    selector: ReferenceSelector,
) -> CompiledStateGraph:
    """Build the compiled question workflow.

    Args:
        classifier: Intent classification strategy
        responder: Answer generation strategy
        selector: Reference selector

    Returns:
        Compiled LangGraph workflow

    """

    async def classify(state: QuestionState) -> dict:
        return await classify_question(state, classifier)

    async def generate(state: QuestionState) -> dict:
        return await generate_answer(state, responder)

    def attribute(state: QuestionState) -> dict:
        return select_references(state, selector)

    workflow = StateGraph(QuestionState)

    # Add nodes
    workflow.add_node("normalize", normalize_question)
    workflow.add_node("classify", classify)
    workflow.add_node("generate", generate)
    workflow.add_node("select_references", attribute)

    # Define the flow with conditional routing
    workflow.add_edge("normalize", "classify")
    workflow.add_conditional_edges(
        "classify",
        route_after_classification,
        {
            "generate": "generate",
            "end": END,
        },
    )
    workflow.add_edge("generate", "select_references")

    workflow.set_entry_point("normalize")
    workflow.set_finish_point("select_references")

    return workflow.compile()


def create_initial_state(question: str, max_references: int = MAX_REFERENCES) -> QuestionState:
    """Create initial state for question processing.

    Args:
        question: Raw question text
        max_references: Maximum number of references to attach

    Returns:
        Initial question state

    """
    return {
        "raw_question": question,
        "max_references": max_references,
        "question": None,
        "classification": None,
        "answer": None,
        "references": None,
        "error": None,
    }
