"""Aurora question pipeline: validation, workflow execution and feedback."""

import copy
import logging
import os
import time
from datetime import datetime

from ..config import MAX_FILE_CONTENT_CHARS, MAX_QUESTION_LENGTH, MAX_REFERENCES
from ..constants import (
    ERROR_MESSAGE,
    OFF_TOPIC_MESSAGE,
    QUESTION_PREVIEW_LENGTH,
    SERVICE_INFO,
    SERVICE_NAME,
    SERVICE_VERSION,
    SUGGESTED_TOPICS,
)
from ..data.knowledge_base import KnowledgeBase
from ..data.references import ReferenceCatalog
from ..exceptions import ValidationError, WorkflowError
from ..langgraph.nodes.classifier import LLMIntentClassifier
from ..langgraph.nodes.keyword_classifier import KeywordIntentClassifier
from ..langgraph.nodes.reference_selector import ReferenceSelector
from ..langgraph.nodes.responder import KnowledgeBaseResponder, LLMResponder
from ..langgraph.workflow import build_workflow, create_initial_state
from ..models.classification import ResponseStatus
from ..models.feedback import AnalyticsSnapshot, FeedbackAck, Vote
from ..models.result import PipelineResult
from ..services.text_generation import TextGenerationService, TextGenerator
from ..utils.error_handling import check_state_for_errors
from ..utils.text import preview
from .feedback_manager import FeedbackManager

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return max(0, int((time.perf_counter() - start) * 1000))


class Aurora:
    """Answers autism-related questions and collects feedback on the answers.

    Classification and generation strategies are fixed at construction. Use
    ``Aurora.from_env()`` to pick them from the environment.
    """

    def __init__(
        self,
        classifier,
        responder,
        selector: ReferenceSelector | None = None,
        knowledge_base: KnowledgeBase | None = None,
        references: ReferenceCatalog | None = None,
        feedback_manager: FeedbackManager | None = None,
        service: TextGenerator | None = None,
    ) -> None:
        self.knowledge_base = knowledge_base or KnowledgeBase()
        self.references = references or ReferenceCatalog()
        self.classifier = classifier
        self.responder = responder
        self.selector = selector or ReferenceSelector(self.references)
        self.feedback_manager = feedback_manager or FeedbackManager()
        self.service = service
        self.workflow = build_workflow(self.classifier, self.responder, self.selector)

        logger.info(
            f"Aurora initialized (classifier={self.classifier.strategy}, "
            f"responder={self.responder.strategy})"
        )

    @classmethod
    def from_env(
        cls,
        api_key: str | None = None,
        service: TextGenerator | None = None,
    ) -> "Aurora":
        """Build an Aurora instance from the environment.

        Uses the text-generation service for classification and answers when
        a service is given or OPENAI_API_KEY is set, otherwise the keyword
        classifier and the knowledge base.
        """
        knowledge_base = KnowledgeBase()
        references = ReferenceCatalog()

        if service is None and (api_key or os.getenv("OPENAI_API_KEY")):
            service = TextGenerationService(api_key=api_key)

        if service is None:
            logger.warning("OPENAI_API_KEY not set, using keyword classification")
            return cls(
                classifier=KeywordIntentClassifier(knowledge_base),
                responder=KnowledgeBaseResponder(knowledge_base, references),
                knowledge_base=knowledge_base,
                references=references,
            )

        return cls(
            classifier=LLMIntentClassifier(service, knowledge_base),
            responder=LLMResponder(service, knowledge_base, references),
            knowledge_base=knowledge_base,
            references=references,
            service=service,
        )

    async def process_question(
        self,
        question: str,
        max_references: int = MAX_REFERENCES,
    ) -> PipelineResult:
        """Run a question through the workflow.

        Never raises: unexpected failures produce an error result with
        emergency references.
        """
        start = time.perf_counter()
        logger.info(f"Processing question: {preview(question or '', QUESTION_PREVIEW_LENGTH)}")

        try:
            state = await self.workflow.ainvoke(create_initial_state(question, max_references))
            if check_state_for_errors(state):
                raise WorkflowError(state["error"])

            classification = state.get("classification")
            if classification is None:
                raise WorkflowError("Workflow finished without a classification")

            if not classification.is_in_domain:
                return PipelineResult(
                    answer=OFF_TOPIC_MESSAGE,
                    references=[],
                    is_in_domain=False,
                    confidence=classification.confidence,
                    status=ResponseStatus.OFF_TOPIC,
                    response_time_ms=_elapsed_ms(start),
                )

            references = state.get("references")
            if not references:
                references = self.references.get_default_references()[: max(max_references, 0)]
            result = PipelineResult(
                answer=state["answer"],
                references=references,
                is_in_domain=True,
                confidence=classification.confidence,
                status=ResponseStatus.SUCCESS,
                response_time_ms=_elapsed_ms(start),
                detected_topics=list(classification.detected_topics),
            )
        except Exception:
            logger.exception("Question processing failed")
            return PipelineResult(
                answer=ERROR_MESSAGE,
                references=self.references.get_emergency_references(),
                is_in_domain=True,
                confidence=0.0,
                status=ResponseStatus.ERROR,
                response_time_ms=_elapsed_ms(start),
            )

        logger.info(
            f"Answered in {result.response_time_ms}ms with {len(result.references)} references"
        )
        return result

    @staticmethod
    def validate_question(question) -> None:
        """Raise ValidationError unless question is a non-blank string within limits."""
        if question is None or not isinstance(question, str):
            raise ValidationError("Question is required and must be a string")
        if not question.strip():
            raise ValidationError("Question cannot be empty")
        if len(question) > MAX_QUESTION_LENGTH:
            raise ValidationError(
                f"Question is too long (maximum {MAX_QUESTION_LENGTH} characters)"
            )

    async def ask(
        self,
        question: str,
        file_content: str | None = None,
        file_metadata: dict | None = None,
    ) -> PipelineResult:
        """Validate a question, fold in an uploaded file and process it.

        Args:
            question: The user's question
            file_content: Optional text of an uploaded file
            file_metadata: Optional metadata for the file, such as its name

        Returns:
            PipelineResult for the question

        Raises:
            ValidationError: If the question is missing, blank or too long

        """
        self.validate_question(question)

        if file_content:
            file_name = (file_metadata or {}).get("name", "uploaded file")
            question = (
                f"{question}\n\n[Attached file: {file_name}]\n"
                f"{file_content[:MAX_FILE_CONTENT_CHARS]}"
            )
            logger.info(f"Attached file content from {file_name}")

        return await self.process_question(question)

    def process_feedback(
        self,
        feedback_id: str | None,
        vote: str | Vote,
        question: str,
        answer: str = "",
    ) -> FeedbackAck:
        """Record a vote on an answer.

        Raises:
            ValidationError: If the vote or question is invalid

        """
        return self.feedback_manager.record_feedback(feedback_id, vote, question, answer)

    def get_feedback_analytics(self) -> AnalyticsSnapshot:
        return self.feedback_manager.get_analytics()

    def get_status(self) -> dict:
        """Report service health and the active strategies."""
        ai_connected = self.service is not None
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "ai_service": "connected" if ai_connected else "not_configured",
            "status": "operational" if ai_connected else "degraded",
            "classifier": self.classifier.strategy,
            "responder": self.responder.strategy,
            "timestamp": datetime.now().isoformat(),
        }

    def get_info(self) -> dict:
        """Describe what the assistant covers and where to get urgent help."""
        return copy.deepcopy(SERVICE_INFO)

    def get_suggested_topics(self) -> list[dict]:
        """Starter topics with example questions for a new conversation."""
        return [
            {**topic, "examples": list(topic["examples"])} for topic in SUGGESTED_TOPICS
        ]
