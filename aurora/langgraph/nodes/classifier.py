import logging

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import JsonOutputParser
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config import FALLBACK_CLASSIFICATION_CONFIDENCE, MODEL_CONFIG
from ...constants import QUESTION_PREVIEW_LENGTH
from ...data.knowledge_base import KnowledgeBase
from ...exceptions import ResponseParseError
from ...models.classification import ClassificationResult
from ...services.text_generation import TextGenerator
from ...utils.error_handling import create_error_response
from ...utils.text import preview
from ..state import QuestionState

logger = logging.getLogger(__name__)


class IntentJudgment(BaseModel):
    """Schema for the intent classification reply."""

    model_config = ConfigDict(populate_by_name=True)

    is_in_domain: bool = Field(
        validation_alias=AliasChoices("isInDomain", "isAutismRelated", "is_in_domain"),
        description="Whether the question relates to autism spectrum disorder",
    )
    confidence: float = Field(description="Confidence score between 0 and 1")
    reasoning: str = Field(default="", description="Brief explanation of the decision")
    detected_topics: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("detectedTopics", "detected_topics"),
        description="Knowledge base topic keys relevant to the question",
    )

    @field_validator("confidence")
    @classmethod
    def clamp_confidence(cls, value: float) -> float:
        return min(max(value, 0.0), 1.0)

    @field_validator("detected_topics", mode="before")
    @classmethod
    def coerce_topics(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


SYSTEM_PROMPT = """You are Aurora, an autism specialist assistant. Your job is to decide whether a
question relates to Autism Spectrum Disorder.

Consider these autism-related topics as IN SCOPE:
- Diagnosis, assessment, early signs
- Treatments, therapies, interventions
- Daily living, communication, sensory issues
- Education, IEPs, school support
- Family support, caregiving
- Adult autism, employment, relationships
- Legal rights, advocacy, discrimination
- Government funding, state funding, insurance coverage
- Autism communities, support groups, resources
- Research, evidence-based practices

Even if the question has spelling errors or grammar mistakes, focus on the intent and meaning.

Known topic keys: {topic_keys}

You must respond with valid JSON containing these exact fields:
{{
    "isInDomain": true or false,
    "confidence": 0.0 to 1.0,
    "reasoning": "brief explanation",
    "detectedTopics": ["known topic keys relevant to the question"]
}}"""


class LLMIntentClassifier:
    """Classify questions by asking the text-generation service for a judgment."""

    strategy = "delegated"

    def __init__(
        self,
        service: TextGenerator,
        knowledge_base: KnowledgeBase | None = None,
    ) -> None:
        self.service = service
        self.knowledge_base = knowledge_base or KnowledgeBase()
        self.parser = JsonOutputParser(pydantic_object=IntentJudgment)

    def build_prompts(self, question: str) -> tuple[str, str]:
        system_prompt = SYSTEM_PROMPT.format(topic_keys=", ".join(self.knowledge_base.keys()))
        user_prompt = f'Question: "{question}"\n\nClassify this question. Respond with JSON only.'
        return system_prompt, user_prompt

    def parse_judgment(self, text: str) -> ClassificationResult:
        """Parse the service reply into a classification.

        Raises:
            ResponseParseError: If the reply is not valid JSON for the schema

        """
        try:
            payload = self.parser.parse(text)
            judgment = IntentJudgment.model_validate(payload)
        except (OutputParserException, ValidationError, TypeError) as e:
            raise ResponseParseError(f"Invalid classification reply: {e!s}") from e

        # Drop topics the knowledge base does not know about
        topics = tuple(
            key for key in dict.fromkeys(judgment.detected_topics) if key in self.knowledge_base
        )
        return ClassificationResult(
            is_in_domain=judgment.is_in_domain,
            confidence=judgment.confidence,
            reasoning=judgment.reasoning,
            detected_topics=topics,
        )

    async def classify(self, question: str) -> ClassificationResult:
        """Classify a question, failing open when the service misbehaves."""
        if not question or not question.strip():
            return ClassificationResult(is_in_domain=False, confidence=0.0, reasoning="Empty question")

        system_prompt, user_prompt = self.build_prompts(question)
        try:
            reply = await self.service.generate(
                system_prompt,
                user_prompt,
                max_tokens=int(MODEL_CONFIG["classification_max_tokens"]),
                temperature=float(MODEL_CONFIG["classification_temperature"]),
            )
            return self.parse_judgment(reply)
        except Exception as e:
            logger.warning(f"Intent classification error, failing open: {e!s}")
            return fail_open_classification()


def fail_open_classification() -> ClassificationResult:
    """Treat the question as in-domain with low confidence."""
    return ClassificationResult(
        is_in_domain=True,
        confidence=FALLBACK_CLASSIFICATION_CONFIDENCE,
        reasoning="Classification service unavailable, proceeding with caution",
        detected_topics=(),
    )


async def classify_question(state: QuestionState, classifier) -> dict:
    """Classify the normalized question with the configured strategy."""
    if state.get("error"):
        return {}

    question = state.get("question") or ""
    try:
        classification = await classifier.classify(question)
    except Exception as e:
        return create_error_response(e, stage="classify")

    logger.info(
        f"Classified '{preview(question, QUESTION_PREVIEW_LENGTH)}': "
        f"in_domain={classification.is_in_domain} "
        f"confidence={classification.confidence:.2f} "
        f"topics={list(classification.detected_topics)}"
    )
    return {"classification": classification}
