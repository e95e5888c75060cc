import json
import logging

from ...config import MODEL_CONFIG
from ...constants import (
    BETA_DISCLAIMER,
    CRISIS_MESSAGE,
    CRISIS_TERMS,
    GENERAL_GUIDANCE,
    PROFESSIONAL_DISCLAIMER,
)
from ...data.knowledge_base import KnowledgeBase
from ...data.references import ReferenceCatalog
from ...exceptions import GenerationError
from ...models.classification import ClassificationResult
from ...models.reference import Reference
from ...models.topic import Topic
from ...services.text_generation import TextGenerator
from ...utils.error_handling import create_error_response
from ...utils.text import canonicalize_answer
from ..state import QuestionState

logger = logging.getLogger(__name__)


def format_topic_section(topic: Topic, sources: list[Reference] | None = None) -> str:
    """Render one knowledge base topic as a markdown section.

    Args:
        topic: Knowledge base topic to render
        sources: Catalog references linked to the topic, listed under
            "Learn more" when given

    """
    strategies = "\n".join(f"- {strategy}" for strategy in topic.strategies)
    section = f"## {topic.display_title}\n\n{topic.summary}\n\n**Strategies:**\n{strategies}"
    if sources:
        links = "\n".join(f"- {source.title} ({source.organization})" for source in sources)
        section = f"{section}\n\n**Learn more:**\n{links}"
    return section


def mentions_crisis(question: str) -> bool:
    return any(term in question for term in CRISIS_TERMS)


class KnowledgeBaseResponder:
    """Compose answers from curated knowledge base topics."""

    strategy = "knowledge_base"

    def __init__(
        self,
        knowledge_base: KnowledgeBase | None = None,
        catalog: ReferenceCatalog | None = None,
    ) -> None:
        self.knowledge_base = knowledge_base or KnowledgeBase()
        self.catalog = catalog

    def topic_sources(self, topic: Topic) -> list[Reference]:
        """Catalog entries linked from a topic, skipping unknown ids."""
        if self.catalog is None:
            return []
        sources = (self.catalog.get(ref_id) for ref_id in topic.reference_ids)
        return [source for source in sources if source is not None]

    def compose(self, question: str, classification: ClassificationResult) -> str:
        topics = self.knowledge_base.find_relevant_topics(
            question, classification.detected_topics
        )

        if not topics:
            if mentions_crisis(question):
                return CRISIS_MESSAGE
            return GENERAL_GUIDANCE

        sections = [format_topic_section(topic, self.topic_sources(topic)) for topic in topics]
        if mentions_crisis(question):
            sections.insert(0, CRISIS_MESSAGE)
        sections.extend([PROFESSIONAL_DISCLAIMER, BETA_DISCLAIMER])
        return "\n\n".join(sections)

    async def generate(self, question: str, classification: ClassificationResult) -> str:
        return self.compose(question, classification)


SYSTEM_PROMPT = """You are Aurora, a knowledgeable and compassionate autism support specialist.

Your role:
- Provide helpful, evidence-based guidance about autism
- Use warm, supportive, professional tone
- Focus on practical, actionable advice
- Always mention when professional consultation is recommended
- Use person-first language
- Be specific and structured in your responses

Important reminders:
- You are in Beta and can make mistakes
- You provide general information only
- Always recommend consulting healthcare professionals for medical decisions

Respond with the answer text only, formatted in markdown. Do not wrap it in JSON."""


class LLMResponder:
    """Generate answers with the text-generation service.

    Falls back to knowledge base composition on any service or output
    failure, so callers always get a usable answer.
    """

    strategy = "delegated"

    def __init__(
        self,
        service: TextGenerator,
        knowledge_base: KnowledgeBase | None = None,
        catalog: ReferenceCatalog | None = None,
    ) -> None:
        self.service = service
        self.knowledge_base = knowledge_base or KnowledgeBase()
        self.fallback = KnowledgeBaseResponder(self.knowledge_base, catalog)

    def build_user_prompt(self, question: str, classification: ClassificationResult) -> str:
        topics = self.knowledge_base.find_relevant_topics(
            question, classification.detected_topics
        )
        context = {topic.key: topic.to_dict() for topic in topics}
        detected = ", ".join(classification.detected_topics) or "none detected"

        return f"""User's question: "{question}"

Detected topics: {detected}

Relevant knowledge context:
{json.dumps(context, indent=2)}

Provide a structured, helpful response. Include specific strategies and considerations where appropriate."""

    async def generate(self, question: str, classification: ClassificationResult) -> str:
        user_prompt = self.build_user_prompt(question, classification)
        try:
            raw = await self.service.generate(
                SYSTEM_PROMPT,
                user_prompt,
                max_tokens=int(MODEL_CONFIG["response_max_tokens"]),
                temperature=float(MODEL_CONFIG["response_temperature"]),
            )
        except Exception as e:
            logger.warning(f"Expert response generation error, using knowledge base: {e!s}")
            return await self.fallback.generate(question, classification)

        answer = canonicalize_answer(raw)
        if not answer:
            logger.warning("Empty answer from text generation service, using knowledge base")
            return await self.fallback.generate(question, classification)
        return answer


async def generate_answer(state: QuestionState, responder) -> dict:
    """Produce the answer text for an in-domain question."""
    if state.get("error"):
        return {}

    question = state.get("question") or ""
    classification = state.get("classification")
    try:
        if classification is None:
            raise GenerationError("No classification available")

        answer = canonicalize_answer(await responder.generate(question, classification))
        if not answer:
            raise GenerationError("Generated answer is empty")
    except Exception as e:
        return create_error_response(e, stage="generate")

    logger.debug(f"Generated answer with {len(answer)} characters")
    return {"answer": answer}
