"""Tests for answer generation."""

from dataclasses import replace

import pytest

from aurora.constants import (
    BETA_DISCLAIMER,
    CRISIS_MESSAGE,
    GENERAL_GUIDANCE,
    PROFESSIONAL_DISCLAIMER,
)
from aurora.langgraph.nodes.responder import (
    KnowledgeBaseResponder,
    LLMResponder,
    format_topic_section,
    generate_answer,
)
from aurora.models.classification import ClassificationResult

SENSORY_QUESTION = "what are some sensory strategies for autism?"


@pytest.fixture
def sensory_classification():
    return ClassificationResult(
        is_in_domain=True,
        confidence=0.6,
        reasoning="test",
        detected_topics=("sensory_processing",),
    )


@pytest.fixture
def undetected_classification():
    return ClassificationResult(is_in_domain=True, confidence=0.3)


class TestKnowledgeBaseResponder:
    """Test suite for knowledge base composition."""

    def test_composes_topic_sections(self, knowledge_base, sensory_classification):
        answer = KnowledgeBaseResponder(knowledge_base).compose(
            SENSORY_QUESTION, sensory_classification
        )

        assert answer.startswith("## Sensory Processing")
        assert "**Strategies:**" in answer
        assert "sensory" in answer.lower()
        assert answer.endswith(BETA_DISCLAIMER)
        assert PROFESSIONAL_DISCLAIMER in answer

    def test_searches_when_nothing_detected(self, knowledge_base, undetected_classification):
        answer = KnowledgeBaseResponder(knowledge_base).compose(
            "how can i help with my child's iep at school?", undetected_classification
        )
        assert "## Education Support" in answer

    def test_general_guidance_without_topics(self, knowledge_base, undetected_classification):
        answer = KnowledgeBaseResponder(knowledge_base).compose("autism?", undetected_classification)
        assert answer == GENERAL_GUIDANCE

    def test_crisis_message_without_topics(self, knowledge_base, undetected_classification):
        answer = KnowledgeBaseResponder(knowledge_base).compose(
            "autism crisis now", undetected_classification
        )
        assert answer == CRISIS_MESSAGE

    def test_lists_linked_sources(
        self, knowledge_base, reference_catalog, sensory_classification
    ):
        answer = KnowledgeBaseResponder(knowledge_base, reference_catalog).compose(
            SENSORY_QUESTION, sensory_classification
        )

        assert answer.startswith("## Sensory Processing")
        assert "**Learn more:**" in answer
        assert "- Sensory Issues and Autism (Autism Speaks)" in answer
        assert (
            "- Occupational Therapy and Autism (American Occupational Therapy Association)"
            in answer
        )
        assert answer.endswith(BETA_DISCLAIMER)

    def test_no_sources_without_catalog(self, knowledge_base, sensory_classification):
        answer = KnowledgeBaseResponder(knowledge_base).compose(
            SENSORY_QUESTION, sensory_classification
        )
        assert "**Learn more:**" not in answer

    def test_unknown_reference_ids_are_skipped(self, knowledge_base, reference_catalog):
        topic = replace(knowledge_base.get("communication"), reference_ids=("missing", "cdc_autism"))
        sources = KnowledgeBaseResponder(knowledge_base, reference_catalog).topic_sources(topic)
        assert [source.id for source in sources] == ["cdc_autism"]

    def test_format_topic_section(self, knowledge_base):
        section = format_topic_section(knowledge_base.get("communication"))
        assert section.splitlines()[0] == "## Communication"
        assert "- Use visual supports like picture cards or communication boards" in section


class TestLLMResponder:
    """Test suite for delegated generation."""

    @pytest.mark.asyncio
    async def test_returns_canonical_service_answer(
        self, make_service, knowledge_base, sensory_classification
    ):
        service = make_service('{"answer": "Try noise-canceling headphones.\\nTake sensory breaks."}')
        answer = await LLMResponder(service, knowledge_base).generate(
            SENSORY_QUESTION, sensory_classification
        )

        assert answer == "Try noise-canceling headphones.\nTake sensory breaks."
        call = service.calls[0]
        assert call["temperature"] == 0.3
        assert call["max_tokens"] == 800
        assert '"sensory_processing"' in call["user_prompt"]

    @pytest.mark.asyncio
    async def test_falls_back_when_service_fails(
        self, failing_service, knowledge_base, sensory_classification
    ):
        answer = await LLMResponder(failing_service, knowledge_base).generate(
            SENSORY_QUESTION, sensory_classification
        )

        expected = KnowledgeBaseResponder(knowledge_base).compose(
            SENSORY_QUESTION, sensory_classification
        )
        assert answer == expected

    @pytest.mark.asyncio
    async def test_falls_back_on_empty_reply(
        self, make_service, knowledge_base, sensory_classification
    ):
        answer = await LLMResponder(make_service("  \x00 "), knowledge_base).generate(
            SENSORY_QUESTION, sensory_classification
        )
        assert answer.startswith("## Sensory Processing")


class TestGenerateAnswerNode:
    """Test suite for the generate node."""

    @pytest.mark.asyncio
    async def test_sets_answer(self, knowledge_base, sensory_classification):
        state = {"question": SENSORY_QUESTION, "classification": sensory_classification}
        update = await generate_answer(state, KnowledgeBaseResponder(knowledge_base))
        assert update["answer"].startswith("## Sensory Processing")

    @pytest.mark.asyncio
    async def test_missing_classification_is_error(self, knowledge_base):
        update = await generate_answer(
            {"question": SENSORY_QUESTION, "classification": None},
            KnowledgeBaseResponder(knowledge_base),
        )
        assert update["error"].startswith("generate:")

    @pytest.mark.asyncio
    async def test_skips_when_error_set(self, knowledge_base, sensory_classification):
        state = {"error": "classify: broken", "classification": sensory_classification}
        assert await generate_answer(state, KnowledgeBaseResponder(knowledge_base)) == {}
