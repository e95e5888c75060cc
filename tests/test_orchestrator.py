"""End-to-end tests for the Aurora question pipeline."""

import pytest

from aurora.constants import ERROR_MESSAGE, OFF_TOPIC_MESSAGE, SUGGESTED_TOPICS
from aurora.exceptions import ValidationError
from aurora.langgraph.nodes.keyword_classifier import KeywordIntentClassifier
from aurora.langgraph.nodes.responder import KnowledgeBaseResponder
from aurora.models.classification import ResponseStatus
from aurora.processing.orchestrator import Aurora


@pytest.fixture
def aurora():
    """Aurora with keyword classification and knowledge base answers."""
    return Aurora.from_env()


class TestProcessQuestion:
    """Test suite for Aurora.process_question."""

    @pytest.mark.asyncio
    async def test_sensory_question_success(self, aurora):
        result = await aurora.process_question("What are some sensory strategies for autism?")

        assert result.status == ResponseStatus.SUCCESS
        assert result.is_in_domain is True
        assert result.confidence == 0.6
        assert "sensory" in result.answer.lower()
        assert 0 < len(result.references) <= 4
        assert result.response_time_ms >= 0
        assert "sensory_processing" in result.detected_topics

    @pytest.mark.asyncio
    async def test_pizza_question_off_topic(self, aurora):
        result = await aurora.process_question("What's the best pizza topping?")

        assert result.status == ResponseStatus.OFF_TOPIC
        assert result.is_in_domain is False
        assert result.answer == OFF_TOPIC_MESSAGE
        assert result.references == []

    @pytest.mark.asyncio
    async def test_service_failure_is_recovered(self, failing_service):
        aurora = Aurora.from_env(service=failing_service)
        result = await aurora.process_question("What are some sensory strategies for autism?")

        assert result.status == ResponseStatus.SUCCESS
        assert result.is_in_domain is True
        assert result.answer.startswith("## Sensory Processing")
        assert "**Learn more:**" in result.answer
        assert result.references
        # Both classification and generation tried the service
        assert len(failing_service.calls) == 2

    @pytest.mark.asyncio
    async def test_empty_question_is_off_topic(self, aurora):
        result = await aurora.process_question("")

        assert result.status == ResponseStatus.OFF_TOPIC
        assert result.is_in_domain is False
        assert result.confidence == 0.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question", ["", "   ", None])
    async def test_empty_question_is_off_topic_with_service(self, failing_service, question):
        aurora = Aurora.from_env(service=failing_service)
        result = await aurora.process_question(question)

        assert result.status == ResponseStatus.OFF_TOPIC
        assert result.is_in_domain is False
        assert result.confidence == 0.0
        assert result.references == []
        assert failing_service.calls == []

    @pytest.mark.asyncio
    async def test_unexpected_failure_is_error_result(self, reference_catalog):
        class BrokenClassifier:
            strategy = "broken"

            async def classify(self, question):
                raise RuntimeError("classifier exploded")

        aurora = Aurora(BrokenClassifier(), KnowledgeBaseResponder())
        result = await aurora.process_question("autism and school")

        assert result.status == ResponseStatus.ERROR
        assert result.answer == ERROR_MESSAGE
        assert result.is_in_domain is True
        assert result.confidence == 0.0
        assert result.references == reference_catalog.get_emergency_references()

    @pytest.mark.asyncio
    async def test_default_references_when_none_selected(self, make_service, reference_catalog):
        service = make_service(
            '{"isInDomain": true, "confidence": 0.8, "reasoning": "ok"}',
            "Please talk to your doctor.",
        )
        aurora = Aurora.from_env(service=service)
        result = await aurora.process_question("xyz")

        assert result.status == ResponseStatus.SUCCESS
        assert result.answer == "Please talk to your doctor."
        assert result.references == reference_catalog.get_default_references()

    @pytest.mark.asyncio
    async def test_max_references(self, aurora):
        result = await aurora.process_question("sensory therapy at school", max_references=1)
        assert len(result.references) == 1

    @pytest.mark.asyncio
    async def test_zero_max_references_returns_none(self, aurora):
        result = await aurora.process_question("sensory autism", max_references=0)

        assert result.status == ResponseStatus.SUCCESS
        assert result.references == []

    @pytest.mark.asyncio
    async def test_default_references_respect_max(self, make_service, reference_catalog):
        service = make_service(
            '{"isInDomain": true, "confidence": 0.8, "reasoning": "ok"}',
            "Please talk to your doctor.",
        )
        result = await Aurora.from_env(service=service).process_question("xyz", max_references=2)

        assert result.references == reference_catalog.get_default_references()[:2]

    @pytest.mark.asyncio
    async def test_result_payload(self, aurora):
        payload = (await aurora.process_question("What is stimming in autism?")).to_dict()

        assert set(payload) == {
            "answer",
            "references",
            "isInDomain",
            "confidence",
            "responseTimeMs",
            "status",
        }
        assert payload["status"] == "success"
        assert set(payload["references"][0]) == {
            "title",
            "organization",
            "url",
            "type",
            "credibility",
        }


class TestAsk:
    """Test suite for Aurora.ask validation and file folding."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question", [None, 123, "", "   \n "])
    async def test_rejects_missing_or_blank(self, aurora, question):
        with pytest.raises(ValidationError):
            await aurora.ask(question)

    @pytest.mark.asyncio
    async def test_rejects_too_long(self, aurora):
        with pytest.raises(ValidationError):
            await aurora.ask("autism " * 400)

    @pytest.mark.asyncio
    async def test_folds_truncated_file_content(self, make_service):
        service = make_service('{"isInDomain": false, "confidence": 0.9}')
        aurora = Aurora.from_env(service=service)

        result = await aurora.ask(
            "Can you summarize this report?",
            file_content="y" * 3000,
            file_metadata={"name": "Report.txt"},
        )

        prompt = service.calls[0]["user_prompt"]
        assert result.status == ResponseStatus.OFF_TOPIC
        assert "[attached file: report.txt]" in prompt
        assert "y" * 2000 in prompt
        assert "y" * 2001 not in prompt


class TestFeedbackAndStatus:
    """Test suite for feedback delegation, status and topics."""

    def test_negative_sensory_feedback(self, aurora):
        for i in range(3):
            aurora.process_feedback(f"n{i}", "negative", "Sensory strategies please")

        analytics = aurora.get_feedback_analytics()
        improvements = {item.pattern: item.to_dict() for item in analytics.improvements}
        assert improvements["sensory_topics"]["positiveRate"] == "0%"
        assert analytics.negative_count == 3

    def test_invalid_feedback_raises(self, aurora):
        with pytest.raises(ValidationError):
            aurora.process_feedback("x", "meh", "What is autism?")

    def test_status_without_service(self, aurora):
        status = aurora.get_status()

        assert status["ai_service"] == "not_configured"
        assert status["status"] == "degraded"
        assert status["classifier"] == "deterministic"
        assert status["responder"] == "knowledge_base"
        assert status["timestamp"]

    def test_status_with_service(self, make_service):
        status = Aurora.from_env(service=make_service()).get_status()

        assert status["ai_service"] == "connected"
        assert status["status"] == "operational"
        assert status["classifier"] == "delegated"
        assert status["responder"] == "delegated"

    def test_from_env_uses_api_key(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert Aurora.from_env().classifier.strategy == "delegated"

    def test_explicit_strategies(self):
        aurora = Aurora(KeywordIntentClassifier(), KnowledgeBaseResponder())
        assert aurora.get_status()["classifier"] == "deterministic"

    def test_info(self, aurora):
        info = aurora.get_info()

        assert info["name"] == "Aurora"
        assert info["version"] == "1.0.0-beta"
        assert info["status"] == "Beta - I can make mistakes"
        assert "Cannot provide medical diagnosis" in info["limitations"]
        assert len(info["capabilities"]) == 5
        assert len(info["scope"]) == 9
        assert info["contact"]["suicide_prevention"] == "National Suicide Prevention Lifeline: 988"

        info["scope"].append("changed")
        assert "changed" not in aurora.get_info()["scope"]

    def test_suggested_topics(self, aurora):
        topics = aurora.get_suggested_topics()
        assert len(topics) == len(SUGGESTED_TOPICS) == 6
        assert all(topic["examples"] for topic in topics)

        topics[0]["examples"].append("changed")
        assert "changed" not in SUGGESTED_TOPICS[0]["examples"]
