"""Pytest configuration and fixtures."""

import pytest

from aurora.data.knowledge_base import KnowledgeBase
from aurora.data.references import ReferenceCatalog


class FakeTextService:
    """Stand-in for the text-generation service.

    Replies are returned in order (the last one repeats). An exception in
    the reply list is raised instead of returned.
    """

    def __init__(self, *replies):
        self.replies = list(replies) or [""]
        self.calls = []

    async def generate(self, system_prompt, user_prompt, max_tokens, temperature):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        index = min(len(self.calls) - 1, len(self.replies) - 1)
        reply = self.replies[index]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def knowledge_base():
    return KnowledgeBase()


@pytest.fixture
def reference_catalog():
    return ReferenceCatalog()


@pytest.fixture
def failing_service():
    """A service that raises on every call."""
    return FakeTextService(ConnectionError("service down"))


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Keep tests off the network."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def make_service():
    """Factory for fake text services with scripted replies."""
    return FakeTextService
