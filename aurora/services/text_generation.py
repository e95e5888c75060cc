"""Text generation service backed by OpenAI chat models via LangChain."""

import logging
import os
from typing import Protocol

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from ..config import MODEL_CONFIG
from ..exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that can turn a prompt pair into text."""

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str: ...


class TextGenerationService:
    """Service for generating text with an OpenAI chat model."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            api_key: OpenAI API key, defaults to OPENAI_API_KEY
            model: Chat model name, defaults to MODEL_CONFIG["model"]
            timeout_seconds: Per-request timeout

        """
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ServiceUnavailableError("OPENAI_API_KEY environment variable not set")

        self._api_key = api_key
        self.model = model or str(MODEL_CONFIG["model"])
        self.timeout_seconds = float(timeout_seconds or MODEL_CONFIG["timeout_seconds"])

    def _create_llm(self, max_tokens: int, temperature: float) -> ChatOpenAI:
        return ChatOpenAI(
            model=self.model,
            api_key=self._api_key,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=self.timeout_seconds,
        )

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Generate a reply for the given prompts.

        Raises:
            ServiceUnavailableError: If the model call fails for any reason

        """
        llm = self._create_llm(max_tokens=max_tokens, temperature=temperature)
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]

        try:
            response = await llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"Text generation error: {e!s}")
            raise ServiceUnavailableError(f"Text generation failed: {e!s}") from e

        content = response.content
        if isinstance(content, list):
            # Multi-part replies: keep only the text parts
            content = "".join(
                part if isinstance(part, str) else str(part.get("text", ""))
                for part in content
            )
        return str(content)
