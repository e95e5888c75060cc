"""External service clients."""

from .text_generation import TextGenerationService, TextGenerator

__all__ = ["TextGenerationService", "TextGenerator"]
