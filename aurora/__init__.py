"""Aurora Autism Assistant - question answering about autism with curated sources."""

from .config import MODEL_CONFIG
from .exceptions import (
    AuroraError,
    ClassificationError,
    GenerationError,
    ResponseParseError,
    ServiceUnavailableError,
    ValidationError,
    WorkflowError,
)
from .processing.orchestrator import Aurora

__version__ = "0.1.0"
__all__ = [
    "MODEL_CONFIG",
    "Aurora",
    "AuroraError",
    "ClassificationError",
    "GenerationError",
    "ResponseParseError",
    "ServiceUnavailableError",
    "ValidationError",
    "WorkflowError",
]
