"""Custom exceptions for the Aurora autism assistant."""


class AuroraError(Exception):
    """Base exception for the Aurora autism assistant."""

    pass


class ValidationError(AuroraError):
    """Raised when caller input fails validation."""

    pass


class ClassificationError(AuroraError):
    """Raised when intent classification fails."""

    pass


class GenerationError(AuroraError):
    """Raised when answer generation fails."""

    pass


class ServiceUnavailableError(AuroraError):
    """Raised when the text-generation service is missing or failing."""

    pass


class ResponseParseError(AuroraError):
    """Raised when a structured service reply cannot be parsed."""

    pass


class WorkflowError(AuroraError):
    """Raised when workflow execution fails."""

    pass
