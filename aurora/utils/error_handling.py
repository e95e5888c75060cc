"""Standardized error handling utilities for the Aurora pipeline."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def create_error_response(
    error: Exception | str,
    stage: str = "pipeline",
) -> dict[str, Any]:
    """Create a standardized error update for LangGraph nodes.

    Args:
        error: The error that occurred
        stage: Name of the pipeline stage that failed

    Returns:
        Dictionary with error information to merge into the question state

    """
    error_message = str(error) if isinstance(error, Exception) else error
    logger.error(f"Pipeline stage '{stage}' failed: {error_message}")

    return {
        "error": f"{stage}: {error_message}",
    }


def check_state_for_errors(state: dict[str, Any]) -> bool:
    """Check if a state contains errors.

    Args:
        state: The question state to check

    Returns:
        True if state contains errors, False otherwise

    """
    return bool(state.get("error"))
