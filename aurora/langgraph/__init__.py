"""LangGraph workflow components for question processing."""

from .state import QuestionState
from .workflow import build_workflow, create_initial_state

__all__ = ["QuestionState", "build_workflow", "create_initial_state"]
