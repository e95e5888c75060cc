"""Static knowledge and reference catalogs."""

from .knowledge_base import TOPICS, KnowledgeBase
from .references import REFERENCES, ReferenceCatalog

__all__ = ["REFERENCES", "TOPICS", "KnowledgeBase", "ReferenceCatalog"]
