from dataclasses import dataclass


@dataclass(frozen=True)
class Topic:
    """A curated knowledge base entry for one autism subject area."""

    key: str
    summary: str
    strategies: tuple[str, ...]
    keywords: tuple[str, ...]
    reference_ids: tuple[str, ...] = ()

    @property
    def display_title(self) -> str:
        """Get human-readable title, e.g. 'Sensory Processing'."""
        return self.key.replace("_", " ").title()

    def searchable_text(self) -> str:
        """All text of the topic, lower-cased, for keyword search."""
        return " ".join([self.summary, *self.strategies, *self.keywords]).lower()

    def to_dict(self) -> dict:
        """Convert topic to dictionary for prompt context."""
        return {
            "summary": self.summary,
            "strategies": list(self.strategies),
            "keywords": list(self.keywords),
        }
