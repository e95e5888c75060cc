"""Reference (citation) data models."""

from dataclasses import dataclass
from enum import Enum

from ..config import CREDIBILITY_WEIGHTS, UNKNOWN_CREDIBILITY_WEIGHT


class Credibility(str, Enum):
    """Ordinal trust tier of a reference source."""

    HIGHEST = "highest"
    HIGH = "high"
    MODERATE = "moderate"
    BASIC = "basic"

    @property
    def weight(self) -> float:
        """Numeric scoring multiplier for this tier."""
        return credibility_weight(self.value)


class ReferenceType(str, Enum):
    """Category of organization behind a reference."""

    GOVERNMENT = "government"
    NONPROFIT = "nonprofit"
    ACADEMIC = "academic"
    PROFESSIONAL = "professional"
    ADVOCACY = "advocacy"
    CRISIS = "crisis"


def credibility_weight(credibility: str | None) -> float:
    """Map a credibility tier name to its weight, 1.0 for unknown tiers."""
    if not credibility:
        return UNKNOWN_CREDIBILITY_WEIGHT
    return CREDIBILITY_WEIGHTS.get(str(credibility).lower(), UNKNOWN_CREDIBILITY_WEIGHT)


@dataclass(frozen=True)
class ReferenceSummary:
    """The caller-visible projection of a reference."""

    title: str
    organization: str
    url: str
    type: str
    credibility: str

    def to_dict(self) -> dict:
        """Convert summary to dictionary for serialization."""
        return {
            "title": self.title,
            "organization": self.organization,
            "url": self.url,
            "type": self.type,
            "credibility": self.credibility,
        }


@dataclass(frozen=True)
class Reference:
    """A credibility-tagged source that can back an answer."""

    id: str
    title: str
    organization: str
    url: str
    type: ReferenceType
    credibility: Credibility
    description: str
    keywords: tuple[str, ...]

    @property
    def credibility_weight(self) -> float:
        return self.credibility.weight

    def searchable_text(self) -> str:
        """Title, description and keywords, lower-cased."""
        return " ".join([self.title, self.description, *self.keywords]).lower()

    def summary(self) -> ReferenceSummary:
        """Project to the fields exposed to callers."""
        return ReferenceSummary(
            title=self.title,
            organization=self.organization,
            url=self.url,
            type=self.type.value,
            credibility=self.credibility.value,
        )
