"""Curated autism knowledge base with practical guidance."""

import logging
from collections.abc import Iterable

from ..config import (
    FUZZY_KEYWORD_PATTERNS,
    FUZZY_MAX_DISTANCE,
    FUZZY_MIN_WORD_LENGTH,
    KNOWLEDGE_SEARCH_TERMS,
)
from ..models.topic import Topic
from ..utils.text import contains_term

logger = logging.getLogger(__name__)


TOPICS: dict[str, Topic] = {
    topic.key: topic
    for topic in [
        Topic(
            key="sensory_processing",
            summary=(
                "Many individuals with autism experience differences in processing sensory "
                "information, which can affect their daily functioning and comfort."
            ),
            strategies=(
                "Create sensory-friendly environments with adjustable lighting and sound",
                "Use noise-canceling headphones in overwhelming environments",
                "Provide fidget toys or sensory tools for self-regulation",
                "Establish sensory breaks throughout the day",
                "Use weighted blankets or compression clothing for comfort",
                "Gradually expose to new sensory experiences at a comfortable pace",
            ),
            keywords=(
                "sensory", "sound", "noise", "touch", "texture", "light", "smell",
                "overstimulation",
            ),
            reference_ids=("autism_speaks_sensory", "occupational_therapy_autism"),
        ),
        Topic(
            key="communication",
            summary=(
                "Communication differences in autism can range from nonverbal to hyperlexic, "
                "with many individuals benefiting from alternative communication methods."
            ),
            strategies=(
                "Use visual supports like picture cards or communication boards",
                "Practice turn-taking in conversations",
                "Allow extra processing time for responses",
                "Use clear, concrete language rather than abstract concepts",
                "Implement AAC (Augmentative and Alternative Communication) devices",
                "Focus on functional communication goals",
            ),
            keywords=(
                "communication", "speech", "language", "nonverbal", "talking", "aac",
                "pictures",
            ),
            reference_ids=("speech_pathology_autism",),
        ),
        Topic(
            key="education_support",
            summary=(
                "Educational support for students with autism includes individualized "
                "planning, accommodations, and evidence-based teaching strategies."
            ),
            strategies=(
                "Develop comprehensive IEP or 504 plans with specific goals",
                "Use visual schedules and structure in the classroom",
                "Provide quiet spaces for breaks and self-regulation",
                "Implement social skills instruction and peer support",
                "Use assistive technology when appropriate",
                "Collaborate with autism specialists and related service providers",
            ),
            keywords=(
                "school", "education", "iep", "504", "teacher", "classroom", "learning",
                "academics",
            ),
            reference_ids=("idea_autism_guidelines", "center_autism_education"),
        ),
        Topic(
            key="behavioral_support",
            summary=(
                "Behavioral approaches for autism focus on understanding the function of "
                "behaviors and teaching appropriate alternatives."
            ),
            strategies=(
                "Identify triggers and functions of challenging behaviors",
                "Use positive behavior interventions and supports (PBIS)",
                "Teach coping skills and emotional regulation strategies",
                "Create predictable routines and clear expectations",
                "Use visual cues and social stories for behavior guidance",
                "Implement reinforcement systems for desired behaviors",
            ),
            keywords=(
                "behavior", "meltdown", "tantrum", "stimming", "routine", "challenging",
                "aggression",
            ),
            reference_ids=("applied_behavior_analysis",),
        ),
        Topic(
            key="social_skills",
            summary=(
                "Social skills development for individuals with autism involves explicit "
                "teaching of social conventions and interaction patterns."
            ),
            strategies=(
                "Use social stories to explain social situations",
                "Practice social interactions in structured settings",
                "Teach perspective-taking and emotion recognition",
                "Facilitate peer interactions and friendships",
                "Use video modeling for social skill demonstration",
                "Create social skills groups with similar-aged peers",
            ),
            keywords=(
                "social", "friends", "interaction", "play", "conversation", "peers",
                "relationships",
            ),
        ),
        Topic(
            key="early_intervention",
            summary=(
                "Early intervention services for young children with autism focus on "
                "developmental skills and family support."
            ),
            strategies=(
                "Begin intervention as early as possible (before age 3 preferred)",
                "Use naturalistic teaching strategies in daily routines",
                "Focus on communication and social engagement",
                "Provide parent training and family support",
                "Implement play-based learning approaches",
                "Coordinate services across multiple disciplines",
            ),
            keywords=(
                "early", "intervention", "toddler", "baby", "development", "milestones",
                "signs",
            ),
            reference_ids=("cdc_autism",),
        ),
        Topic(
            key="adult_support",
            summary=(
                "Adults with autism benefit from support in employment, independent living, "
                "and community participation."
            ),
            strategies=(
                "Develop employment skills and job coaching support",
                "Teach independent living skills and self-advocacy",
                "Provide social opportunities and community connections",
                "Support post-secondary education and training",
                "Address mental health and wellness needs",
                "Facilitate transition planning from school to adult services",
            ),
            keywords=(
                "adult", "employment", "job", "work", "independence", "college",
                "transition",
            ),
            reference_ids=("autism_employment_network", "adult_autism_services"),
        ),
        Topic(
            key="family_support",
            summary=(
                "Family support is crucial for autism care, including education, respite, "
                "and emotional support for all family members."
            ),
            strategies=(
                "Connect families with local autism support groups",
                "Provide respite care and family break opportunities",
                "Offer sibling support programs and resources",
                "Share information about autism and evidence-based practices",
                "Support family advocacy and self-determination",
                "Address family stress and mental health needs",
            ),
            keywords=(
                "family", "parent", "sibling", "support", "help", "stress", "respite",
            ),
            reference_ids=("family_support_autism", "sibling_support_project"),
        ),
        Topic(
            key="funding_resources",
            summary=(
                "Various funding sources exist to support autism services, including "
                "government programs, insurance coverage, and grants."
            ),
            strategies=(
                "Explore Medicaid waiver programs for autism services",
                "Understand insurance coverage for autism treatments",
                "Research state-specific autism funding programs",
                "Apply for grants and scholarships for autism support",
                "Utilize federal programs like Social Security benefits",
                "Connect with local autism organizations for funding assistance",
            ),
            keywords=(
                "insurance", "funding", "medicaid", "government", "financial", "grants",
                "money",
            ),
            reference_ids=("autism_insurance_advocacy", "medicaid_autism_services"),
        ),
    ]
}


def fuzzy_match(text: str, term: str, max_distance: int = FUZZY_MAX_DISTANCE) -> bool:
    """Check whether any word in text is a near-miss spelling of term.

    Compares characters position by position, so it catches substitutions
    and a dropped or added trailing letter, not transpositions.
    """
    for word in text.split(" "):
        if len(word) < FUZZY_MIN_WORD_LENGTH or len(term) < FUZZY_MIN_WORD_LENGTH:
            continue
        if abs(len(word) - len(term)) > max_distance:
            continue

        distance = 0
        for i in range(max(len(word), len(term))):
            a = word[i] if i < len(word) else None
            b = term[i] if i < len(term) else None
            if a != b:
                distance += 1
                if distance > max_distance:
                    break
        if distance <= max_distance:
            return True
    return False


class KnowledgeBase:
    """Read-only lookup and search over the curated topics."""

    def __init__(self, topics: dict[str, Topic] | None = None) -> None:
        self._topics = dict(TOPICS if topics is None else topics)

    @property
    def topics(self) -> dict[str, Topic]:
        return dict(self._topics)

    def keys(self) -> list[str]:
        return list(self._topics)

    def get(self, key: str) -> Topic | None:
        return self._topics.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._topics

    def __len__(self) -> int:
        return len(self._topics)

    def find_relevant_topics(
        self, question: str, detected_topics: Iterable[str] = ()
    ) -> list[Topic]:
        """Find topics for a question, preferring the classifier's topics.

        Args:
            question: Normalized question text
            detected_topics: Topic keys from classification

        Returns:
            Matching topics in catalog order (may be empty)

        """
        wanted = {key for key in detected_topics if key in self._topics}
        if wanted:
            return [topic for key, topic in self._topics.items() if key in wanted]

        search_terms = self.extract_search_terms(question)
        if not search_terms:
            return []

        logger.debug(f"Knowledge base search terms: {search_terms}")
        return [
            topic
            for topic in self._topics.values()
            if self._is_topic_relevant(topic, search_terms)
        ]

    def extract_search_terms(self, question: str) -> list[str]:
        """Extract known search terms from a question, tolerating typos."""
        text = question.lower()
        terms = [
            term
            for term in KNOWLEDGE_SEARCH_TERMS
            if contains_term(text, term) or fuzzy_match(text, term)
        ]
        for pattern, keyword in FUZZY_KEYWORD_PATTERNS:
            if keyword not in terms and pattern.search(text):
                terms.append(keyword)
        return terms

    def keywords_in(self, text: str, matches: Iterable[str] = ()) -> list[str]:
        """Topic keys whose keywords appear in text or among matches."""
        text = text.lower()
        matched = set(matches)
        return [
            key
            for key, topic in self._topics.items()
            if any(
                keyword in matched or contains_term(text, keyword) for keyword in topic.keywords
            )
        ]

    @staticmethod
    def _is_topic_relevant(topic: Topic, search_terms: list[str]) -> bool:
        all_text = topic.searchable_text()
        return any(contains_term(all_text, term) for term in search_terms)
