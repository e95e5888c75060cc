"""Configuration settings for the Aurora autism assistant."""

import os
import re
from re import Pattern

# Model configuration
MODEL_CONFIG: dict[str, str | float | int] = {
    "model": os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
    "classification_temperature": 0.1,
    "classification_max_tokens": 200,
    "response_temperature": 0.3,
    "response_max_tokens": 800,
    "timeout_seconds": 30,
}

# Domain vocabulary for the keyword classifier (substring matches, whole words for short terms)
DOMAIN_KEYWORDS: list[str] = [
    "autism",
    "autistic",
    "asd",
    "asperger",
    "neurodivergent",
    "neurodiversity",
    "spectrum disorder",
    "sensory",
    "overstimulation",
    "stimming",
    "meltdown",
    "nonverbal",
    "non-verbal",
    "echolalia",
    "iep",
    "504 plan",
    "aba therapy",
    "applied behavior analysis",
    "speech therapy",
    "occupational therapy",
    "social skills",
    "special education",
    "developmental delay",
    "early intervention",
    "aac",
    "respite",
    "medicaid waiver",
]

# Common misspellings, mapped to the keyword they stand for
FUZZY_KEYWORD_PATTERNS: list[tuple[Pattern, str]] = [
    (re.compile(r"\bautis[mt]\b"), "autism"),
    (re.compile(r"\b(?:autisim|autisum|autizm|autsim|austism)\b"), "autism"),
    (re.compile(r"\b(?:as[bp][eu]rg[ea]rs?)\b"), "asperger"),
    (re.compile(r"\bsens(?:e|o)r(?:e)?y\b"), "sensory"),
    (re.compile(r"\bmelt\s?downs?\b"), "meltdown"),
    (re.compile(r"\bstim(?:s|ing|ming)?\b"), "stimming"),
    (re.compile(r"\bneuro[\s-]?diver(?:gent|gence|sity)\b"), "neurodivergent"),
    (re.compile(r"\bnon[\s-]?verbel\b"), "nonverbal"),
]

# Terms this short only match as whole words (optionally plural)
SHORT_TERM_MAX_LENGTH = 4

# Classifier tunables
CONFIDENCE_PER_MATCH = 0.3
MAX_CLASSIFICATION_CONFIDENCE = 1.0
FALLBACK_CLASSIFICATION_CONFIDENCE = 0.3  # Fail-open confidence

# Terms used to search the knowledge base when no topic was detected
KNOWLEDGE_SEARCH_TERMS: list[str] = [
    "school", "education", "iep", "504", "teacher", "classroom",
    "sensory", "sound", "noise", "touch", "texture", "light",
    "communication", "speech", "language", "nonverbal", "talking",
    "behavior", "meltdown", "tantrum", "stimming", "routine",
    "social", "friends", "interaction", "play", "conversation",
    "therapy", "treatment", "intervention", "aba", "occupational",
    "diagnosis", "assessment", "evaluation", "early", "signs",
    "family", "parent", "sibling", "support", "help",
    "adult", "employment", "job", "work", "independence",
    "insurance", "funding", "medicaid", "government", "financial",
]
FUZZY_MAX_DISTANCE = 2
FUZZY_MIN_WORD_LENGTH = 4

# Reference scoring
REFERENCE_KEYWORDS: list[str] = [
    "sensory", "communication", "behavior", "education", "school", "iep",
    "therapy", "treatment", "intervention", "aba", "speech", "occupational",
    "social", "skills", "diagnosis", "assessment", "early", "adult",
    "employment", "family", "support", "insurance", "funding", "legal",
    "rights", "advocacy", "community", "research", "evidence",
]
CREDIBILITY_WEIGHTS: dict[str, float] = {
    "highest": 3.0,
    "high": 2.5,
    "moderate": 2.0,
    "basic": 1.5,
}
UNKNOWN_CREDIBILITY_WEIGHT = 1.0
MAX_REFERENCES = 4

# Feedback aggregation
FEEDBACK_MIN_SAMPLES = 3
FEEDBACK_POSITIVE_RATE_THRESHOLD = 0.5
TOP_PATTERNS_LIMIT = 5
QUESTION_WORDS = ["what", "how", "why", "when", "where"]
FEEDBACK_TOPIC_TAGS = [
    "sensory",
    "communication",
    "behavior",
    "education",
    "therapy",
    "sleep",
    "social",
]
COMPLEX_QUESTION_MIN_WORDS = 10  # More than this is "complex"
SIMPLE_QUESTION_MAX_WORDS = 5  # Fewer than this is "simple"

# Request limits
MAX_QUESTION_LENGTH = 2000
MAX_FILE_CONTENT_CHARS = 2000

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = "INFO"
