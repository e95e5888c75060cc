"""Text normalization for questions and canonicalization for answers."""

import re
from functools import lru_cache
from typing import Any

from ..config import SHORT_TERM_MAX_LENGTH
from .envelope import unwrap_envelopes

WHITESPACE_PATTERN = re.compile(r"\s+")
REPEATED_PUNCTUATION_PATTERN = re.compile(r"([.!?]){2,}")
CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def normalize_user_input(raw: Any) -> str:
    """Normalize a question into its canonical form.

    Trims, collapses whitespace, collapses repeated sentence punctuation and
    lower-cases. Non-string input yields an empty string. This is the single
    normalizer: classification, feedback keys and pattern tags all rely on it.

    Args:
        raw: Question as received from the caller

    Returns:
        Normalized question text

    """
    if not raw or not isinstance(raw, str):
        return ""

    text = raw.strip()
    text = WHITESPACE_PATTERN.sub(" ", text)
    text = REPEATED_PUNCTUATION_PATTERN.sub(r"\1", text)
    return text.lower()


def _strip_control_chars(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return CONTROL_CHARS_PATTERN.sub("", text)


def canonicalize_answer(text: Any) -> str:
    """Clean raw answer text from any generation path.

    Strips control characters, unwraps JSON answer envelopes at any nesting
    depth and then turns escaped newlines, tabs and quotes into literal
    characters. Unescaping runs once, after all envelopes are gone, so the
    JSON of an inner envelope is never altered before it is parsed.
    """
    if not isinstance(text, str):
        return ""

    cleaned = unwrap_envelopes(_strip_control_chars(text))
    cleaned = _strip_control_chars(cleaned)
    cleaned = cleaned.replace("\\n", "\n").replace("\\t", "\t").replace('\\"', '"')
    return cleaned.strip()


def word_count(text: str) -> int:
    return len(text.split()) if text else 0


def preview(text: str, limit: int) -> str:
    """Truncate text for log lines."""
    return text if len(text) <= limit else f"{text[:limit]}..."


@lru_cache(maxsize=512)
def _whole_word_pattern(term: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(term)}s?\b")


def contains_term(text: str, term: str) -> bool:
    """Check whether a lower-case term occurs in lower-case text.

    Short terms such as "asd" or "aac" must appear as whole words (a
    trailing plural "s" is allowed) so they do not match inside "fasd" or
    "isaac". Longer terms match as plain substrings.
    """
    if len(term) > SHORT_TERM_MAX_LENGTH:
        return term in text
    return _whole_word_pattern(term).search(text) is not None
