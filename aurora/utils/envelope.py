"""Decoding of answers that arrive wrapped in a JSON envelope.

The text-generation service sometimes returns its reply as
``{"answer": "..."}``, occasionally nested several levels deep or serialized
once more as a JSON string literal, instead of plain text. Each level is
decoded in tiers, each a pure function returning ``None`` when it does not
apply:

1. ``decode_strict``: parse the whole text as JSON and read ``answer``
2. ``extract_answer_field``: regex out the ``answer`` string value
3. the raw text itself

``unwrap_envelopes`` repeats this until no envelope is left.
"""

import json
import re

CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)
ANSWER_FIELD_PATTERN = re.compile(r'"answer"\s*:\s*"((?:[^"\\]|\\.)*)"', re.DOTALL)
MAX_ENVELOPE_DEPTH = 8


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    stripped = text.strip()
    match = CODE_FENCE_PATTERN.match(stripped)
    return match.group(1) if match else stripped


def looks_like_envelope(text: str) -> bool:
    """Check if text appears to be a JSON object exposing an answer field."""
    candidate = strip_code_fence(text)
    return candidate.startswith("{") and '"answer"' in candidate


def decode_strict(text: str) -> str | None:
    """Parse text as a JSON object and return its string ``answer``."""
    try:
        payload = json.loads(strip_code_fence(text), strict=False)
    except (json.JSONDecodeError, TypeError):
        return None
    if isinstance(payload, dict) and isinstance(payload.get("answer"), str):
        return payload["answer"]
    return None


def extract_answer_field(text: str) -> str | None:
    """Best-effort regex extraction of the ``answer`` value."""
    match = ANSWER_FIELD_PATTERN.search(text)
    if not match:
        return None
    raw = match.group(1)
    try:
        return json.loads(f'"{raw}"', strict=False)
    except json.JSONDecodeError:
        return raw


def decode_string_literal(text: str) -> str | None:
    """Decode text that is a whole JSON string literal, e.g. ``"{\\"answer\\": ...}"``."""
    candidate = text.strip()
    if len(candidate) < 2 or candidate[0] != '"' or candidate[-1] != '"':
        return None
    try:
        value = json.loads(candidate, strict=False)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, str) else None


def decode_envelope(text: str) -> str:
    """Unwrap one answer envelope, falling back to the raw text."""
    for decoder in (decode_strict, extract_answer_field):
        value = decoder(text)
        if value is not None:
            return value
    return text


def unwrap_envelopes(text: str, max_depth: int = MAX_ENVELOPE_DEPTH) -> str:
    """Peel string literals and envelopes until plain answer text remains."""
    for _ in range(max_depth):
        literal = decode_string_literal(text)
        if literal is not None:
            text = literal
            continue
        if not looks_like_envelope(text):
            break
        decoded = decode_envelope(text)
        if decoded == text:
            break
        text = decoded
    return text
