"""Tests for answer envelope decoding."""

import json

from aurora.utils.envelope import (
    decode_envelope,
    decode_string_literal,
    decode_strict,
    extract_answer_field,
    looks_like_envelope,
    strip_code_fence,
    unwrap_envelopes,
)


class TestEnvelopeDecoding:
    """Test suite for the tiered envelope decoder."""

    def test_strip_code_fence(self):
        assert strip_code_fence('```json\n{"answer": "hi"}\n```') == '{"answer": "hi"}'
        assert strip_code_fence("plain text") == "plain text"

    def test_looks_like_envelope(self):
        assert looks_like_envelope('{"answer": "hi"}')
        assert looks_like_envelope('```\n{"answer": "hi"}\n```')
        assert not looks_like_envelope('{"reply": "hi"}')
        assert not looks_like_envelope("The answer is yes")

    def test_strict_tier(self):
        assert decode_strict('{"answer": "Use visual supports."}') == "Use visual supports."
        assert decode_strict('{"answer": 3}') is None
        assert decode_strict('{"answer": "unterminated') is None

    def test_regex_tier_recovers_malformed_json(self):
        text = '{"answer": "Routines help.\\nKeep them visual.", "sources": [}'
        assert decode_strict(text) is None
        assert extract_answer_field(text) == "Routines help.\nKeep them visual."

    def test_raw_tier(self):
        text = '{"answer": broken'
        assert decode_envelope(text) == text

    def test_decode_envelope_prefers_strict(self):
        assert decode_envelope('{"answer": "Strict wins", "answer2": "x"}') == "Strict wins"


class TestUnwrapEnvelopes:
    """Test suite for multi-level unwrapping."""

    def test_string_literal_tier(self):
        assert decode_string_literal('"plain \\"quoted\\" text"') == 'plain "quoted" text'
        assert decode_string_literal('"not closed') is None
        assert decode_string_literal("no quotes") is None

    def test_unwraps_every_level(self):
        text = json.dumps({"answer": json.dumps({"answer": json.dumps({"answer": 'A "b" c'})})})
        assert unwrap_envelopes(text) == 'A "b" c'

    def test_stops_at_plain_text(self):
        assert unwrap_envelopes("Plain answer") == "Plain answer"

    def test_depth_is_bounded(self):
        text = "x"
        for _ in range(5):
            text = json.dumps({"answer": text})
        assert unwrap_envelopes(text, max_depth=2) != "x"
