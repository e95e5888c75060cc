"""Tests for reference attribution."""

import pytest

from aurora.data.references import ReferenceCatalog
from aurora.langgraph.nodes.reference_selector import ReferenceSelector, select_references
from aurora.models.reference import Credibility, Reference, ReferenceType


def make_reference(ref_id, credibility, keywords, description="test source"):
    return Reference(
        id=ref_id,
        title=f"Title {ref_id}",
        organization=f"Org {ref_id}",
        url=f"https://example.org/{ref_id}",
        type=ReferenceType.NONPROFIT,
        credibility=credibility,
        description=description,
        keywords=tuple(keywords),
    )


@pytest.fixture
def selector(reference_catalog):
    return ReferenceSelector(reference_catalog)


class TestReferenceSelector:
    """Test suite for ReferenceSelector."""

    def test_extract_keywords(self, selector):
        assert selector.extract_keywords("Sensory THERAPY at School") == [
            "sensory",
            "school",
            "therapy",
        ]

    def test_size_bound_and_positive_scores(self, selector):
        question = "what are some sensory strategies for autism?"
        answer = "Occupational therapy and sensory breaks support regulation at school."

        ranked = selector.rank(question, answer)
        selected = selector.select(question, answer, max_results=4)

        assert 0 < len(selected) <= 4
        assert all(score > 0 for _, score in ranked)
        assert selected == [reference.summary() for reference, _ in ranked[:4]]

    def test_ordering_by_score_then_weight(self, selector):
        ranked = selector.rank(
            "early diagnosis and family support", "research on intervention and therapy"
        )
        keys = [(score, reference.credibility_weight) for reference, score in ranked]
        assert keys == sorted(keys, reverse=True)

    def test_credibility_raises_rank(self):
        catalog = ReferenceCatalog(
            {
                "basic": make_reference("basic", Credibility.BASIC, ["sensory"]),
                "highest": make_reference("highest", Credibility.HIGHEST, ["sensory"]),
            }
        )
        ranked = ReferenceSelector(catalog).rank("sensory", "")
        assert [reference.id for reference, _ in ranked] == ["highest", "basic"]

    def test_exact_ties_keep_catalog_order(self):
        catalog = ReferenceCatalog(
            {
                "first": make_reference("first", Credibility.HIGH, ["sensory"]),
                "second": make_reference("second", Credibility.HIGH, ["sensory"]),
            }
        )
        ranked = ReferenceSelector(catalog).rank("sensory", "")
        assert [reference.id for reference, _ in ranked] == ["first", "second"]

    def test_score_multiplies_hits_by_weight(self):
        reference = make_reference("r", Credibility.HIGH, ["sensory", "school"])
        assert ReferenceSelector.score(reference, ["sensory", "school", "legal"]) == 5.0

    def test_no_keywords_no_references(self, selector):
        assert selector.select("pizza toppings", "cheese") == []

    @pytest.mark.parametrize("max_results", [0, -1])
    def test_non_positive_limit(self, selector, max_results):
        assert selector.select("sensory therapy", "", max_results=max_results) == []


class TestSelectReferencesNode:
    """Test suite for the select_references node."""

    def test_attaches_references(self, selector):
        state = {"question": "sensory therapy", "answer": "", "max_references": 2}
        update = select_references(state, selector)
        assert len(update["references"]) == 2

    def test_falls_back_to_defaults_on_failure(self, reference_catalog):
        class BrokenSelector(ReferenceSelector):
            def select(self, question, answer_text, max_results=4):
                raise RuntimeError("index corrupted")

        update = select_references({"question": "sensory"}, BrokenSelector(reference_catalog))
        assert update["references"] == reference_catalog.get_default_references()

    def test_skips_when_error_set(self, selector):
        assert select_references({"error": "generate: boom"}, selector) == {}
