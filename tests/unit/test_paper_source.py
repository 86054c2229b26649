import pytest

from related_papers.retrieval.paper_source import InMemoryPaperSource
from related_papers.types import Document, SimilarityResult


def test_document_rejects_non_string_fields() -> None:
    with pytest.raises(TypeError):
        Document(pmid=123)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Document(pmid="1", abstract=["not", "text"])  # type: ignore[arg-type]


def test_document_from_record_accepts_id_alias() -> None:
    assert Document.from_record({"pmid": "1", "title": "T"}) == Document(pmid="1", title="T")
    assert Document.from_record({"id": "2", "abstract": "A"}).pmid == "2"
    with pytest.raises(KeyError):
        Document.from_record({"title": "orphan"})


def test_similarity_payload_shape() -> None:
    payload = SimilarityResult(
        pmid="9", score=0.5, title_score=0.25, abstract_score=0.6, matching_terms=["tumor"]
    ).as_payload()

    assert payload == {
        "id": "9",
        "score": 0.5,
        "matchingTerms": ["tumor"],
        "titleScore": 0.25,
        "abstractScore": 0.6,
    }


def test_upsert_replaces_by_pmid_and_keeps_order() -> None:
    source = InMemoryPaperSource.from_records(
        [{"pmid": "1", "title": "first"}, {"pmid": "2", "title": "second"}]
    )
    source.upsert([Document(pmid="1", title="replaced")])

    assert len(source) == 2
    assert [paper.pmid for paper in source.all()] == ["1", "2"]
    assert source.get("1").title == "replaced"


def test_unknown_pmid_and_wrong_type_raise() -> None:
    source = InMemoryPaperSource()

    with pytest.raises(KeyError):
        source.get("404")
    with pytest.raises(TypeError):
        source.upsert([{"pmid": "1"}])  # type: ignore[list-item]
