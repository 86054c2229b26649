import math

import pytest
from pydantic import ValidationError

from related_papers.config import SimilarityConfig
from related_papers.keywords.extractor import extract_keywords
from related_papers.retrieval.scorer import (
    SimilarityScorer,
    calculate_similarity,
    cosine_similarity,
    term_frequencies,
)
from related_papers.types import Document


def test_term_frequencies_counts_occurrences() -> None:
    assert term_frequencies(["a", "b", "a"]) == {"a": 2, "b": 1}


def test_self_similarity_is_maximal() -> None:
    terms = extract_keywords("Hepatic stellate cell activation drives liver fibrosis")

    assert cosine_similarity(terms, list(terms)) == pytest.approx(1.0)
    assert cosine_similarity(["x", "x", "y"], ["x", "x", "y"]) == pytest.approx(1.0)


def test_empty_side_gives_exact_zero() -> None:
    assert cosine_similarity([], ["tumor"]) == 0.0
    assert cosine_similarity(["tumor"], []) == 0.0
    result = cosine_similarity([], [])
    assert result == 0.0
    assert not math.isnan(result)


def test_disjoint_terms_give_zero() -> None:
    assert cosine_similarity(["alpha", "beta"], ["gamma"]) == 0.0


def test_partial_overlap_uses_term_frequency_cosine() -> None:
    # a=(2,1,0), b=(1,0,1): dot=2, |a|=sqrt(5), |b|=sqrt(2)
    score = cosine_similarity(["x", "x", "y"], ["x", "z"])

    assert score == pytest.approx(2 / (math.sqrt(5) * math.sqrt(2)))


def test_overall_score_is_weighted_title_and_abstract() -> None:
    target = Document(
        pmid="1",
        title="Tumor microenvironment immunotherapy",
        abstract="Checkpoint inhibitor response depends on tumor infiltrating lymphocytes.",
    )
    candidate = Document(
        pmid="2",
        title="Tumor immunotherapy resistance",
        abstract="Lymphocytes infiltrating tumors predict checkpoint inhibitor outcomes.",
    )

    result = calculate_similarity(target, candidate)

    assert result.pmid == "2"
    assert result.title_score > 0
    assert result.abstract_score > 0
    assert result.score == pytest.approx(0.4 * result.title_score + 0.6 * result.abstract_score)


def test_missing_fields_contribute_nothing() -> None:
    target = Document(pmid="1", title="Kidney transplant rejection")
    candidate = Document(pmid="2", title="Kidney transplant rejection", abstract="Anything here.")

    result = calculate_similarity(target, candidate)

    assert result.title_score == pytest.approx(1.0)
    assert result.abstract_score == 0.0
    assert result.score == pytest.approx(0.4)


def test_matching_terms_follow_target_order_and_are_capped() -> None:
    text = "alpha beta gamma delta epsilon zeta theta iota kappa lambda omicron sigma"
    target = Document(pmid="1", title=text)
    candidate = Document(pmid="2", abstract=text)

    result = calculate_similarity(target, candidate)

    assert len(result.matching_terms) == 10
    assert result.matching_terms[:3] == ["alpha", "beta", "gamma"]
    # Overlap exists only across fields, so both component scores stay zero.
    assert result.score == 0.0


def test_matching_term_cap_is_configurable() -> None:
    scorer = SimilarityScorer(SimilarityConfig(max_matching_terms=2))
    doc = Document(pmid="1", title="Liver enzyme elevation")

    result = scorer.calculate_similarity(doc, Document(pmid="2", title="Liver enzyme elevation"))

    assert result.matching_terms == ["liver", "enzyme"]


def test_deduplicated_mode_ignores_repeats_and_multiset_mode_keeps_them() -> None:
    target = Document(pmid="1", title="tumor tumor tumor growth")
    candidate = Document(pmid="2", title="tumor growth")

    deduplicated = SimilarityScorer().calculate_similarity(target, candidate)
    multiset = SimilarityScorer(SimilarityConfig(term_frequency="multiset")).calculate_similarity(
        target, candidate
    )

    assert deduplicated.title_score != pytest.approx(multiset.title_score)


def test_invalid_weights_are_rejected() -> None:
    with pytest.raises(ValidationError):
        SimilarityConfig(title_weight=1.5)
    with pytest.raises(ValidationError):
        SimilarityConfig(term_frequency="tfidf")  # type: ignore[arg-type]
