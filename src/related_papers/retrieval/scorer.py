"""Cosine similarity between papers over title and abstract keywords."""

from __future__ import annotations

import logging
from math import sqrt

from related_papers.config import SimilarityConfig
from related_papers.keywords.extractor import KeywordExtractor
from related_papers.types import Document, KeywordBag, SimilarityResult, TermFrequencyVector

logger = logging.getLogger(__name__)


def term_frequencies(terms: list[str]) -> TermFrequencyVector:
    counts: TermFrequencyVector = {}
    for term in terms:
        counts[term] = counts.get(term, 0) + 1
    return counts


def cosine_similarity(terms1: list[str], terms2: list[str]) -> float:
    """Cosine of the term-frequency vectors of two term lists.

    Returns 0.0 when either list is empty instead of dividing by zero.
    """

    tf1 = term_frequencies(terms1)
    tf2 = term_frequencies(terms2)

    dot_product = 0
    magnitude1 = 0
    magnitude2 = 0
    for term in tf1.keys() | tf2.keys():
        freq1 = tf1.get(term, 0)
        freq2 = tf2.get(term, 0)
        dot_product += freq1 * freq2
        magnitude1 += freq1 * freq1
        magnitude2 += freq2 * freq2

    denominator = sqrt(magnitude1) * sqrt(magnitude2)
    if denominator == 0:
        return 0.0
    return dot_product / denominator


class SimilarityScorer:
    """Scores a candidate paper against a target paper.

    Titles and abstracts are compared separately and combined as
    `title_weight * title_score + abstract_weight * abstract_score`.

    With the default `term_frequency="deduplicated"` the vectors are built from
    de-duplicated keywords, so every count is 0 or 1 and the cosine behaves
    close to a set-overlap measure. `"multiset"` keeps repeated terms.
    """

    def __init__(
        self,
        config: SimilarityConfig | None = None,
        extractor: KeywordExtractor | None = None,
    ) -> None:
        self.config = config or SimilarityConfig()
        self.extractor = extractor or KeywordExtractor()

    def calculate_similarity(self, target: Document, candidate: Document) -> SimilarityResult:
        title_keywords1 = self.extractor.extract_keywords(target.title)
        title_keywords2 = self.extractor.extract_keywords(candidate.title)
        abstract_keywords1 = self.extractor.extract_keywords(target.abstract)
        abstract_keywords2 = self.extractor.extract_keywords(candidate.abstract)

        logger.debug(
            "Keywords %s: title=%d abstract=%d; %s: title=%d abstract=%d",
            target.pmid,
            len(title_keywords1),
            len(abstract_keywords1),
            candidate.pmid,
            len(title_keywords2),
            len(abstract_keywords2),
        )

        if self.config.term_frequency == "multiset":
            title_score = cosine_similarity(
                self.extractor.extract_terms(target.title),
                self.extractor.extract_terms(candidate.title),
            )
            abstract_score = cosine_similarity(
                self.extractor.extract_terms(target.abstract),
                self.extractor.extract_terms(candidate.abstract),
            )
        else:
            title_score = cosine_similarity(title_keywords1, title_keywords2)
            abstract_score = cosine_similarity(abstract_keywords1, abstract_keywords2)

        score = (title_score * self.config.title_weight) + (
            abstract_score * self.config.abstract_weight
        )
        matching = _matching_terms(
            title_keywords1 + abstract_keywords1,
            title_keywords2 + abstract_keywords2,
        )

        logger.debug(
            "Similarity %s -> %s: title=%.3f abstract=%.3f overall=%.3f matching=%d",
            target.pmid,
            candidate.pmid,
            title_score,
            abstract_score,
            score,
            len(matching),
        )

        return SimilarityResult(
            pmid=candidate.pmid,
            score=score,
            title_score=title_score,
            abstract_score=abstract_score,
            matching_terms=matching[: self.config.max_matching_terms],
        )


def _matching_terms(keywords1: KeywordBag, keywords2: KeywordBag) -> list[str]:
    other = set(keywords2)
    return [term for term in dict.fromkeys(keywords1) if term in other]


_default_scorer = SimilarityScorer()


def calculate_similarity(target: Document, candidate: Document) -> SimilarityResult:
    return _default_scorer.calculate_similarity(target, candidate)
