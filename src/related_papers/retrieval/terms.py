"""Corpus-level term statistics used to categorize papers."""

from __future__ import annotations

from collections.abc import Iterable

from related_papers.config import ImportantTermsConfig
from related_papers.keywords.extractor import KeywordExtractor, is_biomedical_term
from related_papers.types import Document, TermFrequencyVector


def extract_important_terms(
    papers: Iterable[Document],
    *,
    min_frequency: int = 2,
    extractor: KeywordExtractor | None = None,
) -> TermFrequencyVector:
    """Count biomedical keywords shared across papers.

    Each paper contributes its title keywords and its abstract keywords, so a
    term present in both fields of one paper counts twice. Terms seen fewer
    than `min_frequency` times, or that are not biomedical, are dropped.
    """

    threshold = ImportantTermsConfig(min_frequency=min_frequency).min_frequency
    extractor = extractor or KeywordExtractor()

    counts: TermFrequencyVector = {}
    for paper in papers:
        keywords = extractor.extract_keywords(paper.title) + extractor.extract_keywords(
            paper.abstract
        )
        for keyword in keywords:
            counts[keyword] = counts.get(keyword, 0) + 1

    return {
        term: frequency
        for term, frequency in counts.items()
        if frequency >= threshold and is_biomedical_term(term)
    }
