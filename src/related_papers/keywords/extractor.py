"""Keyword extraction: normalization, filtering, abbreviation expansion, n-grams."""

from __future__ import annotations

import logging
import re

from related_papers.config import KeywordConfig
from related_papers.keywords.vocabulary import (
    ABBREVIATIONS,
    BIOMEDICAL_MARKERS,
    STOP_WORDS,
)
from related_papers.types import KeywordBag

logger = logging.getLogger(__name__)

_PUNCTUATION = re.compile(r"[^\w\s-]", flags=re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"\d+", flags=re.ASCII)


class KeywordExtractor:
    """Turns free text into unigram, bigram and biomedical trigram terms.

    Pipeline:
    1. Lower-case, blank out everything except word characters, whitespace and
       hyphens, collapse whitespace.
    2. Drop short tokens, stop words and pure numbers.
    3. Expand known abbreviations in place. An expansion is a single term
       ("dna" -> "deoxyribonucleic acid") and is not filtered again.
    4. Emit unigrams, every adjacent bigram, and adjacent trigrams that pass
       `is_biomedical_term`.
    """

    def __init__(self, config: KeywordConfig | None = None) -> None:
        self.config = config or KeywordConfig()

    def extract_terms(self, text: str | None) -> KeywordBag:
        """Return all extracted terms, keeping repeats."""

        tokens = self.tokens(text)
        terms: KeywordBag = list(tokens)
        terms.extend(f"{a} {b}" for a, b in zip(tokens, tokens[1:]))
        for a, b, c in zip(tokens, tokens[1:], tokens[2:]):
            trigram = f"{a} {b} {c}"
            if is_biomedical_term(trigram):
                terms.append(trigram)
        return terms

    def extract_keywords(self, text: str | None) -> KeywordBag:
        """Return extracted terms de-duplicated in first-seen order."""

        keywords = list(dict.fromkeys(self.extract_terms(text)))
        if keywords:
            logger.debug("Extracted %d keywords: %s", len(keywords), keywords[:10])
        return keywords

    def tokens(self, text: str | None) -> list[str]:
        """Return filtered and abbreviation-expanded tokens in text order."""

        if text is None:
            return []
        if not isinstance(text, str):
            raise TypeError(f"text must be a string or None, got {type(text).__name__}")
        if not text:
            return []

        return [
            ABBREVIATIONS.get(token, token)
            for token in self._normalize(text).split()
            if self._keep(token)
        ]

    def _keep(self, token: str) -> bool:
        return (
            len(token) >= self.config.min_token_length
            and token not in STOP_WORDS
            and _DIGITS.fullmatch(token) is None
        )

    @staticmethod
    def _normalize(text: str) -> str:
        cleaned = _PUNCTUATION.sub(" ", text.lower())
        return _WHITESPACE.sub(" ", cleaned).strip()


def is_biomedical_term(term: str) -> bool:
    """Whether `term` contains one of the biomedical marker substrings."""

    lowered = term.lower()
    return any(marker in lowered for marker in BIOMEDICAL_MARKERS)


_default_extractor = KeywordExtractor()


def extract_terms(text: str | None) -> KeywordBag:
    return _default_extractor.extract_terms(text)


def extract_keywords(text: str | None) -> KeywordBag:
    return _default_extractor.extract_keywords(text)
