"""Configuration models for the related-papers engine."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class KeywordConfig(BaseModel):
    """Configures token filtering during keyword extraction."""

    min_token_length: int = Field(default=3, ge=1)


class SimilarityConfig(BaseModel):
    """Configures per-field weighting and matching-term reporting.

    `term_frequency="deduplicated"` scores the de-duplicated keyword lists, so a
    term never counts more than once per field. `"multiset"` keeps repeated
    terms and gives true term-frequency cosine.
    """

    title_weight: float = Field(default=0.4, ge=0.0, le=1.0)
    abstract_weight: float = Field(default=0.6, ge=0.0, le=1.0)
    max_matching_terms: int = Field(default=10, ge=0)
    term_frequency: Literal["deduplicated", "multiset"] = "deduplicated"


class RankingConfig(BaseModel):
    """Configures thresholding and truncation of related-paper rankings."""

    min_score: float = Field(default=0.01, ge=0.0, le=1.0)
    max_results: int = Field(default=5, ge=1)


class ImportantTermsConfig(BaseModel):
    """Configures corpus-level important term selection."""

    min_frequency: int = Field(default=2, ge=1)
