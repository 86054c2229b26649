"""Shared domain models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

KeywordBag = list[str]
TermFrequencyVector = dict[str, int]


@dataclass(slots=True, frozen=True)
class Document:
    """A paper as seen by the similarity engine."""

    pmid: str
    title: str | None = None
    abstract: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.pmid, str):
            raise TypeError(f"pmid must be a string, got {type(self.pmid).__name__}")
        for name in ("title", "abstract"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"{name} must be a string or None, got {type(value).__name__}")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Document":
        """Build a document from a `{pmid, title, abstract}` record."""

        pmid = record.get("pmid", record.get("id"))
        if pmid is None:
            raise KeyError("record has neither 'pmid' nor 'id'")
        return cls(pmid=pmid, title=record.get("title"), abstract=record.get("abstract"))


@dataclass(slots=True)
class SimilarityResult:
    """Similarity of one candidate paper to a target paper."""

    pmid: str
    score: float
    title_score: float
    abstract_score: float
    matching_terms: list[str] = field(default_factory=list)

    def as_payload(self) -> dict[str, Any]:
        return {
            "id": self.pmid,
            "score": self.score,
            "matchingTerms": list(self.matching_terms),
            "titleScore": self.title_score,
            "abstractScore": self.abstract_score,
        }


@dataclass(slots=True)
class ToolCall:
    """One tool execution and the ranking traces it produced."""

    name: str
    arguments: dict[str, Any]
    result_count: int
    trace_ids: list[str]
    latency_ms: float
