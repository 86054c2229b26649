"""Paper source interface and in-memory adapter."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from related_papers.types import Document


class PaperSource(Protocol):
    """Minimal contract for whatever supplies candidate papers."""

    def upsert(self, papers: Iterable[Document]) -> None:
        """Insert or replace papers by pmid."""

    def get(self, pmid: str) -> Document:
        """Return one paper, raising KeyError when unknown."""

    def all(self) -> list[Document]:
        """Return every paper in insertion order."""


class InMemoryPaperSource:
    """Deterministic paper source used for tests and local prototyping."""

    def __init__(self, papers: Iterable[Document] | None = None) -> None:
        self._papers: dict[str, Document] = {}
        if papers is not None:
            self.upsert(papers)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "InMemoryPaperSource":
        return cls(Document.from_record(record) for record in records)

    def upsert(self, papers: Iterable[Document]) -> None:
        for paper in papers:
            if not isinstance(paper, Document):
                raise TypeError(f"expected Document, got {type(paper).__name__}")
            self._papers[paper.pmid] = paper

    def get(self, pmid: str) -> Document:
        paper = self._papers.get(pmid)
        if paper is None:
            raise KeyError(f"Paper not found: {pmid}")
        return paper

    def all(self) -> list[Document]:
        return list(self._papers.values())

    def __len__(self) -> int:
        return len(self._papers)
