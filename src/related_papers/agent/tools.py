"""Built-in tools over a paper source."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from related_papers.agent.registry import ToolRegistry, ToolSpec
from related_papers.keywords.extractor import KeywordExtractor
from related_papers.retrieval.paper_source import PaperSource
from related_papers.retrieval.ranker import RelatedPaperRanker
from related_papers.retrieval.terms import extract_important_terms
from related_papers.types import SimilarityResult


class RelatedPapersInput(BaseModel):
    pmid: str = Field(min_length=1)
    max_results: int = Field(default=3, ge=1, le=20)


class PaperKeywordsInput(BaseModel):
    pmid: str = Field(min_length=1)
    field: Literal["title", "abstract", "all"] = "all"


class ImportantTermsInput(BaseModel):
    min_frequency: int = Field(default=2, ge=1)
    limit: int = Field(default=20, ge=1, le=200)


def register_builtin_tools(
    registry: ToolRegistry,
    source: PaperSource,
    ranker: RelatedPaperRanker | None = None,
) -> None:
    """Register the default tool set.

    Tools:
    - `related_papers`: ranked related papers for a stored paper.
    - `paper_keywords`: extracted keywords of one stored paper.
    - `important_terms`: biomedical terms shared across the source.
    """

    ranker = ranker or RelatedPaperRanker(trace_store=registry.trace_store)
    extractor: KeywordExtractor = ranker.scorer.extractor

    def _related(input_data: RelatedPapersInput) -> list[SimilarityResult]:
        return ranker.related_to(input_data.pmid, source, input_data.max_results)

    def _keywords(input_data: PaperKeywordsInput) -> list[str]:
        paper = source.get(input_data.pmid)
        if input_data.field == "title":
            keywords = extractor.extract_keywords(paper.title)
        elif input_data.field == "abstract":
            keywords = extractor.extract_keywords(paper.abstract)
        else:
            keywords = list(
                dict.fromkeys(
                    extractor.extract_keywords(paper.title)
                    + extractor.extract_keywords(paper.abstract)
                )
            )
        return keywords

    def _important(input_data: ImportantTermsInput) -> dict[str, int]:
        terms = extract_important_terms(
            source.all(),
            min_frequency=input_data.min_frequency,
            extractor=extractor,
        )
        ranked = sorted(terms.items(), key=lambda item: (-item[1], item[0]))
        return dict(ranked[: input_data.limit])

    registry.register(
        ToolSpec(
            name="related_papers",
            description="Find papers related to a stored paper by keyword similarity.",
            args_schema=RelatedPapersInput,
            handler=_related,
            tags=["retrieval", "similarity"],
        )
    )
    registry.register(
        ToolSpec(
            name="paper_keywords",
            description="List the extracted keywords of a stored paper.",
            args_schema=PaperKeywordsInput,
            handler=_keywords,
            empty_marker="NO_KEYWORDS",
            tags=["keywords"],
        )
    )
    registry.register(
        ToolSpec(
            name="important_terms",
            description="List biomedical terms shared by several stored papers.",
            args_schema=ImportantTermsInput,
            handler=_important,
            empty_marker="NO_TERMS",
            tags=["keywords", "categorization"],
        )
    )
