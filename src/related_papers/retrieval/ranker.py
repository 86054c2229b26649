"""Ranking of related papers for a selected target paper."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from related_papers.config import RankingConfig
from related_papers.obs.tracing import Timer, TraceStore
from related_papers.retrieval.paper_source import PaperSource
from related_papers.retrieval.scorer import SimilarityScorer
from related_papers.types import Document, SimilarityResult

logger = logging.getLogger(__name__)


class RelatedPaperRanker:
    """Scores candidates against a target and keeps the best matches.

    Ranking process:
    1. Exclude every candidate sharing the target's pmid.
    2. Score the rest with `SimilarityScorer`.
    3. Keep results with score strictly above `min_score`.
    4. Sort by score descending. The sort is stable, so equal scores keep the
       candidates' input order.
    5. Truncate to `max_results`.
    """

    def __init__(
        self,
        config: RankingConfig | None = None,
        scorer: SimilarityScorer | None = None,
        trace_store: TraceStore | None = None,
    ) -> None:
        self.config = config or RankingConfig()
        self.scorer = scorer or SimilarityScorer()
        self.trace_store = trace_store

    def find_similar_papers(
        self,
        target: Document,
        candidates: Sequence[Document],
        max_results: int | None = None,
    ) -> list[SimilarityResult]:
        limit = self.config.max_results if max_results is None else max(max_results, 0)
        logger.debug(
            "Ranking %d candidates for %s (has abstract: %s)",
            len(candidates),
            target.pmid,
            bool(target.abstract),
        )
        if not candidates:
            logger.debug("No candidate papers to compare against")
            return []

        with Timer() as timer:
            others = [paper for paper in candidates if paper.pmid != target.pmid]
            passed: list[SimilarityResult] = []
            for paper in others:
                result = self.scorer.calculate_similarity(target, paper)
                if result.score > self.config.min_score:
                    passed.append(result)
                else:
                    logger.debug(
                        "Paper %s score %.3f below threshold %.2f",
                        result.pmid,
                        result.score,
                        self.config.min_score,
                    )
            ranked = sorted(passed, key=lambda item: item.score, reverse=True)[:limit]

        logger.debug(
            "Found %d related papers for %s out of %d compared",
            len(ranked),
            target.pmid,
            len(others),
        )
        if self.trace_store is not None:
            self.trace_store.create_record(
                target_pmid=target.pmid,
                candidate_count=len(candidates),
                compared_count=len(others),
                returned_pmids=[item.pmid for item in ranked],
                top_score=ranked[0].score if ranked else 0.0,
                latency_ms=timer.elapsed_ms,
            )
        return ranked

    def related_to(
        self,
        pmid: str,
        source: PaperSource,
        max_results: int | None = None,
    ) -> list[SimilarityResult]:
        """Rank every paper in `source` against the paper stored under `pmid`."""

        return self.find_similar_papers(source.get(pmid), source.all(), max_results)


_default_ranker = RelatedPaperRanker()


def find_similar_papers(
    target: Document,
    candidates: Sequence[Document],
    max_results: int = 5,
) -> list[SimilarityResult]:
    return _default_ranker.find_similar_papers(target, candidates, max_results)
