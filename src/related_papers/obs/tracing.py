"""Ranking traces and latency accounting."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(slots=True)
class RankingTrace:
    trace_id: str
    timestamp_utc: str
    target_pmid: str
    candidate_count: int
    compared_count: int
    returned_pmids: list[str]
    top_score: float
    latency_ms: float


class TraceStore:
    """In-memory storage for related-paper ranking traces."""

    def __init__(self) -> None:
        self._records: dict[str, RankingTrace] = {}

    def create_record(
        self,
        *,
        target_pmid: str,
        candidate_count: int,
        compared_count: int,
        returned_pmids: list[str],
        top_score: float,
        latency_ms: float,
    ) -> RankingTrace:
        trace_id = str(uuid.uuid4())
        record = RankingTrace(
            trace_id=trace_id,
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
            target_pmid=target_pmid,
            candidate_count=candidate_count,
            compared_count=compared_count,
            returned_pmids=returned_pmids,
            top_score=top_score,
            latency_ms=latency_ms,
        )
        self._records[trace_id] = record
        return record

    def get(self, trace_id: str) -> RankingTrace:
        record = self._records.get(trace_id)
        if record is None:
            raise KeyError(f"Trace not found: {trace_id}")
        return record

    def list_recent(self, limit: int = 20) -> list[RankingTrace]:
        return list(self._records.values())[-limit:]

    def list_since(self, position: int) -> list[RankingTrace]:
        """Records created after the store held `position` records."""
        return list(self._records.values())[position:]

    def __len__(self) -> int:
        return len(self._records)

    def summary(self) -> dict[str, float | int]:
        """Aggregate ranking metrics across all recorded calls."""
        records = list(self._records.values())
        total = len(records)
        if total == 0:
            return {
                "total_requests": 0,
                "avg_latency_ms": 0.0,
                "p95_latency_ms": 0.0,
                "avg_results": 0.0,
                "avg_top_score": 0.0,
            }

        latencies = sorted(record.latency_ms for record in records)
        p95_index = max(0, int((len(latencies) * 0.95) - 1))
        return {
            "total_requests": total,
            "avg_latency_ms": sum(latencies) / total,
            "p95_latency_ms": latencies[p95_index],
            "avg_results": sum(len(record.returned_pmids) for record in records) / total,
            "avg_top_score": sum(record.top_score for record in records) / total,
        }


class Timer:
    """Simple context timer used by the ranker."""

    def __init__(self) -> None:
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
