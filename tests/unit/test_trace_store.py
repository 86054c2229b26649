import pytest

from related_papers.obs.tracing import Timer, TraceStore


def _record(store: TraceStore, latency_ms: float, returned: list[str], top: float) -> str:
    record = store.create_record(
        target_pmid="T",
        candidate_count=5,
        compared_count=4,
        returned_pmids=returned,
        top_score=top,
        latency_ms=latency_ms,
    )
    return record.trace_id


def test_empty_summary() -> None:
    summary = TraceStore().summary()

    assert summary["total_requests"] == 0
    assert summary["avg_latency_ms"] == 0.0


def test_summary_aggregates_records() -> None:
    store = TraceStore()
    _record(store, 10.0, ["A", "B"], 0.5)
    trace_id = _record(store, 30.0, [], 0.0)

    summary = store.summary()

    assert summary["total_requests"] == 2
    assert summary["avg_latency_ms"] == pytest.approx(20.0)
    assert summary["avg_results"] == pytest.approx(1.0)
    assert summary["avg_top_score"] == pytest.approx(0.25)
    assert store.get(trace_id).returned_pmids == []
    assert len(store.list_recent(limit=1)) == 1


def test_unknown_trace_raises() -> None:
    with pytest.raises(KeyError):
        TraceStore().get("nope")


def test_timer_measures_elapsed_time() -> None:
    with Timer() as timer:
        sum(range(1000))

    assert timer.elapsed_ms >= 0.0


def test_list_since_returns_records_after_position() -> None:
    store = TraceStore()
    _record(store, 1.0, [], 0.0)
    position = len(store)
    newer = _record(store, 2.0, ["A"], 0.3)

    assert [record.trace_id for record in store.list_since(position)] == [newer]
    assert store.list_since(len(store)) == []
