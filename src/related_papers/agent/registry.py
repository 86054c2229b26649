"""Registry exposing similarity operations as validated, LangChain-ready tools.

Handlers return structured results (ranked `SimilarityResult`s, keyword lists,
or term counts). The registry renders them to the line format agents read and
links every call to the ranking traces recorded while it ran.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, ConfigDict, Field

from related_papers.obs.tracing import Timer, TraceStore
from related_papers.types import SimilarityResult, ToolCall

logger = logging.getLogger(__name__)

ToolResult = list[SimilarityResult] | list[str] | dict[str, int]


class ToolSpec(BaseModel):
    """A similarity operation with a pydantic argument schema."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(min_length=1)
    description: str
    args_schema: type[BaseModel]
    handler: Callable[[Any], ToolResult]
    empty_marker: str = "NO_RESULTS"
    tags: list[str] = Field(default_factory=list)


def render_result(result: ToolResult, empty_marker: str) -> str:
    """Render a tool result as text.

    - ranked results: `[pmid] score=... title=... abstract=... terms=a, b`
    - term counts: one `term=count` line each, in the given order
    - keywords: comma separated
    """

    if not result:
        return empty_marker
    if isinstance(result, dict):
        return "\n".join(f"{term}={count}" for term, count in result.items())
    if isinstance(result[0], SimilarityResult):
        return "\n".join(
            f"[{item.pmid}] score={item.score:.4f} "
            f"title={item.title_score:.4f} abstract={item.abstract_score:.4f} "
            f"terms={', '.join(item.matching_terms)}"
            for item in result
        )
    return ", ".join(result)


class ToolRegistry:
    """Runs registered similarity tools and reports a `ToolCall` per run."""

    def __init__(self, trace_store: TraceStore | None = None) -> None:
        self.trace_store = trace_store
        self._tools: dict[str, ToolSpec] = {}
        self._observer: Callable[[ToolCall], None] | None = None

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._tools:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._tools[spec.name] = spec

    def names(self) -> list[str]:
        return list(self._tools)

    def set_observer(self, observer: Callable[[ToolCall], None] | None) -> None:
        self._observer = observer

    def call(self, name: str, payload: dict[str, Any]) -> ToolResult:
        """Run a tool and return its structured result."""
        return self._run(self._spec(name), payload)

    def execute(self, name: str, payload: dict[str, Any]) -> str:
        """Run a tool and return its rendered text."""
        spec = self._spec(name)
        return render_result(self._run(spec, payload), spec.empty_marker)

    def as_langchain_tools(self) -> list[StructuredTool]:
        return [
            StructuredTool.from_function(
                func=self._text_function(spec),
                name=spec.name,
                description=spec.description,
                args_schema=spec.args_schema,
                tags=list(spec.tags),
            )
            for spec in self._tools.values()
        ]

    def _spec(self, name: str) -> ToolSpec:
        spec = self._tools.get(name)
        if spec is None:
            raise KeyError(f"Unknown tool: {name}")
        return spec

    def _text_function(self, spec: ToolSpec) -> Callable[..., str]:
        def _call(**kwargs: Any) -> str:
            return render_result(self._run(spec, kwargs), spec.empty_marker)

        return _call

    def _run(self, spec: ToolSpec, payload: dict[str, Any]) -> ToolResult:
        arguments = spec.args_schema.model_validate(payload)
        position = len(self.trace_store) if self.trace_store is not None else 0

        with Timer() as timer:
            result = spec.handler(arguments)

        trace_ids = (
            [trace.trace_id for trace in self.trace_store.list_since(position)]
            if self.trace_store is not None
            else []
        )
        logger.debug(
            "Tool %s returned %d items in %.2f ms (%d ranking traces)",
            spec.name,
            len(result),
            timer.elapsed_ms,
            len(trace_ids),
        )
        if self._observer is not None:
            self._observer(
                ToolCall(
                    name=spec.name,
                    arguments=arguments.model_dump(),
                    result_count=len(result),
                    trace_ids=trace_ids,
                    latency_ms=timer.elapsed_ms,
                )
            )
        return result
