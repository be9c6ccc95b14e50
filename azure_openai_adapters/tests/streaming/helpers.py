"""Helpers for paced stream tests.

``ScriptedUpstream`` mimics an SDK stream: it yields raw events built with
``raw_event`` according to a script, sleeping where the script holds a float
and raising where it holds an exception. Arrival times are recorded so tests
can check that nothing is released before it was received.
"""
from __future__ import annotations

import asyncio
import time
from types import SimpleNamespace
from typing import Any, List, Optional, Sequence

from azure_openai_adapters.base.streaming import PacingConfig

# Small delays keep timing-insensitive tests fast.
FAST_PACING = PacingConfig(
    base_delay_ms=1.0,
    poll_interval_ms=5.0,
    low_watermark_step_ms=0.5,
)


def raw_event(
    content: Optional[str],
    *,
    role: Optional[str] = None,
    event_id: str = "evt-1",
    created: int = 1700000000,
    index: int = 0,
    finish_reason: Optional[str] = None,
) -> SimpleNamespace:
    """Build an SDK-like streaming chunk with a single choice."""
    return SimpleNamespace(
        id=event_id,
        created=created,
        object="chat.completion.chunk",
        model="deployment-name",
        choices=[
            SimpleNamespace(
                index=index,
                delta=SimpleNamespace(role=role, content=content),
                finish_reason=finish_reason,
            )
        ],
        usage=None,
    )


def text_events(*contents: str) -> List[SimpleNamespace]:
    return [raw_event(c, event_id=f"evt-{i}") for i, c in enumerate(contents)]


class ScriptedUpstream:
    """Async-iterable fake of an SDK stream."""

    def __init__(self, script: Sequence[Any]) -> None:
        self.script = list(script)
        self.arrivals: List[float] = []
        self.closed = False
        self.interrupted = False

    def __aiter__(self):
        return self._events()

    async def _events(self):
        completed = False
        try:
            for step in self.script:
                if isinstance(step, (int, float)):
                    await asyncio.sleep(step)
                    continue
                if isinstance(step, BaseException):
                    raise step
                self.arrivals.append(time.perf_counter())
                yield step
            completed = True
        finally:
            if not completed:
                self.interrupted = True

    async def close(self) -> None:
        self.closed = True


async def collect_with_times(stream) -> List[tuple]:
    """Drain ``stream`` returning ``(chunk, release_time)`` pairs."""
    out = []
    async for chunk in stream:
        out.append((chunk, time.perf_counter()))
    return out
