"""Behavioural tests for the paced stream controller.

Covers count/order preservation, causal ordering, the burst and stall
scenarios, delay application while upstream is live, flush on exhaustion,
upstream failure propagation and cancellation.
"""
from __future__ import annotations

import asyncio
import time

import pytest

from azure_openai_adapters.base.cancellation import CancellationToken, CancelledError
from azure_openai_adapters.base.errors import ErrorCode, ProviderError
from azure_openai_adapters.base.streaming import PacedStream, PacingConfig
from azure_openai_adapters.tests.streaming.helpers import (
    FAST_PACING,
    ScriptedUpstream,
    collect_with_times,
    raw_event,
    text_events,
)


def _paced(upstream, **kwargs) -> PacedStream:
    kwargs.setdefault("config", FAST_PACING)
    return PacedStream(upstream, model="paced-model", **kwargs)


@pytest.mark.asyncio
async def test_burst_of_five_is_released_in_order_and_normalized():
    upstream = ScriptedUpstream(text_events("a", "b", "c", "d", "e"))
    stream = _paced(upstream)

    released = [chunk async for chunk in stream]

    assert [c.content for c in released] == ["a", "b", "c", "d", "e"]  # nosec B101 - pytest assert in tests
    for chunk in released:
        assert chunk.object == "chat.completion.chunk"  # nosec B101 - pytest assert in tests
        assert chunk.model == "paced-model"  # nosec B101 - pytest assert in tests
        assert chunk.choices[0].finish_reason is None  # nosec B101 - pytest assert in tests
        assert chunk.choices[0].delta.role == "assistant"  # nosec B101 - pytest assert in tests
    assert stream.metrics.received == 5 and stream.metrics.emitted == 5  # nosec B101 - pytest assert in tests
    assert stream.state.tokens_output == 5 and stream.finished  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_count_and_order_preserved_with_irregular_arrivals():
    script = []
    for i in range(25):
        script.append(raw_event(f"t{i}", event_id=str(i)))
        if i % 7 == 3:
            script.append(0.02)
    stream = _paced(ScriptedUpstream(script))

    released = [chunk async for chunk in stream]

    assert [c.id for c in released] == [str(i) for i in range(25)]  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_no_chunk_released_before_it_arrived():
    script = [raw_event("a"), 0.03, raw_event("b"), 0.03, raw_event("c")]
    upstream = ScriptedUpstream(script)

    pairs = await collect_with_times(_paced(upstream))

    assert len(pairs) == 3  # nosec B101 - pytest assert in tests
    for (_, released_at), arrived_at in zip(pairs, upstream.arrivals):
        assert released_at >= arrived_at  # nosec B101 - causal ordering


@pytest.mark.asyncio
async def test_stall_performs_liveness_waits_without_emitting():
    upstream = ScriptedUpstream([raw_event("first"), 0.06, raw_event("second")])
    stream = _paced(upstream)

    pairs = await collect_with_times(stream)

    assert [c.content for c, _ in pairs] == ["first", "second"]  # nosec B101 - pytest assert in tests
    assert stream.metrics.liveness_waits >= 1  # nosec B101 - pytest assert in tests
    assert pairs[1][1] >= upstream.arrivals[1]  # nosec B101 - nothing emitted during the stall


@pytest.mark.asyncio
async def test_delay_applies_while_upstream_is_live():
    # B=2 after the first release -> 30 + 20 * (12 - 2) = 230ms with defaults
    upstream = ScriptedUpstream(text_events("a", "b", "c") + [0.5])
    stream = PacedStream(upstream, model="m", config=PacingConfig())

    pairs = await collect_with_times(stream)

    assert [c.content for c, _ in pairs] == ["a", "b", "c"]  # nosec B101 - pytest assert in tests
    assert pairs[1][1] - pairs[0][1] >= 0.18  # nosec B101 - pytest assert in tests
    assert stream.state.last_delay_ms is not None  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_exhausted_backlog_is_flushed_without_delay():
    upstream = ScriptedUpstream(text_events(*[f"x{i}" for i in range(20)]))
    stream = PacedStream(upstream, model="m", config=PacingConfig())

    start = time.perf_counter()
    released = [chunk async for chunk in stream]

    assert len(released) == 20  # nosec B101 - pytest assert in tests
    assert time.perf_counter() - start < 0.2  # nosec B101 - 20 default delays would take seconds


@pytest.mark.asyncio
async def test_empty_upstream_ends_cleanly():
    stream = _paced(ScriptedUpstream([]))
    assert [chunk async for chunk in stream] == []  # nosec B101 - pytest assert in tests
    assert stream.finished  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_upstream_error_is_raised_after_released_chunks():
    boom = ConnectionError("connection reset by peer")
    upstream = ScriptedUpstream([raw_event("kept"), 0.05, raw_event("lost"), boom])
    stream = _paced(upstream)
    released = []

    with pytest.raises(ProviderError) as info:
        async for chunk in stream:
            released.append(chunk.content)

    assert released == ["kept"]  # nosec B101 - buffered chunk discarded
    assert info.value.code is ErrorCode.TRANSIENT  # nosec B101 - pytest assert in tests
    assert info.value.raw is boom and info.value.__cause__ is boom  # nosec B101 - pytest assert in tests
    assert info.value.provider == "azure" and info.value.model == "paced-model"  # nosec B101


@pytest.mark.asyncio
async def test_error_before_first_release_discards_buffer():
    upstream = ScriptedUpstream(text_events("a", "b") + [RuntimeError("rate limit exceeded")])
    stream = _paced(upstream)
    released = []

    with pytest.raises(ProviderError) as info:
        async for chunk in stream:
            released.append(chunk)

    assert released == []  # nosec B101 - pytest assert in tests
    assert info.value.code is ErrorCode.RATE_LIMIT and info.value.retryable  # nosec B101


@pytest.mark.asyncio
async def test_cancellation_stops_releases_within_one_poll_interval():
    token = CancellationToken()
    upstream = ScriptedUpstream([raw_event("a"), 10.0, raw_event("never")])
    stream = _paced(upstream, cancellation_token=token)
    released = []

    with pytest.raises(CancelledError):
        async for chunk in stream:
            released.append(chunk.content)
            asyncio.get_running_loop().call_later(0.02, token.cancel, "user abort")
            cancel_requested_at = time.perf_counter() + 0.02

    assert released == ["a"]  # nosec B101 - pytest assert in tests
    assert time.perf_counter() - cancel_requested_at < 0.1  # nosec B101 - poll interval plus scheduling slack
    assert upstream.interrupted and upstream.closed  # nosec B101 - upstream aborted


@pytest.mark.asyncio
async def test_cancellation_does_not_flush_buffered_chunks():
    token = CancellationToken()
    upstream = ScriptedUpstream(text_events("a", "b", "c") + [10.0])
    stream = PacedStream(upstream, model="m", config=PacingConfig(), cancellation_token=token)
    released = []

    with pytest.raises(CancelledError):
        async for chunk in stream:
            released.append(chunk.content)
            token.cancel()

    assert released == ["a"]  # nosec B101 - pytest assert in tests
    assert stream.metrics.discarded == 2  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_cancel_before_iteration_releases_nothing():
    token = CancellationToken()
    token.cancel("early")
    stream = _paced(ScriptedUpstream(text_events("a")), cancellation_token=token)

    with pytest.raises(CancelledError):
        async for _ in stream:
            pass


@pytest.mark.asyncio
async def test_consumer_aclose_tears_down_upstream():
    upstream = ScriptedUpstream([raw_event("a"), 10.0, raw_event("b")])
    stream = _paced(upstream)

    async for _ in stream:
        break
    await stream.aclose()

    assert stream.finished  # nosec B101 - pytest assert in tests
    assert upstream.interrupted and upstream.closed  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_stream_lifecycle_is_logged(adapter_log_records):
    stream = _paced(ScriptedUpstream(text_events("a", "b")))
    async for _ in stream:
        pass

    events = [r.getMessage() for r in adapter_log_records]
    assert any('"event": "stream.start"' in e for e in events)  # nosec B101 - pytest assert in tests
    end = [e for e in events if '"event": "stream.end"' in e]
    assert len(end) == 1 and '"emitted_count": 2' in end[0]  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_time_to_first_token_excludes_consumer_time():
    stream = _paced(ScriptedUpstream(text_events("a", "b")))

    async for _ in stream:
        await asyncio.sleep(0.1)

    assert stream.metrics.time_to_first_token_ms is not None  # nosec B101 - pytest assert in tests
    assert stream.metrics.time_to_first_token_ms < 50.0  # nosec B101 - consumer sleep not counted
