"""Unit tests for the backlog buffer between drain task and pacing loop."""
from __future__ import annotations

import asyncio
import time

import pytest

from azure_openai_adapters.base.streaming import BacklogBuffer, normalize_chunk
from azure_openai_adapters.tests.streaming.helpers import raw_event


def _chunk(text: str):
    return normalize_chunk(raw_event(text), "m")


@pytest.mark.asyncio
async def test_fifo_and_depth():
    backlog = BacklogBuffer()
    for t in "abc":
        backlog.push(_chunk(t))
    assert backlog.depth == 3 and backlog.peak_depth == 3  # nosec B101 - pytest assert in tests

    popped = [(await backlog.pop_or_wait(0.01)).content for _ in range(3)]

    assert popped == ["a", "b", "c"]  # nosec B101 - pytest assert in tests
    assert backlog.depth == 0 and backlog.peak_depth == 3  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_pop_times_out_with_none_when_empty():
    backlog = BacklogBuffer()
    start = time.perf_counter()
    assert await backlog.pop_or_wait(0.02) is None  # nosec B101 - pytest assert in tests
    assert time.perf_counter() - start >= 0.015  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_pop_wakes_on_push_from_other_task():
    backlog = BacklogBuffer()
    asyncio.get_running_loop().call_later(0.01, backlog.push, _chunk("late"))
    chunk = await backlog.pop_or_wait(1.0)
    assert chunk is not None and chunk.content == "late"  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_close_drains_then_signals_end_repeatedly():
    backlog = BacklogBuffer()
    backlog.push(_chunk("x"))
    backlog.close()
    backlog.close()

    assert backlog.exhausted and backlog.depth == 1  # nosec B101 - pytest assert in tests
    assert (await backlog.pop_or_wait(0.01)).content == "x"  # nosec B101 - pytest assert in tests
    for _ in range(2):
        with pytest.raises(EOFError):
            await backlog.pop_or_wait(0.01)
    assert backlog.depth == 0  # nosec B101 - pytest assert in tests


def test_push_after_close_is_rejected():
    backlog = BacklogBuffer()
    backlog.close()
    with pytest.raises(RuntimeError):
        backlog.push(_chunk("y"))


@pytest.mark.asyncio
async def test_fail_records_first_error_and_clear_counts_dropped():
    backlog = BacklogBuffer()
    backlog.push(_chunk("a"))
    backlog.push(_chunk("b"))
    first, second = ValueError("one"), ValueError("two")
    backlog.fail(first)
    backlog.fail(second)

    assert backlog.failure is first and backlog.exhausted  # nosec B101 - pytest assert in tests
    assert backlog.clear() == 2  # nosec B101 - pytest assert in tests
    with pytest.raises(EOFError):
        await backlog.pop_or_wait(0.01)


@pytest.mark.asyncio
async def test_wait_returns_early_when_woken():
    backlog = BacklogBuffer()
    asyncio.get_running_loop().call_later(0.01, backlog.wake)
    start = time.perf_counter()
    await backlog.wait(5.0)
    assert time.perf_counter() - start < 1.0  # nosec B101 - pytest assert in tests
