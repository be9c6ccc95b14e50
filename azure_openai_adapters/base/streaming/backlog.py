"""Backlog buffer between the drain task and the pacing loop.

Single producer (the drain task pushes at the tail) and single consumer (the
pacing loop pops at the head). Both run on one event loop, so ``push`` and
``pop_or_wait`` need no locking: each is atomic between suspension points.

The buffer is unbounded. The upstream is a finite, provider rate-limited
sequence; an adversarial or very fast upstream would need a capacity bound
and back-pressure on the drain task.
"""
from __future__ import annotations

import asyncio
from contextlib import suppress
from typing import Optional, Union

from ..models import NormalizedChunk

# Terminal marker queued behind the last chunk once upstream stops.
_END = object()


class BacklogBuffer:
    """FIFO of normalized chunks produced but not yet released.

    ``close()`` records exhaustion, ``fail(exc)`` records an upstream error;
    both queue the terminal marker so a waiting consumer wakes up, and both
    set the wake event that cuts short any pacing delay in progress.
    """

    def __init__(self) -> None:
        self._queue: "asyncio.Queue[Union[NormalizedChunk, object]]" = asyncio.Queue()
        self._wake = asyncio.Event()
        self._exhausted = False
        self._failure: Optional[BaseException] = None
        self._peak_depth = 0

    # producer side --------------------------------------------------------
    def push(self, chunk: NormalizedChunk) -> None:
        """Append ``chunk`` at the tail."""
        if self._exhausted:
            raise RuntimeError("push after backlog was closed")
        self._queue.put_nowait(chunk)
        self._peak_depth = max(self._peak_depth, self.depth)

    def close(self) -> None:
        """Mark upstream as exhausted; idempotent."""
        if self._exhausted:
            return
        self._exhausted = True
        self._queue.put_nowait(_END)
        self._wake.set()

    def fail(self, exc: BaseException) -> None:
        """Record an upstream failure and close the buffer."""
        if self._failure is None:
            self._failure = exc
        self.close()

    # consumer side --------------------------------------------------------
    async def pop_or_wait(self, timeout: float) -> Optional[NormalizedChunk]:
        """Remove and return the head chunk.

        Blocks for at most ``timeout`` seconds while the buffer is empty and
        returns ``None`` when nothing arrived. Raises ``EOFError`` once the
        terminal marker is reached (every chunk has been popped).
        """
        try:
            item = self._queue.get_nowait()
        except asyncio.QueueEmpty:
            try:
                item = await asyncio.wait_for(self._queue.get(), timeout)
            except asyncio.TimeoutError:
                return None
        if item is _END:
            # keep the marker visible to any later pop
            self._queue.put_nowait(_END)
            raise EOFError("backlog drained")
        return item  # type: ignore[return-value]

    async def wait(self, timeout: float) -> None:
        """Sleep up to ``timeout`` seconds, returning early once woken."""
        if timeout <= 0 or self._wake.is_set():
            return
        with suppress(asyncio.TimeoutError):
            await asyncio.wait_for(self._wake.wait(), timeout)

    def wake(self) -> None:
        """Interrupt any pending :meth:`wait` (used on cancellation)."""
        self._wake.set()

    def clear(self) -> int:
        """Discard every buffered chunk; returns how many were dropped."""
        dropped = 0
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                break
            if item is not _END:
                dropped += 1
        if self._exhausted:
            self._queue.put_nowait(_END)
        return dropped

    # introspection --------------------------------------------------------
    @property
    def depth(self) -> int:
        """Chunks currently buffered (the terminal marker is not counted)."""
        size = self._queue.qsize()
        return size - 1 if self._exhausted and size else size

    @property
    def peak_depth(self) -> int:
        return self._peak_depth

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def failure(self) -> Optional[BaseException]:
        return self._failure


__all__ = ["BacklogBuffer"]
