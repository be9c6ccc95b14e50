"""Paced stream: re-emits upstream events at a controlled cadence.

Two cooperating activities per stream, both on the caller's event loop:

* the **drain task** consumes the upstream async iterator as fast as it is
  delivered, normalizes each event and pushes it into the
  :class:`BacklogBuffer`;
* the **pacing loop** (the async generator handed to the caller) pops from
  the buffer, releases one chunk, then waits for the delay chosen by
  :func:`choose_delay_ms` before releasing the next.

They communicate only through the buffer. When the buffer is empty and the
upstream is still producing, the loop blocks on the buffer for one polling
interval and re-checks; it never emits during that wait. Once the upstream
is exhausted the remaining chunks are flushed without delay.

Failure semantics: an upstream error is raised to the consumer as soon as
the loop observes it; chunks already released stay released, buffered ones
are discarded. Cancelling the :class:`CancellationToken` aborts the upstream
and raises :class:`CancelledError` from the loop within one polling interval,
without flushing.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
import time
from contextlib import suppress
from typing import Any, AsyncIterable, AsyncIterator, Callable, Optional

from ..cancellation import CancellationToken, CancelledError
from ..constants import PROVIDER_NAME
from ..errors import ErrorCode, ProviderError, wrap_exception
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import NormalizedChunk
from .backlog import BacklogBuffer
from .normalizer import normalize_chunk
from .pacing import PacingConfig, PacingState, choose_delay_ms, get_pacing_config
from .streaming_finalize import finalize_stream
from .streaming_metrics import StreamMetrics


async def close_upstream(upstream: Any) -> None:
    """Best-effort close of the upstream iterator (SDK stream or async generator)."""
    close_fn = getattr(upstream, "aclose", None) or getattr(upstream, "close", None)
    if not callable(close_fn):
        return
    with suppress(Exception):
        result = close_fn()
        if inspect.isawaitable(result):
            await result


class PacedStream:
    """Async iterator of :class:`NormalizedChunk` released at a paced cadence.

    A ``PacedStream`` is single-use: iterate it once. Each API call builds a
    fresh instance around a fresh upstream.
    """

    def __init__(
        self,
        upstream: AsyncIterable[Any],
        *,
        model: str,
        ctx: Optional[LogContext] = None,
        config: Optional[PacingConfig] = None,
        cancellation_token: Optional[CancellationToken] = None,
        normalizer: Callable[[Any, str], NormalizedChunk] = normalize_chunk,
        logger: Optional[logging.Logger] = None,
        provider_name: str = PROVIDER_NAME,
    ) -> None:
        self._upstream = upstream
        self.model = model
        self.provider_name = provider_name
        self.ctx = ctx or LogContext(provider=provider_name, model=model)
        self.config = config or get_pacing_config()
        self._token = cancellation_token or CancellationToken()
        self._normalize = normalizer
        self._logger = logger or get_logger("adapters.stream")
        self.metrics = StreamMetrics()
        self.state = PacingState()
        self._iterator: Optional[AsyncIterator[NormalizedChunk]] = None
        self._finished = False

    # API -----------------------------------------------------------------
    def __aiter__(self) -> AsyncIterator[NormalizedChunk]:
        if self._iterator is None:
            self._iterator = self._run()
        return self._iterator

    async def aclose(self) -> None:
        """Stop the stream early and release the upstream."""
        if self._iterator is not None:
            await self._iterator.aclose()  # type: ignore[attr-defined]

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation through the stream's token."""
        self._token.cancel(reason)

    @property
    def cancellation_token(self) -> CancellationToken:
        return self._token

    @property
    def finished(self) -> bool:  # noqa: D401 - short property
        """Whether the pacing loop has terminated."""
        return self._finished

    # drain task ------------------------------------------------------------
    async def _drain(self, backlog: BacklogBuffer) -> None:
        upstream = self._upstream
        try:
            async for raw in upstream:
                backlog.push(self._normalize(raw, self.model))
                self.metrics.received += 1
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001 - surfaced to the consumer via the backlog
            backlog.fail(wrap_exception(exc, provider=self.provider_name, model=self.model))
        else:
            backlog.close()
        finally:
            await close_upstream(upstream)

    # pacing loop -----------------------------------------------------------
    def _raise_if_failed(self, backlog: BacklogBuffer) -> None:
        failure = backlog.failure
        if failure is None:
            return
        raise failure from getattr(failure, "raw", None)

    def _mark_first_release(self, t0: float) -> None:
        if self.metrics.time_to_first_token_ms is None:
            self.metrics.time_to_first_token_ms = (time.perf_counter() - t0) * 1000.0

    def _record_release(self, chunk: NormalizedChunk) -> None:
        self.state.record_release(chunk.content)
        self.metrics.emitted = self.state.released
        self.metrics.released_chars = self.state.tokens_output

    def _log_pace(self, depth: int, delay_ms: float) -> None:
        normalized_log_event(
            self._logger,
            "stream.pace",
            self.ctx,
            phase="mid_stream",
            emitted=True,
            level=logging.DEBUG,
            depth=depth,
            delay_ms=round(delay_ms, 3),
            tokens_output=self.state.tokens_output,
        )

    async def _run(self) -> AsyncIterator[NormalizedChunk]:
        backlog = BacklogBuffer()
        loop = asyncio.get_running_loop()
        t0 = time.perf_counter()
        poll = self.config.poll_interval_seconds
        normalized_log_event(self._logger, "stream.start", self.ctx, phase="start", emitted=None)

        drain = asyncio.create_task(self._drain(backlog))

        def _on_cancel(_reason: Optional[str]) -> None:
            def _abort() -> None:
                backlog.wake()
                drain.cancel()

            loop.call_soon_threadsafe(_abort)

        unregister = self._token.add_callback(_on_cancel)
        outcome, error_code, error_text = "ok", None, None
        try:
            while True:
                self._token.raise_if_cancelled()
                self._raise_if_failed(backlog)
                try:
                    chunk = await backlog.pop_or_wait(poll)
                except EOFError:
                    self._raise_if_failed(backlog)
                    break
                if chunk is None:
                    self.state.liveness_waits += 1
                    self.metrics.liveness_waits = self.state.liveness_waits
                    continue
                self._token.raise_if_cancelled()
                self._raise_if_failed(backlog)
                self._mark_first_release(t0)
                yield chunk
                self._record_release(chunk)
                self.state.finished = backlog.exhausted
                if self.state.finished:
                    continue
                depth = backlog.depth
                delay_ms = choose_delay_ms(depth, self.state.tokens_output, self.config)
                self.state.last_delay_ms = delay_ms
                self._log_pace(depth, delay_ms)
                await backlog.wait(delay_ms / 1000.0)
        except CancelledError as exc:
            outcome, error_code, error_text = "cancelled", ErrorCode.CANCELLED.value, str(exc)
            raise
        except ProviderError as exc:
            outcome, error_code, error_text = "error", exc.code.value, exc.message
            raise
        except (asyncio.CancelledError, GeneratorExit):
            outcome, error_code = "cancelled", ErrorCode.CANCELLED.value
            raise
        finally:
            unregister()
            self._finished = True
            if not drain.done():
                drain.cancel()
            with suppress(asyncio.CancelledError):
                await drain
            if outcome != "ok":
                self.metrics.discarded = backlog.clear()
            self.metrics.peak_depth = backlog.peak_depth
            self.metrics.total_duration_ms = (time.perf_counter() - t0) * 1000.0
            finalize_stream(
                logger=self._logger,
                ctx=self.ctx,
                metrics=self.metrics,
                outcome=outcome,
                error_code=error_code,
                error=error_text,
            )


__all__ = ["PacedStream", "close_upstream"]
