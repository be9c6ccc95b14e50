"""Adaptive pacing policy for buffered streams.

The paced stream releases one chunk at a time and then asks
:func:`choose_delay_ms` how long to wait before the next release. Backlog
depth is the only observed signal; released output length only decides
whether the stream is still ramping up.

Regimes, evaluated in order (``B`` = depth after the release, ``T`` =
released characters so far):

============================  ======================================
condition                     delay
============================  ======================================
``T < ramp_up_output`` and    ``base / catch_up_divisor`` (catch up)
``B > catch_up_watermark``
``B < low_watermark``         ``base + step * (low_watermark - B)``
``B > high_watermark``        ``base / overflow_divisor`` (drain)
otherwise                     ``base``
============================  ======================================

Configuration is read once from the environment (``ADAPTERS_PACING_*``) and
cached; :func:`reset_pacing_config` drops the cache for tests.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..constants import (
    PACING_BASE_DELAY_MS,
    PACING_CATCH_UP_DIVISOR,
    PACING_CATCH_UP_WATERMARK,
    PACING_HIGH_WATERMARK,
    PACING_LOW_WATERMARK,
    PACING_LOW_WATERMARK_STEP_MS,
    PACING_OVERFLOW_DIVISOR,
    PACING_POLL_INTERVAL_MS,
    PACING_RAMP_UP_OUTPUT,
)


@dataclass(frozen=True)
class PacingConfig:
    """Tunable pacing constants.

    Attributes:
        base_delay_ms: Steady-state delay between releases.
        poll_interval_ms: Liveness wait while the backlog is empty.
        ramp_up_output: Released characters that end the ramp-up phase.
        catch_up_watermark: Depth that triggers catch-up during ramp-up.
        catch_up_divisor: Divides ``base_delay_ms`` while catching up.
        low_watermark: Depth under which releases slow down.
        low_watermark_step_ms: Extra delay per missing chunk under the low watermark.
        high_watermark: Depth over which releases speed up.
        overflow_divisor: Divides ``base_delay_ms`` while draining an overflow.
    """

    base_delay_ms: float = PACING_BASE_DELAY_MS
    poll_interval_ms: float = PACING_POLL_INTERVAL_MS
    ramp_up_output: int = PACING_RAMP_UP_OUTPUT
    catch_up_watermark: int = PACING_CATCH_UP_WATERMARK
    catch_up_divisor: float = PACING_CATCH_UP_DIVISOR
    low_watermark: int = PACING_LOW_WATERMARK
    low_watermark_step_ms: float = PACING_LOW_WATERMARK_STEP_MS
    high_watermark: int = PACING_HIGH_WATERMARK
    overflow_divisor: float = PACING_OVERFLOW_DIVISOR

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000.0


@dataclass
class PacingState:
    """Per-stream counters; created at stream start and discarded at the end."""

    tokens_output: int = 0
    finished: bool = False
    released: int = 0
    liveness_waits: int = 0
    last_delay_ms: Optional[float] = None

    def record_release(self, content: str) -> None:
        self.released += 1
        self.tokens_output += len(content)


def choose_delay_ms(depth: int, tokens_output: int, config: PacingConfig) -> float:
    """Return the wait (ms) before the next release.

    Parameters:
        depth: Backlog depth after removing the chunk just released.
        tokens_output: Cumulative released content length, including it.
        config: Pacing constants.
    """
    base = config.base_delay_ms
    if tokens_output < config.ramp_up_output and depth > config.catch_up_watermark:
        return base / config.catch_up_divisor
    if depth < config.low_watermark:
        return base + config.low_watermark_step_ms * (config.low_watermark - depth)
    if depth > config.high_watermark:
        return base / config.overflow_divisor
    return base


_CACHED: PacingConfig | None = None

_ENV_FIELDS = {
    "base_delay_ms": ("ADAPTERS_PACING_BASE_DELAY_MS", float),
    "poll_interval_ms": ("ADAPTERS_PACING_POLL_INTERVAL_MS", float),
    "ramp_up_output": ("ADAPTERS_PACING_RAMP_UP_OUTPUT", int),
    "catch_up_watermark": ("ADAPTERS_PACING_CATCH_UP_WATERMARK", int),
    "catch_up_divisor": ("ADAPTERS_PACING_CATCH_UP_DIVISOR", float),
    "low_watermark": ("ADAPTERS_PACING_LOW_WATERMARK", int),
    "low_watermark_step_ms": ("ADAPTERS_PACING_LOW_WATERMARK_STEP_MS", float),
    "high_watermark": ("ADAPTERS_PACING_HIGH_WATERMARK", int),
    "overflow_divisor": ("ADAPTERS_PACING_OVERFLOW_DIVISOR", float),
}


def _parse_env_number(name: str, kind: type):
    """Parse a positive number from ``name``; ``None`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        val = kind(raw)
    except ValueError:
        return None
    return val if val > 0 else None


def get_pacing_config() -> PacingConfig:
    """Return the process-cached :class:`PacingConfig` with env overrides applied."""
    global _CACHED  # noqa: PLW0603 - documented module cache
    if _CACHED is not None:
        return _CACHED
    overrides = {}
    for attr, (env_name, kind) in _ENV_FIELDS.items():
        val = _parse_env_number(env_name, kind)
        if val is not None:
            overrides[attr] = val
    _CACHED = PacingConfig(**overrides)
    return _CACHED


def reset_pacing_config() -> None:
    """Forget the cached configuration so the next read re-parses the env."""
    global _CACHED  # noqa: PLW0603
    _CACHED = None


__all__ = [
    "PacingConfig",
    "PacingState",
    "choose_delay_ms",
    "get_pacing_config",
    "reset_pacing_config",
]
