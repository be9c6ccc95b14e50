"""Unit tests for the adaptive pacing delay policy and its configuration."""
from __future__ import annotations

import pytest

from azure_openai_adapters.base.streaming import (
    PacingConfig,
    PacingState,
    choose_delay_ms,
    get_pacing_config,
    reset_pacing_config,
)

DEFAULT = PacingConfig()


@pytest.mark.parametrize(
    ("depth", "tokens_output", "expected"),
    [
        # ramp-up catch-up beats every other regime
        (31, 0, 10.0),
        (45, 99, 10.0),
        # catch-up needs depth strictly over the watermark
        (30, 0, 30.0),
        # ramp-up over: high watermark drains at base / 2
        (41, 100, 15.0),
        (40, 100, 30.0),
        # low watermark adds 20ms per missing chunk
        (0, 5, 30.0 + 20.0 * 12),
        (11, 500, 50.0),
        (12, 500, 30.0),
        # steady state
        (25, 1000, 30.0),
    ],
)
def test_delay_regimes(depth, tokens_output, expected):
    assert choose_delay_ms(depth, tokens_output, DEFAULT) == pytest.approx(expected)  # nosec B101


def test_custom_constants_are_honoured():
    cfg = PacingConfig(base_delay_ms=60.0, low_watermark=2, low_watermark_step_ms=5.0)
    assert choose_delay_ms(0, 1000, cfg) == pytest.approx(70.0)  # nosec B101 - pytest assert in tests
    assert choose_delay_ms(5, 1000, cfg) == pytest.approx(60.0)  # nosec B101 - pytest assert in tests


def test_state_counts_released_characters():
    state = PacingState()
    state.record_release("abc")
    state.record_release("")
    assert state.released == 2 and state.tokens_output == 3  # nosec B101 - pytest assert in tests


def test_env_overrides_are_parsed_and_cached(monkeypatch):
    monkeypatch.setenv("ADAPTERS_PACING_BASE_DELAY_MS", "12.5")
    monkeypatch.setenv("ADAPTERS_PACING_LOW_WATERMARK", "4")
    monkeypatch.setenv("ADAPTERS_PACING_HIGH_WATERMARK", "not-a-number")
    monkeypatch.setenv("ADAPTERS_PACING_POLL_INTERVAL_MS", "-1")

    cfg = get_pacing_config()

    assert cfg.base_delay_ms == 12.5 and cfg.low_watermark == 4  # nosec B101 - pytest assert in tests
    assert cfg.high_watermark == DEFAULT.high_watermark  # nosec B101 - pytest assert in tests
    assert cfg.poll_interval_ms == DEFAULT.poll_interval_ms  # nosec B101 - pytest assert in tests

    monkeypatch.setenv("ADAPTERS_PACING_BASE_DELAY_MS", "99")
    assert get_pacing_config() is cfg  # nosec B101 - cached until reset
    reset_pacing_config()
    assert get_pacing_config().base_delay_ms == 99.0  # nosec B101 - pytest assert in tests


def test_env_overrides_cover_divisors(monkeypatch):
    monkeypatch.setenv("ADAPTERS_PACING_CATCH_UP_DIVISOR", "6")
    monkeypatch.setenv("ADAPTERS_PACING_OVERFLOW_DIVISOR", "3")

    cfg = get_pacing_config()

    assert cfg.catch_up_divisor == 6.0 and cfg.overflow_divisor == 3.0  # nosec B101 - pytest assert in tests
    assert choose_delay_ms(31, 0, cfg) == 5.0  # nosec B101 - pytest assert in tests
    assert choose_delay_ms(41, 100, cfg) == 10.0  # nosec B101 - pytest assert in tests
