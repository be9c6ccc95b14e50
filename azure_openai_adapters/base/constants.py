"""Base shared constants for the adapters.

Central location to avoid scattering magic strings and default numbers.
The pacing numbers are heuristics tuned for perceived smoothness of streamed
text; change them here (or via ``ADAPTERS_PACING_*`` env overrides), never
inside the control loop.
"""
from __future__ import annotations

PROVIDER_NAME = "azure"

# ---- Pacing (milliseconds / buffer depths / characters) ----
# Unit delay between two releases in steady state.
PACING_BASE_DELAY_MS = 30.0
# Liveness poll while the backlog is empty and upstream is still producing.
PACING_POLL_INTERVAL_MS = 5.0
# Released characters below which the stream is still ramping up.
PACING_RAMP_UP_OUTPUT = 100
# Depth above which a ramping stream catches up at base / CATCH_UP_DIVISOR.
PACING_CATCH_UP_WATERMARK = 30
PACING_CATCH_UP_DIVISOR = 3.0
# Depth below which the loop slows down to avoid running dry.
PACING_LOW_WATERMARK = 12
# Extra delay per chunk of depth missing below the low watermark.
PACING_LOW_WATERMARK_STEP_MS = 20.0
# Depth above which the loop drains faster.
PACING_HIGH_WATERMARK = 40
PACING_OVERFLOW_DIVISOR = 2.0

__all__ = [
    "PROVIDER_NAME",
    "PACING_BASE_DELAY_MS",
    "PACING_POLL_INTERVAL_MS",
    "PACING_RAMP_UP_OUTPUT",
    "PACING_CATCH_UP_WATERMARK",
    "PACING_CATCH_UP_DIVISOR",
    "PACING_LOW_WATERMARK",
    "PACING_LOW_WATERMARK_STEP_MS",
    "PACING_HIGH_WATERMARK",
    "PACING_OVERFLOW_DIVISOR",
]
