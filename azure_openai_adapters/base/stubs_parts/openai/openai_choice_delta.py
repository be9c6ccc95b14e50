"""OpenAI choice delta protocol.

Only the members read by the chunk normalizer are declared. Either may be
absent on the wire; the normalizer fills defaults.
"""

from __future__ import annotations

from typing import Optional, Protocol


class OpenAIChoiceDelta(Protocol):
    """Delta object inside a streaming choice."""

    role: Optional[str]
    content: Optional[str]
