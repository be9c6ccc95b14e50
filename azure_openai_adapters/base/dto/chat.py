"""
Pydantic DTOs for inbound chat and legacy completion request bodies.

Purpose
-------
Validate OpenAI-shaped request bodies at the edge, before they are mapped to
SDK call parameters. Validation either succeeds or raises
``pydantic.ValidationError``; callers handle it where the body enters.

Design
------
- Field names follow the OpenAI wire format so bodies can be passed as-is.
- Unknown top-level fields are ignored: only the fields the adapter forwards
  are modelled.
- ``model`` may be omitted; the adapter then falls back to its configured
  default deployment.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

Role = Literal["system", "developer", "user", "assistant", "tool"]


class ChatMessageDTO(BaseModel):
    """One chat message; extra keys (``name``, ``tool_call_id``...) are kept."""

    model_config = ConfigDict(extra="allow")

    role: Role
    content: Union[str, List[Dict[str, Any]], None] = None

    @model_validator(mode="after")
    def _validate_content(self) -> "ChatMessageDTO":
        """User messages must carry content."""
        if self.role == "user" and not self.content:
            raise ValueError("user message must include content")
        return self


class SamplingOptionsDTO(BaseModel):
    """Sampling fields shared by chat and legacy completion bodies."""

    model_config = ConfigDict(extra="ignore")

    model: Optional[str] = Field(default=None, min_length=1)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    stop: Union[str, List[str], None] = None


class ChatCompletionRequest(SamplingOptionsDTO):
    """Chat completions body (``messages`` must be non-empty)."""

    messages: List[ChatMessageDTO] = Field(..., min_length=1)
    stream: Optional[bool] = None


class CompletionRequest(SamplingOptionsDTO):
    """Legacy text completion body.

    ``logprobs`` is accepted for compatibility and dropped when the body is
    turned into a chat request.
    """

    prompt: Union[str, List[str]]
    logprobs: Optional[int] = None
    stream: Optional[bool] = None


__all__ = [
    "Role",
    "ChatMessageDTO",
    "SamplingOptionsDTO",
    "ChatCompletionRequest",
    "CompletionRequest",
]
