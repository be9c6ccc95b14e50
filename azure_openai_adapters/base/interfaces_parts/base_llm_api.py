"""BaseLlmApi Protocol (single-class module).

Defines the operation set every adapter exposes, whether or not the
backing provider supports each capability.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable

from ..cancellation import CancellationToken
from ..dto import ChatCompletionRequest, CompletionRequest, EmbeddingRequest

Body = Union[Mapping[str, Any], Any]


@runtime_checkable
class BaseLlmApi(Protocol):
    """OpenAI-shaped adapter surface.

    Bodies may be plain mappings or the matching DTO; results are plain dicts
    in the OpenAI wire shape. Capabilities a provider lacks raise
    ``ProviderError(code=UNSUPPORTED)`` immediately.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"azure"``."""
        ...

    async def chat_completion_non_stream(self, body: Union[ChatCompletionRequest, Body]) -> Dict[str, Any]:
        ...

    def chat_completion_stream(
        self,
        body: Union[ChatCompletionRequest, Body],
        cancellation_token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        ...

    async def completion_non_stream(self, body: Union[CompletionRequest, Body]) -> Dict[str, Any]:
        ...

    def completion_stream(
        self,
        body: Union[CompletionRequest, Body],
        cancellation_token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        ...

    def fim_stream(self, body: Body) -> AsyncIterator[Dict[str, Any]]:
        ...

    async def embed(self, body: Union[EmbeddingRequest, Body]) -> Dict[str, Any]:
        ...

    def rerank(self, body: Body) -> Dict[str, Any]:
        ...

    def list_models(self) -> List[Dict[str, Any]]:
        ...


__all__ = ["BaseLlmApi"]
