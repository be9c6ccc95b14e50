"""Azure OpenAI adapter.

Wraps ``openai.AsyncAzureOpenAI`` behind the ``BaseLlmApi`` surface:

- chat and legacy completions, non-streaming and paced streaming;
- embeddings;
- fill-in-the-middle, rerank and model listing raise ``UNSUPPORTED``.

Authentication uses a static api key when configured, otherwise an Azure AD
bearer token from ``azure-identity`` (``AzureCliCredential``). Outbound
traffic is routed through ``HTTPS_PROXY`` / ``HTTP_PROXY`` when set.

Streams are paced by :class:`PacedStream`: upstream events are buffered and
re-emitted at a cadence driven by backlog depth. Upstream failures surface as
``ProviderError``; cancellation through a ``CancellationToken`` aborts the
upstream request and raises ``CancelledError`` from the iterator.
"""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Union

from azure.identity import AzureCliCredential, get_bearer_token_provider
from openai import AsyncAzureOpenAI

from ..base.cancellation import CancellationToken, CancelledError
from ..base.constants import PROVIDER_NAME
from ..base.dto import AzureConfig, ChatCompletionRequest, CompletionRequest, EmbeddingRequest
from ..base.errors import ErrorCode, ProviderError, unsupported, wrap_exception
from ..base.http import get_async_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.streaming import PacedStream, PacingConfig, close_upstream, get_pacing_config, to_text_chunks
from ..config.env import resolve_proxy
from .request_options import build_chat_params, coerce_body, prompt_to_messages
from .responses import to_chat_completion, to_embedding_response, to_text_completion

Body = Union[Mapping[str, Any], Any]


def build_sdk_client(config: AzureConfig) -> AsyncAzureOpenAI:
    """Construct the SDK client for ``config``.

    ``config.api_base`` is used verbatim as the SDK ``base_url``.
    """
    kwargs: Dict[str, Any] = {
        "base_url": config.api_base,
        "api_version": config.api_version,
        "timeout": config.timeout_seconds,
    }
    if config.api_key:
        kwargs["api_key"] = config.api_key
    else:
        credential = AzureCliCredential()
        kwargs["azure_ad_token_provider"] = get_bearer_token_provider(credential, config.scope)
    proxy = resolve_proxy()
    if proxy is not None:
        kwargs["http_client"] = get_async_httpx_client(proxy, PROVIDER_NAME, timeout=config.timeout_seconds)
    return AsyncAzureOpenAI(**kwargs)


class AzureOpenAIApi:
    """Azure OpenAI implementation of :class:`BaseLlmApi`.

    Parameters:
        config: ``AzureConfig`` or a mapping validated into one (typically
            ``get_provider_config("azure")``).
        client: Pre-built SDK client; skips credential and transport setup.
        pacing: Pacing constants for streams; defaults to ``get_pacing_config()``.

    Raises:
        ProviderError: ``CONFIGURATION`` when ``api_base`` is missing.
    """

    def __init__(
        self,
        config: Union[AzureConfig, Mapping[str, Any]],
        *,
        client: Optional[Any] = None,
        pacing: Optional[PacingConfig] = None,
    ) -> None:
        self.config = config if isinstance(config, AzureConfig) else AzureConfig.model_validate(dict(config))
        if not self.config.api_base:
            raise ProviderError(
                code=ErrorCode.CONFIGURATION,
                message="Azure OpenAI API requires api_base",
                provider=PROVIDER_NAME,
            )
        self._client = client if client is not None else build_sdk_client(self.config)
        self._pacing = pacing or get_pacing_config()
        self._logger = get_logger("adapters.azure")
        self._stream_logger = get_logger("adapters.stream")

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    @property
    def client(self) -> Any:
        """Underlying SDK client."""
        return self._client

    # -------------------- helpers --------------------

    def _ctx(self, model: str) -> LogContext:
        return LogContext(provider=PROVIDER_NAME, model=model)

    def _log_failure(self, event: str, ctx: LogContext, err: ProviderError) -> None:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="finalize",
            error_code=err.code.value,
            emitted=False,
            error=err.message[:260],
        )

    async def _create_chat(self, params: Dict[str, Any], ctx: LogContext, event: str) -> Any:
        normalized_log_event(self._logger, event, ctx, phase="start", emitted=False, stream=bool(params.get("stream")))
        try:
            return await self._client.chat.completions.create(**params)
        except Exception as exc:  # noqa: BLE001 - classified and re-raised
            err = wrap_exception(exc, provider=PROVIDER_NAME, model=ctx.model)
            self._log_failure(event.replace(".start", ".error"), ctx, err)
            raise err from exc

    async def _create_cancellable(
        self,
        params: Dict[str, Any],
        ctx: LogContext,
        event: str,
        token: CancellationToken,
    ) -> Any:
        """Open the upstream stream, aborting the request if ``token`` fires meanwhile."""
        token.raise_if_cancelled()
        loop = asyncio.get_running_loop()
        task = asyncio.ensure_future(self._create_chat(params, ctx, event))

        def _on_cancel(_reason: Optional[str]) -> None:
            loop.call_soon_threadsafe(task.cancel)

        unregister = token.add_callback(_on_cancel)
        try:
            upstream = await task
        except asyncio.CancelledError:
            if token.cancelled:
                raise CancelledError(token.reason or "operation cancelled") from None
            raise
        finally:
            unregister()
        if token.cancelled:
            await close_upstream(upstream)
            token.raise_if_cancelled()
        return upstream

    async def _open_paced_stream(
        self,
        request: ChatCompletionRequest,
        cancellation_token: Optional[CancellationToken],
        event: str,
    ) -> PacedStream:
        params = build_chat_params(request, stream=True, default_model=self.config.model)
        ctx = self._ctx(params["model"])
        if cancellation_token is None:
            upstream = await self._create_chat(params, ctx, event)
        else:
            upstream = await self._create_cancellable(params, ctx, event, cancellation_token)
        return PacedStream(
            upstream,
            model=params["model"],
            ctx=ctx,
            config=self._pacing,
            cancellation_token=cancellation_token,
            logger=self._stream_logger,
        )

    # -------------------- chat --------------------

    async def chat_completion_non_stream(self, body: Union[ChatCompletionRequest, Body]) -> Dict[str, Any]:
        """Run one chat completion and return the shaped ``chat.completion`` dict."""
        request = coerce_body(body, ChatCompletionRequest)
        params = build_chat_params(request, stream=False, default_model=self.config.model)
        ctx = self._ctx(params["model"])
        completion = await self._create_chat(params, ctx, "chat.start")
        result = to_chat_completion(completion, params["model"])
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=bool(result["choices"]),
            tokens=result["usage"],
        )
        return result

    async def chat_completion_stream(
        self,
        body: Union[ChatCompletionRequest, Body],
        cancellation_token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Yield paced ``chat.completion.chunk`` dicts.

        The upstream request is opened on first iteration.
        """
        request = coerce_body(body, ChatCompletionRequest)
        paced = await self._open_paced_stream(request, cancellation_token, "chat.start")
        try:
            async for chunk in paced:
                yield chunk.to_dict()
        finally:
            await paced.aclose()

    # -------------------- legacy completions --------------------

    async def completion_non_stream(self, body: Union[CompletionRequest, Body]) -> Dict[str, Any]:
        """Legacy completion through chat: the prompt becomes one user message."""
        request = coerce_body(body, CompletionRequest)
        ctx = self._ctx(request.model or self.config.model)
        normalized_log_event(self._logger, "completion.start", ctx, phase="start", emitted=False, stream=False)
        chat = await self.chat_completion_non_stream(prompt_to_messages(request))
        return to_text_completion(chat)

    async def completion_stream(
        self,
        body: Union[CompletionRequest, Body],
        cancellation_token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Yield paced ``text_completion`` dicts, one per upstream event."""
        request = coerce_body(body, CompletionRequest)
        paced = await self._open_paced_stream(prompt_to_messages(request), cancellation_token, "completion.start")
        try:
            async for text_chunk in to_text_chunks(paced):
                yield text_chunk.to_dict()
        finally:
            await paced.aclose()

    # -------------------- embeddings --------------------

    async def embed(self, body: Union[EmbeddingRequest, Body]) -> Dict[str, Any]:
        """Embed ``body.input`` and return the OpenAI ``list`` response."""
        request = coerce_body(body, EmbeddingRequest)
        params = request.model_dump(exclude_none=True)
        params["model"] = request.model or self.config.model
        ctx = self._ctx(params["model"])
        normalized_log_event(self._logger, "embed.start", ctx, phase="start", emitted=False)
        try:
            response = await self._client.embeddings.create(**params)
        except Exception as exc:  # noqa: BLE001 - classified and re-raised
            err = wrap_exception(exc, provider=PROVIDER_NAME, model=params["model"])
            self._log_failure("embed.error", ctx, err)
            raise err from exc
        return to_embedding_response(response, params["model"])

    # -------------------- unsupported --------------------

    def fim_stream(self, body: Body) -> AsyncIterator[Dict[str, Any]]:
        raise unsupported(PROVIDER_NAME, "fill-in-the-middle completion")

    def rerank(self, body: Body) -> Dict[str, Any]:
        raise unsupported(PROVIDER_NAME, "rerank")

    def list_models(self) -> List[Dict[str, Any]]:
        raise unsupported(PROVIDER_NAME, "model listing")


__all__ = ["AzureOpenAIApi", "build_sdk_client"]
