"""Request mapping helpers for the Azure adapter.

Turn validated request DTOs into the keyword arguments of the OpenAI SDK
calls. Unset fields are dropped rather than sent as ``null``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel

from ..base.dto import ChatCompletionRequest, ChatMessageDTO, CompletionRequest, SamplingOptionsDTO

# Sampling fields forwarded to chat completions. ``stop`` is mapped by
# ``body_to_options`` but not sent on chat calls.
CHAT_OPTION_FIELDS = ("max_tokens", "temperature", "top_p", "frequency_penalty", "presence_penalty")

DtoT = TypeVar("DtoT", bound=BaseModel)


def coerce_body(body: Union[DtoT, Mapping[str, Any]], dto: Type[DtoT]) -> DtoT:
    """Return ``body`` as ``dto``, validating plain mappings."""
    if isinstance(body, dto):
        return body
    if isinstance(body, BaseModel):
        return dto.model_validate(body.model_dump(exclude_none=True))
    return dto.model_validate(body)


def body_to_options(body: SamplingOptionsDTO) -> Dict[str, Any]:
    """Map the common sampling fields to the provider options shape.

    A string ``stop`` is wrapped into a single-element list.
    """
    stop = body.stop
    options: Dict[str, Any] = {
        "max_tokens": body.max_tokens,
        "temperature": body.temperature,
        "top_p": body.top_p,
        "frequency_penalty": body.frequency_penalty,
        "presence_penalty": body.presence_penalty,
        "stop": [stop] if isinstance(stop, str) else stop,
    }
    return {k: v for k, v in options.items() if v is not None}


def _message_to_param(message: ChatMessageDTO) -> Dict[str, Any]:
    return message.model_dump(exclude_none=True)


def build_chat_params(body: ChatCompletionRequest, *, stream: bool, default_model: str) -> Dict[str, Any]:
    """Return ``chat.completions.create`` keyword arguments for ``body``."""
    options = body_to_options(body)
    params: Dict[str, Any] = {
        "model": body.model or default_model,
        "messages": [_message_to_param(m) for m in body.messages],
    }
    params.update({k: options[k] for k in CHAT_OPTION_FIELDS if k in options})
    if stream:
        params["stream"] = True
    return params


def _prompt_text(prompt: Union[str, List[str]]) -> str:
    return prompt if isinstance(prompt, str) else "\n".join(prompt)


def prompt_to_messages(body: CompletionRequest) -> ChatCompletionRequest:
    """Rewrite a legacy completion body as a single-user-message chat body.

    ``prompt`` becomes the message content; ``logprobs`` is dropped.
    """
    rest = body.model_dump(exclude={"prompt", "logprobs"}, exclude_none=True)
    rest["messages"] = [{"role": "user", "content": _prompt_text(body.prompt)}]
    return ChatCompletionRequest.model_validate(rest)


__all__ = [
    "CHAT_OPTION_FIELDS",
    "coerce_body",
    "body_to_options",
    "build_chat_params",
    "prompt_to_messages",
]
