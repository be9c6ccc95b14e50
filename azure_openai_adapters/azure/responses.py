"""Shape SDK responses into OpenAI wire dicts.

SDK objects are read by attribute (pydantic models in production,
``SimpleNamespace`` fakes in tests) and never leak to callers.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.models import LEGACY_FINISH_REASON, TEXT_COMPLETION_OBJECT
from ..base.stubs import OpenAIChatResponse, OpenAIEmbeddingResponse

CHAT_COMPLETION_OBJECT = "chat.completion"


def _as_dict(obj: Any) -> Dict[str, Any]:
    """Shallow dict view of an SDK object."""
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    dump = getattr(obj, "model_dump", None)
    if callable(dump):
        return dump()
    return dict(vars(obj)) if hasattr(obj, "__dict__") else {}


def reduce_usage(usage: Any) -> Optional[Dict[str, Any]]:
    """Keep only the three token counters; ``None`` when usage is absent."""
    if usage is None:
        return None
    return {
        "total_tokens": getattr(usage, "total_tokens", None),
        "completion_tokens": getattr(usage, "completion_tokens", None),
        "prompt_tokens": getattr(usage, "prompt_tokens", None),
    }


def _chat_choice(position: int, choice: Any) -> Dict[str, Any]:
    message = getattr(choice, "message", None)
    index = getattr(choice, "index", None)
    return {
        **_as_dict(choice),
        "index": index if isinstance(index, int) else position,
        "logprobs": None,
        "finish_reason": getattr(choice, "finish_reason", None),
        "message": {
            "role": "assistant",
            "content": getattr(message, "content", None),
            "refusal": None,
        },
    }


def to_chat_completion(completion: OpenAIChatResponse | Any, model: str) -> Dict[str, Any]:
    """Return the non-streaming chat payload stamped with the requested model."""
    return {
        **_as_dict(completion),
        "object": CHAT_COMPLETION_OBJECT,
        "model": model,
        "created": getattr(completion, "created", None),
        "usage": reduce_usage(getattr(completion, "usage", None)),
        "choices": [_chat_choice(i, c) for i, c in enumerate(getattr(completion, "choices", None) or ())],
    }


def to_text_completion(chat: Dict[str, Any]) -> Dict[str, Any]:
    """Legacy completion view of a shaped chat payload."""
    choices: List[Dict[str, Any]] = []
    for choice in chat.get("choices", []):
        legacy = {k: v for k, v in choice.items() if k != "message"}
        legacy.update(
            text=(choice.get("message") or {}).get("content") or "",
            finish_reason=LEGACY_FINISH_REASON,
            logprobs=None,
        )
        choices.append(legacy)
    return {**chat, "object": TEXT_COMPLETION_OBJECT, "choices": choices}


def to_embedding_response(response: OpenAIEmbeddingResponse | Any, model: str) -> Dict[str, Any]:
    """Assemble the OpenAI ``list`` of embeddings for ``model``."""
    usage = getattr(response, "usage", None)
    return {
        "object": "list",
        "model": model,
        "data": [
            {"object": "embedding", "index": i, "embedding": list(getattr(item, "embedding", None) or [])}
            for i, item in enumerate(getattr(response, "data", None) or ())
        ],
        "usage": {
            "prompt_tokens": getattr(usage, "prompt_tokens", None) or 0,
            "total_tokens": getattr(usage, "total_tokens", None) or 0,
        },
    }


__all__ = [
    "CHAT_COMPLETION_OBJECT",
    "reduce_usage",
    "to_chat_completion",
    "to_text_completion",
    "to_embedding_response",
]
