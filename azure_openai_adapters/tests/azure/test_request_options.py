"""Tests for request body validation and SDK parameter mapping."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from azure_openai_adapters.azure.request_options import (
    body_to_options,
    build_chat_params,
    coerce_body,
    prompt_to_messages,
)
from azure_openai_adapters.base.dto import ChatCompletionRequest, CompletionRequest, EmbeddingRequest


def _chat(**fields) -> ChatCompletionRequest:
    fields.setdefault("messages", [{"role": "user", "content": "hi"}])
    return ChatCompletionRequest.model_validate(fields)


def test_body_to_options_wraps_string_stop_and_drops_unset():
    opts = body_to_options(_chat(model="m", max_tokens=10, top_p=0.5, stop="END"))
    assert opts == {"max_tokens": 10, "top_p": 0.5, "stop": ["END"]}  # nosec B101


def test_body_to_options_keeps_list_stop():
    opts = body_to_options(_chat(stop=["a", "b"], temperature=0.0, presence_penalty=-1.0))
    assert opts == {"temperature": 0.0, "presence_penalty": -1.0, "stop": ["a", "b"]}  # nosec B101


def test_build_chat_params_for_stream_and_non_stream():
    body = _chat(
        model="gpt",
        max_tokens=5,
        temperature=0.2,
        frequency_penalty=0.1,
        stop="x",
        messages=[{"role": "system", "content": "sys"}, {"role": "user", "content": "q", "name": "bob"}],
    )

    params = build_chat_params(body, stream=True, default_model="fallback")

    assert params == {  # nosec B101
        "model": "gpt",
        "messages": [{"role": "system", "content": "sys"}, {"role": "user", "content": "q", "name": "bob"}],
        "max_tokens": 5,
        "temperature": 0.2,
        "frequency_penalty": 0.1,
        "stream": True,
    }
    assert "stream" not in build_chat_params(body, stream=False, default_model="fallback")  # nosec B101


def test_build_chat_params_falls_back_to_default_model():
    assert build_chat_params(_chat(), stream=False, default_model="dflt")["model"] == "dflt"  # nosec B101


def test_prompt_to_messages_drops_prompt_and_logprobs():
    legacy = CompletionRequest(model="m", prompt="complete me", logprobs=3, max_tokens=8)

    chat = prompt_to_messages(legacy)

    assert [m.model_dump(exclude_none=True) for m in chat.messages] == [  # nosec B101
        {"role": "user", "content": "complete me"}
    ]
    assert chat.model == "m" and chat.max_tokens == 8  # nosec B101
    assert not hasattr(chat, "logprobs") and not hasattr(chat, "prompt")  # nosec B101


def test_prompt_list_is_joined_into_one_message():
    chat = prompt_to_messages(CompletionRequest(prompt=["a", "b"]))
    assert chat.messages[0].content == "a\nb"  # nosec B101


def test_coerce_body_validates_mappings_and_passes_dtos():
    dto = _chat()
    assert coerce_body(dto, ChatCompletionRequest) is dto  # nosec B101
    assert coerce_body({"input": "x"}, EmbeddingRequest).input == "x"  # nosec B101
    with pytest.raises(ValidationError):
        coerce_body({"model": "m", "messages": []}, ChatCompletionRequest)


def test_dto_bounds_are_enforced():
    with pytest.raises(ValidationError):
        _chat(temperature=3.0)
    with pytest.raises(ValidationError):
        _chat(max_tokens=0)
    with pytest.raises(ValidationError):
        _chat(messages=[{"role": "user", "content": ""}])
