"""Single-class Protocol modules behind :mod:`azure_openai_adapters.base.interfaces`."""

from .base_llm_api import BaseLlmApi

__all__ = ["BaseLlmApi"]
