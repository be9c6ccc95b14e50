"""
Provider-agnostic interfaces for the adapter layer.

Re-exports Protocols split into single-class modules under
``azure_openai_adapters.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import BaseLlmApi

__all__ = ["BaseLlmApi"]
