"""DTO validation package for the adapters."""

from .chat import Role, ChatMessageDTO, SamplingOptionsDTO, ChatCompletionRequest, CompletionRequest
from .embeddings import EmbeddingRequest
from .azure_config import AzureConfig

__all__ = [
    "Role",
    "ChatMessageDTO",
    "SamplingOptionsDTO",
    "ChatCompletionRequest",
    "CompletionRequest",
    "EmbeddingRequest",
    "AzureConfig",
]
