"""Azure OpenAI adapter package."""

from .client import AzureOpenAIApi, build_sdk_client
from .request_options import body_to_options, build_chat_params, prompt_to_messages

__all__ = ["AzureOpenAIApi", "build_sdk_client", "body_to_options", "build_chat_params", "prompt_to_messages"]
