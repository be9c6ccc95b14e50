"""azure_openai_adapters package

Azure OpenAI adapter with paced, normalized streaming.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`, :class:`CancelledError`
    - Cancellation: :class:`CancellationToken`
    - Factory: :func:`create`

Adapters are imported lazily by :func:`create` so importing the package does
not pull in the SDKs.
"""

from importlib import import_module
from typing import Any, Dict, Tuple

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import ErrorCode, ProviderError

__version__ = "0.1.0"

# Canonical provider name -> (module, class)
_PROVIDERS: Dict[str, Tuple[str, str]] = {
    "azure": ("azure_openai_adapters.azure.client", "AzureOpenAIApi"),
}


def create(provider: str = "azure", *, client: Any = None, pacing: Any = None, **overrides: Any) -> Any:
    """Create an adapter by canonical name.

    Configuration comes from :func:`config.get_provider_config`, with
    ``overrides`` (e.g. ``api_base=...``) applied last. ``client`` and
    ``pacing`` are forwarded to the adapter constructor.

    Raises:
        ProviderError: ``NOT_FOUND`` for an unknown provider name,
            ``CONFIGURATION`` when required settings are missing.
    """
    from .config import get_provider_config

    name = (provider or "").lower().strip()
    target = _PROVIDERS.get(name)
    if target is None:
        raise ProviderError(code=ErrorCode.NOT_FOUND, message=f"unknown provider '{provider}'", provider=name or "-")
    module_name, class_name = target
    adapter_cls = getattr(import_module(module_name), class_name)
    return adapter_cls(get_provider_config(name, overrides), client=client, pacing=pacing)


__all__ = [
    "__version__",
    "ProviderError",
    "ErrorCode",
    "CancellationToken",
    "CancelledError",
    "create",
]
