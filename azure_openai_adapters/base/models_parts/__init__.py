"""One-class-per-file implementations behind :mod:`azure_openai_adapters.base.models`."""
