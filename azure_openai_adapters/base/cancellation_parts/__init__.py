"""Implementation modules for :mod:`azure_openai_adapters.base.cancellation`."""
