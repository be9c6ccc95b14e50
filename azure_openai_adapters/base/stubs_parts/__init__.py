"""Protocol definitions behind :mod:`azure_openai_adapters.base.stubs`."""
