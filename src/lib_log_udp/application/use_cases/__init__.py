"""Use cases executed by the adapters."""
