"""JWT adapters."""
