"""Console presentation adapters."""
