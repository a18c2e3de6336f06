"""Infrastructure helpers (logging, metrics)."""
