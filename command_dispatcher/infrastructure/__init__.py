"""Infrastructure adapters (logging, event publishing)."""
