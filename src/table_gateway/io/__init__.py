"""I/O adapters (database connectors)."""
