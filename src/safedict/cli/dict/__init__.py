"""SafeDict CLI commands."""
