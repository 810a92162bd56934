"""Route handlers for the facts feature."""
