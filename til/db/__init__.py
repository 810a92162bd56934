"""Remote store connections."""
