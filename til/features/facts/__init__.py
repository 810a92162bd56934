"""Fact sharing feature."""
