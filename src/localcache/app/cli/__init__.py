"""Command-line interface for local-cache."""
