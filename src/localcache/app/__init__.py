"""Application layer for local-cache."""
