"""Application layer - beacon use cases."""
