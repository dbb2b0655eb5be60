"""Application layer - use cases and screen controllers."""
