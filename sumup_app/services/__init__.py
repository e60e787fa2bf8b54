"""Application services (membership source, context persistence)."""
