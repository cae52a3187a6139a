"""re-book board service."""
