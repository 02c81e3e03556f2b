"""Discovery Service Setup."""
