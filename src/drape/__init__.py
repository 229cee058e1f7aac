"""Title merging for layout decoration."""
