"""Character lifecycle feature."""
