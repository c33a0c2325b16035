"""Session/access gate feature."""
