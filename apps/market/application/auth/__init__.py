"""Auth application feature."""
