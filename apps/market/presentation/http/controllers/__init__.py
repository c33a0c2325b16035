"""HTTP Controllers."""
