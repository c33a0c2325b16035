"""Marketplace feature."""
