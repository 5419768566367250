"""Shared helpers: path resolution and display formatting."""
