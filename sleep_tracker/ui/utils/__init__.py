"""UI-side utilities."""
