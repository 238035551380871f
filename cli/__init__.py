"""Command-line entry points for hors."""
