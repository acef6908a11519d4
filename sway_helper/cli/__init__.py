"""Command-line interface for sway-helper."""
