"""Shared test fixtures for sway-helper."""
