"""Command-line interface and interactive studio."""
