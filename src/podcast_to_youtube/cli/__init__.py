"""Command-line interface for podcast-to-youtube."""
