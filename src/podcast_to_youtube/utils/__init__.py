"""Utility helpers for podcast-to-youtube."""
