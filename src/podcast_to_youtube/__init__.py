"""podcast-to-youtube - publish podcast episodes as YouTube videos."""

__version__ = "0.1.0"
