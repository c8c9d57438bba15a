"""NoteLens - insights and mind maps for structured voice notes."""

__version__ = "1.0.0"
