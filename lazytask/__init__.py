"""Task models, filtering, caching, export and command-line integration for Taskwarrior."""

__version__ = "0.1.0"