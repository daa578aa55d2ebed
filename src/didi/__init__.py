"""didi — a small command-line diary used to document your life."""

__version__ = "0.1.0"
