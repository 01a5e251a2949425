"""ShareBox: minimal multi-user file sharing service."""

__version__ = "0.1.0"
