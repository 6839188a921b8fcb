"""Small synchronous helpers for files, folders, archives, fonts and relative times."""

__version__ = "1.0.0"
