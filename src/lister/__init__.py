"""lister: recursively list files by most-recently-modified or -created times."""

__version__ = "0.2.0"

__all__ = ["__version__"]
