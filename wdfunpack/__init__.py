"""Read WDF archives, extract entries by name list, and keep name-fragment dictionaries."""

__version__ = "0.1.0"
__all__ = ["cli", "dictionary", "hashing", "unpacker"]