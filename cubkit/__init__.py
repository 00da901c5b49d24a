"""Text utilities, printf-style formatting, a buffered line reader and an in-memory minimap renderer."""

__version__ = "0.1.0"
__all__ = ["text_search", "text_transform", "formatting", "linereader", "minimap"]