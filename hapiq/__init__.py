"""Identifier cleanup, word segmentation and Markdown conversion for text extracted from scientific papers."""

__version__ = "0.1.0"
__all__ = ["identifiers", "segmentation", "markdown"]