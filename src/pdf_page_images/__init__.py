"""
PDF Page Images Package

Extracts every embedded raster image from a selection of document pages and
writes each one as a PNG file named after its page and position.
"""

__version__ = "1.0.0"

from .core.driver import ExtractionDriver, extract_document
from .core.extractor import PageImageExtractor
from .core.session import DocumentSession

__all__ = [
    "ExtractionDriver",
    "extract_document",
    "PageImageExtractor",
    "DocumentSession",
]
