"""Core page image extraction utilities."""

from .driver import ExtractionDriver, extract_document
from .exceptions import AuthenticationError, DocumentOpenError, PageExtractionError
from .extractor import PageImageExtractor, PageResult
from .image_block import ImageBlock
from .page_range import parse_next, iter_page_ranges, iter_page_numbers, is_page_range
from .session import DocumentSession

__all__ = [
    "ExtractionDriver",
    "extract_document",
    "AuthenticationError",
    "DocumentOpenError",
    "PageExtractionError",
    "PageImageExtractor",
    "PageResult",
    "ImageBlock",
    "parse_next",
    "iter_page_ranges",
    "iter_page_numbers",
    "is_page_range",
    "DocumentSession",
]
