"""Service layer for page image extraction."""

from .image_extractor_service import ImageExtractorService

__all__ = ["ImageExtractorService"]
