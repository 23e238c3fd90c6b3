"""
Per-page image extraction.

This module provides the PageImageExtractor class, which pulls every embedded
image out of one page and writes it as a PNG file. Failures are confined to
the page being extracted and handed back inside a PageResult.

Requires: PyMuPDF >= 1.26.6, Pillow
"""

import logging
import os

import fitz

from .constants import (
    IMAGE_NAME_TEMPLATE, IMAGE_EXTENSION, DEFAULT_IMAGE_FORMAT, PNG_COMPRESS_LEVEL,
    COLORSPACE_GRAY, COLORSPACE_RGB
)
from .exceptions import PageExtractionError
from .image_block import ImageBlock

logger = logging.getLogger(__name__)


def image_name(page_number, index):
    """Return the file stem for image ``index`` (1-based) of ``page_number``."""
    return IMAGE_NAME_TEMPLATE.format(page=page_number, index=index)


def emit_name(name):
    """Report an extracted image name on stdout."""
    print(name, flush=True)


def write_png(pix, file_name):
    """
    Write a fitz.Pixmap to ``file_name`` as PNG.

    Parameters
    ----------
    pix : fitz.Pixmap
        Pixmap to write.
    file_name : str
        Output filename.

    Raises
    ------
    ValueError
        If the pixmap has no colorspace (alpha-only pixmaps).
    """
    if not pix.colorspace:
        raise ValueError(f"cannot write {file_name}: pixmap has no colorspace")

    # PNG only holds gray and RGB
    if pix.colorspace.name not in (COLORSPACE_GRAY, COLORSPACE_RGB):
        pix = fitz.Pixmap(fitz.csRGB, pix)

    pil_img = pix.pil_image()
    pil_img.save(file_name, format=DEFAULT_IMAGE_FORMAT, compress_level=PNG_COMPRESS_LEVEL)


class PageResult:
    """
    Outcome of extracting one page.

    Attributes
    ----------
    page_number : int
        1-based page number.
    names : list
        Names of the images written, in the order they were written.
    error : PageExtractionError or None
        Set when extraction stopped early.
    """

    def __init__(self, page_number):
        self.page_number = page_number
        self.names = []
        self.error = None

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        return (f"PageResult(page_number={self.page_number}, "
                f"images={len(self.names)}, ok={self.ok})")


class PageImageExtractor:
    """
    Extracts the embedded images of single pages of an open document.

    Each page is run through PyMuPDF's structured text interpreter with
    ``TEXT_PRESERVE_IMAGES`` so that images come back as discrete blocks in
    content order. Every image block is rasterized and saved as
    ``<output_dir>/page-<ppp>-img-<iiii>.png``; the image counter restarts
    at 1 on every page.
    """

    def __init__(self, session, output_dir='.', emit=emit_name):
        """
        Initialize PageImageExtractor.

        Parameters
        ----------
        session : DocumentSession
            Session holding the open, authenticated document. Not owned by
            the extractor.
        output_dir : str, optional
            Directory the PNG files are written to.
        emit : callable, optional
            Called with each image name right after its file is saved.
        """
        self.session = session
        self.output_dir = output_dir
        self.emit = emit

    def extract(self, page_number):
        """
        Extract every image of one page.

        Parameters
        ----------
        page_number : int
            1-based page number.

        Returns
        -------
        PageResult
            Names written, and the error that stopped the page if any.
        """
        result = PageResult(page_number)
        page = None
        textpage = None

        try:
            page = self._load_page(page_number)
            textpage = self._build_structured_page(page)

            img_index = 1
            for block in ImageBlock.from_textpage(textpage):
                logger.debug("page %d: %r", page_number, block)
                pix = block.to_pixmap()
                try:
                    name = image_name(page_number, img_index)
                    img_index += 1
                    write_png(pix, os.path.join(self.output_dir, name + IMAGE_EXTENSION))
                    result.names.append(name)
                    self.emit(name)
                finally:
                    pix = None
        except Exception as e:
            result.error = PageExtractionError(page_number, e)
        finally:
            textpage = None
            page = None

        return result

    def _load_page(self, page_number):
        """Load a page by its 1-based number."""
        logger.debug("loading page %d", page_number)
        return self.session.load_page(page_number - 1)

    def _build_structured_page(self, page):
        """Interpret the page's content, keeping images as blocks."""
        logger.debug("page %d bounds %s", page.number + 1, tuple(page.rect))
        return page.get_textpage(flags=fitz.TEXT_PRESERVE_IMAGES)
