"""
ImageBlock class wrapping the image blocks of a structured page.
"""

import fitz

from .constants import BLOCK_TYPE_IMAGE


class ImageBlock:
    """
    One embedded image surfaced by the structured text interpreter.

    Wraps the dictionary PyMuPDF produces for a block of type 1 when the
    page is interpreted with ``TEXT_PRESERVE_IMAGES``. Blocks keep the order
    in which the images are drawn by the page's content stream.
    """

    def __init__(self, block):
        """
        Initialize ImageBlock from a structured text block.

        Parameters
        ----------
        block : dict
            Image block from ``TextPage.extractDICT()``.
        """
        self.number = block.get('number')
        self.bbox = fitz.Rect(block['bbox'])
        self.width = block.get('width')
        self.height = block.get('height')
        self.ext = block.get('ext')
        self.colorspace = block.get('colorspace')
        self.image = block.get('image')

    @classmethod
    def from_textpage(cls, textpage):
        """
        Yield the image blocks of a structured page in content order.

        Parameters
        ----------
        textpage : fitz.TextPage
            Structured page built with ``TEXT_PRESERVE_IMAGES``.
        """
        for block in textpage.extractDICT()['blocks']:
            if block['type'] == BLOCK_TYPE_IMAGE:
                yield cls(block)

    def to_pixmap(self):
        """
        Rasterize the image at its native resolution.

        Returns
        -------
        fitz.Pixmap
            Decoded pixels, in the image's own colorspace.

        Raises
        ------
        ValueError
            If the block carries no image data.
        """
        if not self.image:
            raise ValueError(f"image block {self.number} has no image data")
        return fitz.Pixmap(self.image)

    def __repr__(self):
        return (f"ImageBlock(number={self.number}, "
                f"size=({self.width}x{self.height}), "
                f"ext={self.ext}, colorspace={self.colorspace}, bbox={tuple(self.bbox)})")
