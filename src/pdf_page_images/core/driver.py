"""
Run-level orchestration: page selection, page loop and document lifetime.
"""

import logging
import os

from .constants import DEFAULT_OUTPUT_DIR, DEFAULT_PASSWORD
from .exceptions import DocumentOpenError
from .extractor import PageImageExtractor, emit_name
from .page_range import iter_page_numbers, iter_page_ranges, resolve_selection
from .session import DocumentSession

logger = logging.getLogger(__name__)


def prepare_output_dir(output_dir):
    """
    Create the output directory if it does not exist.

    Failure is only a warning: pages will fail one by one when they try to
    save into an unusable directory.

    Returns
    -------
    bool
        True if the directory exists afterwards.
    """
    try:
        os.makedirs(output_dir, exist_ok=True)
    except OSError as e:
        logger.warning("Failed to create output dir: %s (%s)", output_dir, e)
        return False
    return True


class ExtractionDriver:
    """
    Walks a page selection and extracts the images of every selected page.

    Pages are processed one at a time, in selection order. A page that fails
    is reported as a warning and the run moves on to the next one.
    """

    def __init__(self, session, output_dir=DEFAULT_OUTPUT_DIR, emit=emit_name):
        """
        Initialize ExtractionDriver.

        Parameters
        ----------
        session : DocumentSession
            Open session; the driver does not close it.
        output_dir : str, optional
            Directory the PNG files are written to.
        emit : callable, optional
            Called with each image name as soon as it is saved.
        """
        self.session = session
        self.extractor = PageImageExtractor(session, output_dir=output_dir, emit=emit)

    def iter_pages(self, expression=None):
        """Yield the 1-based page numbers selected by ``expression``."""
        expression = resolve_selection(expression)
        for start, end in iter_page_ranges(expression, self.session.page_count):
            yield from iter_page_numbers(start, end)

    def run(self, expression=None):
        """
        Extract the images of every page selected by ``expression``.

        Parameters
        ----------
        expression : str, optional
            Page selection. Defaults to all pages.

        Returns
        -------
        list
            One PageResult per visited page, in visiting order.
        """
        results = []
        for page_number in self.iter_pages(expression):
            result = self.extractor.extract(page_number)
            if not result.ok:
                logger.warning("%s", result.error)
            results.append(result)
        return results


def extract_document(input_path, pages=None, output_dir=DEFAULT_OUTPUT_DIR,
                     password=DEFAULT_PASSWORD, emit=emit_name):
    """
    Extract the images of the selected pages of one document.

    Parameters
    ----------
    input_path : str
        Path to the document.
    pages : str, optional
        Page selection. Defaults to all pages.
    output_dir : str, optional
        Directory the PNG files are written to.
    password : str, optional
        Document password.
    emit : callable, optional
        Called with each image name as soon as it is saved.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 if the document could not be
        opened or authenticated.
    """
    if prepare_output_dir(output_dir):
        logger.debug("writing images to %s", output_dir)

    try:
        with DocumentSession(input_path, password=password) as session:
            ExtractionDriver(session, output_dir=output_dir, emit=emit).run(pages)
    except DocumentOpenError as e:
        logger.error("%s", e)
        return 1

    return 0
