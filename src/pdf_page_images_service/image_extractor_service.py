"""
Service layer for page image extraction.

Provides a clean API for integration with Docker and other services.
"""

import logging
import os

from pdf_page_images.core import DocumentSession, ExtractionDriver
from pdf_page_images.core.constants import DEFAULT_PASSWORD, IMAGE_EXTENSION
from pdf_page_images.core.driver import prepare_output_dir

logger = logging.getLogger(__name__)


class ImageExtractorService:
    """
    Service wrapper for page image extraction.

    Returns the paths of the images written instead of printing their names.
    """

    def __init__(self, password=DEFAULT_PASSWORD):
        """
        Initialize the service.

        Parameters
        ----------
        password : str, optional
            Password used for protected documents.
        """
        self.password = password

    def extract_images(self, pdf_path, output_folder, pages=None):
        """
        Extract images from a single document.

        Parameters
        ----------
        pdf_path : str
            Path to the document.
        output_folder : str
            Output folder where extracted images will be saved.
        pages : str, optional
            Page selection. Defaults to all pages.

        Returns
        -------
        list
            Absolute paths of the extracted images, in extraction order.

        Raises
        ------
        IOError
            If the document is missing or cannot be opened or authenticated.
        """
        if not os.path.isfile(pdf_path):
            raise IOError(f"PDF file not found: {pdf_path}")

        if prepare_output_dir(output_folder):
            logger.debug("writing images to %s", output_folder)

        names = []
        with DocumentSession(pdf_path, password=self.password) as session:
            ExtractionDriver(session, output_dir=output_folder, emit=names.append).run(pages)

        return [
            os.path.abspath(os.path.join(output_folder, name + IMAGE_EXTENSION))
            for name in names
        ]

    def extract_images_batch(self, pdf_list, output_folder, pages=None):
        """
        Extract images from multiple documents.

        Parameters
        ----------
        pdf_list : list
            List of document paths.
        output_folder : str
            Output folder; each document gets a subfolder named after it.
        pages : str, optional
            Page selection applied to every document.

        Returns
        -------
        dict
            Dictionary mapping document paths to lists of extracted image paths.
        """
        results = {}

        for pdf_path in pdf_list:
            pdf_id = os.path.splitext(os.path.basename(pdf_path))[0]
            pdf_output_dir = os.path.join(output_folder, pdf_id)
            try:
                results[pdf_path] = self.extract_images(pdf_path, pdf_output_dir, pages)
            except IOError as e:
                logger.error("Error processing %s: %s", pdf_path, e)
                results[pdf_path] = []

        return results
