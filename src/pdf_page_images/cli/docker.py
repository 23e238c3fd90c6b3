"""
Environment-driven entry point for Docker and batch deployments.
"""

import logging
import os
import sys

from pdf_page_images.core import extract_document
from pdf_page_images.core.constants import DEFAULT_ENV_OUTPUT_DIR, DEFAULT_PASSWORD
from pdf_page_images.cli.extract_images import configure_logging

logger = logging.getLogger(__name__)


def extract_with_env():
    """
    Extract images using environment variables.

    Supports Docker environment variables:
    - INPUT_PATH: Path to the document (required)
    - OUTPUT_PATH: Output directory (default: /OUTPUT)
    - PAGES: Page selection (default: all pages)
    - PDF_PASSWORD: Document password (default: empty)

    Returns
    -------
    int
        Process exit status.
    """
    input_path = os.environ.get('INPUT_PATH')
    output_path = os.environ.get('OUTPUT_PATH', DEFAULT_ENV_OUTPUT_DIR)
    pages = os.environ.get('PAGES') or None
    password = os.environ.get('PDF_PASSWORD', DEFAULT_PASSWORD)

    if not input_path:
        logger.error("INPUT_PATH environment variable not set")
        return 1

    if not os.path.exists(input_path):
        logger.error("Document not found: %s", input_path)
        return 1

    logger.info("Extracting images from %s into %s", input_path, output_path)
    return extract_document(input_path, pages=pages, output_dir=output_path, password=password)


def main():
    """Entry point for the environment-driven CLI."""
    configure_logging(verbose=bool(os.environ.get('VERBOSE')))
    sys.exit(extract_with_env())


if __name__ == "__main__":
    main()
