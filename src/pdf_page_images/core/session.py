"""
Document session: owns the open document for the duration of a run.
"""

import logging

import fitz

from .constants import DEFAULT_PASSWORD
from .exceptions import AuthenticationError, DocumentOpenError

logger = logging.getLogger(__name__)


class DocumentSession:
    """
    Opens and authenticates a document and closes it on every exit path.

    Use it as a context manager::

        with DocumentSession("paper.pdf", password="secret") as session:
            print(session.page_count)
    """

    def __init__(self, input_path, password=DEFAULT_PASSWORD):
        self.input_path = input_path
        self.password = password
        self.doc = None

    def open(self):
        """
        Open the document and authenticate it if needed.

        Returns
        -------
        fitz.Document
            The open document.

        Raises
        ------
        DocumentOpenError
            If the document cannot be opened.
        AuthenticationError
            If the document needs a password and ``password`` is rejected.
        """
        try:
            doc = fitz.open(self.input_path)
        except Exception as e:
            raise DocumentOpenError(f"cannot open document {self.input_path}: {e}") from e

        if doc.needs_pass and not doc.authenticate(self.password):
            doc.close()
            raise AuthenticationError(f"cannot authenticate password for {self.input_path}")

        logger.debug("opened %s (%d pages)", self.input_path, doc.page_count)
        self.doc = doc
        return doc

    @property
    def page_count(self):
        return self.doc.page_count

    def load_page(self, index):
        """Load a page by its 0-based index."""
        return self.doc.load_page(index)

    def close(self):
        if self.doc is not None:
            self.doc.close()
            self.doc = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
