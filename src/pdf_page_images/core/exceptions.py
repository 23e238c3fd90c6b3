"""Exception types raised (or returned) by the extraction pipeline."""


class DocumentOpenError(IOError):
    """The document could not be opened."""


class AuthenticationError(DocumentOpenError):
    """The document needs a password and the one supplied was rejected."""


class PageExtractionError(Exception):
    """
    Failure confined to a single page.

    Never raised out of the page extractor: it travels inside a
    ``PageResult`` and the driver decides what to do with it.

    Parameters
    ----------
    page_number : int
        1-based number of the page that failed.
    cause : Exception
        The underlying error.
    """

    def __init__(self, page_number, cause):
        super().__init__(f"failed to extract images from page {page_number}: {cause}")
        self.page_number = page_number
        self.cause = cause
