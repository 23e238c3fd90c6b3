"""
Page selection parsing.

A selection expression is a comma separated list of page numbers and
``start-end`` ranges, e.g. ``"1,3-5,9-7"``. ``N`` stands for the last page
and negative numbers count back from it (``-1`` is the last page). Ranges
may run backwards. Numbers outside the document are clamped into it.
"""

import logging
import re

from .constants import DEFAULT_PAGE_RANGE, LAST_PAGE_TOKEN, PAGE_RANGE_CHARS

logger = logging.getLogger(__name__)

_BOUND = r"(N|-?\d+)"
_TOKEN_RE = re.compile(rf"^\s*{_BOUND}\s*(?:-\s*{_BOUND})?\s*$")


def is_page_range(text):
    """Return True if ``text`` only holds page-range characters."""
    return bool(text) and all(char in PAGE_RANGE_CHARS for char in text)


def resolve_selection(text=None):
    """
    Return the selection expression to use for ``text``.

    Anything that does not look like a page range falls back to all pages.
    """
    if text is None:
        return DEFAULT_PAGE_RANGE
    if not is_page_range(text):
        logger.warning("'%s' is not a page range, extracting all pages", text)
        return DEFAULT_PAGE_RANGE
    return text


def _resolve_bound(bound, page_count):
    if bound == LAST_PAGE_TOKEN:
        value = page_count
    else:
        value = int(bound)
        if value < 0:
            value = page_count + 1 + value
    return min(max(value, 1), page_count)


def _parse_token(token, page_count):
    match = _TOKEN_RE.match(token)
    if match is None:
        return None
    start = _resolve_bound(match.group(1), page_count)
    end = start if match.group(2) is None else _resolve_bound(match.group(2), page_count)
    return start, end


def parse_next(expression, page_count):
    """
    Parse the next token of a selection expression.

    Parameters
    ----------
    expression : str
        Unconsumed suffix of the selection expression.
    page_count : int
        Number of pages in the document.

    Returns
    -------
    tuple or None
        ``(start, end, remainder)`` where ``start > end`` means a descending
        run and ``remainder`` is what is left to parse, or None once the
        expression is exhausted.
    """
    if page_count < 1:
        return None

    while expression:
        token, _, expression = expression.partition(',')
        if not token.strip():
            continue

        bounds = _parse_token(token, page_count)
        if bounds is None:
            logger.warning("skipping invalid page range '%s'", token)
            continue

        return bounds[0], bounds[1], expression

    return None


def iter_page_ranges(expression, page_count):
    """Yield ``(start, end)`` pairs for every valid token of ``expression``."""
    while True:
        parsed = parse_next(expression, page_count)
        if parsed is None:
            return
        start, end, expression = parsed
        yield start, end


def iter_page_numbers(start, end):
    """Iterate from ``start`` to ``end`` inclusive, in either direction."""
    if start <= end:
        return iter(range(start, end + 1))
    return iter(range(start, end - 1, -1))
