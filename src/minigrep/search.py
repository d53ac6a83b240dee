#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line matching for minigrep.

Contents are split into lines on ``"\\n"`` and ``"\\r\\n"``; the boundary is
not part of the line, a trailing newline does not produce an empty final line
and a final line without a newline is still searched. A lone ``"\\r"`` is
ordinary content.

Python strings are immutable, so the lines returned by :func:`search` and
:func:`search_case_insensitive` are copies of the corresponding slices of
``contents``. Callers that need positions in the original buffer can use
:func:`find_line_spans`, which returns offsets instead of text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineSpan:
    """Location of one line inside the searched contents.

    Attributes
    ----------
    line_number : int
        1-based line number
    start : int
        Offset of the first character of the line
    end : int
        Offset one past the last character, excluding the line boundary

    """

    line_number: int
    start: int
    end: int

    def text(self, contents: str) -> str:
        """Return the line's text from the contents it was found in."""
        return contents[self.start : self.end]


def _iter_bounds(contents: str) -> Iterator[tuple[int, int]]:
    start = 0
    length = len(contents)
    while start < length:
        newline = contents.find("\n", start)
        if newline == -1:
            yield start, length
            return
        end = newline
        if end > start and contents[end - 1] == "\r":
            end -= 1
        yield start, end
        start = newline + 1


def iter_lines(contents: str) -> Iterator[str]:
    """Yield the lines of ``contents`` without their line boundaries.

    Examples
    --------
    >>> list(iter_lines("one\\r\\ntwo\\nthree\\n"))
    ['one', 'two', 'three']

    """
    for start, end in _iter_bounds(contents):
        yield contents[start:end]


def find_line_spans(query: str, contents: str, case_sensitive: bool = True) -> list[LineSpan]:
    """Locate every line of ``contents`` that contains ``query``.

    Parameters
    ----------
    query : str
        Substring to look for; the empty string matches every line
    contents : str
        Full text to search
    case_sensitive : bool, default True
        When False, both the query and each line are lowercased before the
        containment test

    Returns
    -------
    list[LineSpan]
        One span per matching line, in file order

    """
    needle = query if case_sensitive else query.lower()
    spans: list[LineSpan] = []
    scanned = 0
    for line_number, (start, end) in enumerate(_iter_bounds(contents), start=1):
        scanned = line_number
        line = contents[start:end]
        if not case_sensitive:
            line = line.lower()
        if needle in line:
            spans.append(LineSpan(line_number=line_number, start=start, end=end))

    logger.debug(
        "Scanned %d lines for %r (case_sensitive=%s): %d matched", scanned, query, case_sensitive, len(spans)
    )
    return spans


def search(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``.

    Parameters
    ----------
    query : str
        Substring to look for
    contents : str
        Full text to search

    Returns
    -------
    list[str]
        Matching lines in file order, one entry per matching line

    Examples
    --------
    >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.")
    ['safe, fast, productive.']

    """
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``, ignoring case.

    The lowercased query is tested against each lowercased line. The returned
    lines keep their original casing.

    Examples
    --------
    >>> search_case_insensitive("rUsT", "Rust:\\nPick three.\\nTrust me.")
    ['Rust:', 'Trust me.']

    """
    lowered_query = query.lower()
    return [line for line in iter_lines(contents) if lowered_query in line.lower()]


def search_lines(query: str, contents: str, case_sensitive: bool = True) -> list[str]:
    """Dispatch to :func:`search` or :func:`search_case_insensitive`."""
    if case_sensitive:
        return search(query, contents)
    return search_case_insensitive(query, contents)


__all__ = [
    "LineSpan",
    "iter_lines",
    "find_line_spans",
    "search",
    "search_case_insensitive",
    "search_lines",
]
