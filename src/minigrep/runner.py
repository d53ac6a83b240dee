#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run a configured search and write its results.

This is the functional entry point of minigrep: read the file named by a
:class:`~minigrep.config.Config`, search it, and print a header followed by the
matching lines.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from minigrep.config import Config
from minigrep.constants import HEADER_TEMPLATE, NO_MATCHES_MESSAGE
from minigrep.exceptions import FileReadError, RunError
from minigrep.search import search, search_case_insensitive
from minigrep.utils.io_utils import read_text_file

logger = logging.getLogger(__name__)

FileReader = Callable[[str], str]


def run(
    config: Config,
    *,
    read_file: FileReader = read_text_file,
    out: TextIO | None = None,
    no_matches_notice: bool = True,
) -> None:
    """Search the configured file and write the matching lines.

    Parameters
    ----------
    config : Config
        The validated search request
    read_file : callable, default read_text_file
        Returns the full contents of the file at the given path. Failures must
        be raised as exceptions; they are reported as :class:`FileReadError`.
    out : TextIO, optional
        Output stream, defaults to ``sys.stdout``
    no_matches_notice : bool, default True
        Print "No lines matched your query." when nothing matches. When
        False, an empty search prints only the header.

    Raises
    ------
    FileReadError
        If the file could not be read. Nothing is written in that case.

    Examples
    --------
    >>> config = Config(query="duct", file_path="poem.txt")
    >>> run(config)  # doctest: +SKIP
    Searching for 'duct' in file 'poem.txt'
    <BLANKLINE>
    safe, fast, productive.

    """
    if out is None:
        out = sys.stdout

    try:
        contents = read_file(config.file_path)
    except RunError:
        raise
    except Exception as e:
        raise FileReadError(config.file_path, original_error=e) from e

    if config.case_sensitive:
        results = search(config.query, contents)
    else:
        results = search_case_insensitive(config.query, contents)
    logger.info("Found %d matching line(s) in %s", len(results), config.file_path)

    print(HEADER_TEMPLATE.format(query=config.query, file_path=config.file_path), file=out)
    print(file=out)

    if not results:
        if no_matches_notice:
            print(NO_MATCHES_MESSAGE, file=out)
        return

    for line in results:
        print(line, file=out)


__all__ = ["run", "FileReader"]
