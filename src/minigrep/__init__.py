"""minigrep - print the lines of a file that contain a query string.

minigrep is a small implementation of ``grep``: it reads one file into memory,
keeps the lines that contain the query as a plain substring and prints them in
file order. Matching is case-sensitive unless the ``CASE_INSENSITIVE``
environment variable is present.

Examples
--------
Searching text directly:

    >>> from minigrep import search, search_case_insensitive
    >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.")
    ['safe, fast, productive.']
    >>> search_case_insensitive("rUsT", "Rust:\\nTrust me.")
    ['Rust:', 'Trust me.']

Running a search the way the CLI does:

    >>> import sys
    >>> from minigrep import Config, run
    >>> config = Config.from_args(sys.argv)  # doctest: +SKIP
    >>> run(config)  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from minigrep.config import Config, is_case_sensitive
from minigrep.exceptions import (
    ConfigError,
    FileReadError,
    MinigrepError,
    MissingFilenameError,
    MissingQueryError,
    RunError,
    SettingsError,
)
from minigrep.runner import run
from minigrep.search import (
    LineSpan,
    find_line_spans,
    iter_lines,
    search,
    search_case_insensitive,
    search_lines,
)
from minigrep.utils.io_utils import read_text_file

__all__ = [
    "__version__",
    "Config",
    "is_case_sensitive",
    "run",
    "read_text_file",
    "search",
    "search_case_insensitive",
    "search_lines",
    "find_line_spans",
    "iter_lines",
    "LineSpan",
    "MinigrepError",
    "ConfigError",
    "MissingQueryError",
    "MissingFilenameError",
    "RunError",
    "FileReadError",
    "SettingsError",
]
