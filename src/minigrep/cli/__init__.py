#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for minigrep.

Print every line of a file that contains a query string.

Environment Variable Support
----------------------------
If ``CASE_INSENSITIVE`` is set, to any value including the empty string,
matching ignores case. Its value is never parsed.

Examples
--------
Basic search::

    $ minigrep to poem.txt

Case-insensitive search::

    $ CASE_INSENSITIVE=1 minigrep to poem.txt

Query that is also a minigrep option::

    $ minigrep -- -v notes.txt

Any other query starting with a dash is taken as is::

    $ minigrep -x notes.txt

Read a Latin-1 file with debug logging::

    $ minigrep --encoding latin-1 --verbose café menu.txt

Settings files
--------------
Defaults for ``encoding``, ``log_level``, ``log_file`` and
``no_matches_notice`` can be kept in ``.minigrep.toml`` (or ``.yaml``,
``.json``, or ``[tool.minigrep]`` in ``pyproject.toml``). CLI flags override
settings files.

"""

import argparse
import logging
import sys
from dataclasses import fields
from functools import partial
from typing import Any

from minigrep.cli.builder import EXIT_ERROR, EXIT_SUCCESS, create_parser, parse_cli_args
from minigrep.cli.settings import load_settings
from minigrep.config import Config
from minigrep.exceptions import ConfigError, RunError, SettingsError
from minigrep.logging_utils import configure_logging
from minigrep.options import SearchSettings
from minigrep.runner import run
from minigrep.utils.io_utils import read_text_file

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _apply_cli_overrides(settings: SearchSettings, parsed_args: argparse.Namespace) -> SearchSettings:
    """Overlay CLI flags on settings loaded from a file.

    Raises
    ------
    ValueError
        If a flag holds an invalid value

    """
    overrides: dict[str, Any] = {}
    for settings_field in fields(SearchSettings):
        value = getattr(parsed_args, settings_field.name, None)
        if value is not None:
            overrides[settings_field.name] = value

    if not overrides:
        return settings
    return settings.create_updated(**overrides)


def _setup_logging_level(settings: SearchSettings, parsed_args: argparse.Namespace) -> None:
    """Set up logging based on settings and command-line flags.

    ``--trace`` takes precedence, then ``--verbose``, then the log level.
    """
    if parsed_args.trace or parsed_args.verbose:
        log_level: int | str = logging.DEBUG
    else:
        log_level = settings.log_level

    configure_logging(log_level, log_file=settings.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the minigrep CLI.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments without the program name, defaults to
        ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parse_cli_args(parser, args)

    try:
        config = Config.from_args([parser.prog, *parsed_args.arguments])
    except ConfigError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        settings = load_settings(parsed_args.config, discover=not parsed_args.no_config)
        settings = _apply_cli_overrides(settings, parsed_args)
    except (SettingsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    _setup_logging_level(settings, parsed_args)
    logger.debug("Searching with %r and %r", config, settings)

    try:
        run(
            config,
            read_file=partial(read_text_file, encoding=settings.encoding),
            no_matches_notice=settings.no_matches_notice,
        )
    except RunError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
