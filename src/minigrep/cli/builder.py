#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and exit codes for the minigrep CLI.

The settings options (``--encoding``, ``--empty-notice``, ``--log-level`` and
``--log-file``) are generated from the field metadata of
:class:`minigrep.options.SearchSettings`. Each option stores into the field's
own name and defaults to ``None`` so that an unset flag never overrides a
settings file.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import fields
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Sequence

from minigrep.options import SearchSettings

EXIT_SUCCESS = 0
EXIT_ERROR = 1

POSITIONALS_DEST = "arguments"


def get_version() -> str:
    """Get the installed version of minigrep."""
    try:
        return version("minigrep")
    except PackageNotFoundError:
        return "unknown"


def snake_to_kebab(name: str) -> str:
    """Convert a field name to its CLI spelling."""
    return name.replace("_", "-")


def add_settings_arguments(groups: dict[str, Any]) -> list[str]:
    """Add one option per :class:`SearchSettings` field.

    Parameters
    ----------
    groups : dict[str, argparse._ArgumentGroup]
        Argument groups keyed by the ``cli_group`` metadata value

    Returns
    -------
    list[str]
        Field names that received an option

    """
    added = []
    for settings_field in fields(SearchSettings):
        metadata = dict(settings_field.metadata)
        cli_name = f"--{metadata.get('cli_name', snake_to_kebab(settings_field.name))}"
        kwargs: dict[str, Any] = {"dest": settings_field.name, "default": None}

        help_text = metadata.get("help", f"Configure {settings_field.name}")
        if settings_field.default is not None:
            help_text = f"{help_text} (default: {settings_field.default})"
        kwargs["help"] = help_text

        if isinstance(settings_field.default, bool):
            kwargs["action"] = argparse.BooleanOptionalAction
        else:
            if "choices" in metadata:
                kwargs["choices"] = metadata["choices"]
            if "type" in metadata:
                kwargs["type"] = metadata["type"]

        groups[metadata.get("cli_group", "settings")].add_argument(cli_name, **kwargs)
        added.append(settings_field.name)
    return added


def create_parser(prog: str = "minigrep") -> argparse.ArgumentParser:
    """Create the argument parser for ``minigrep``.

    The positional tokens are not interpreted by argparse; use
    :func:`parse_cli_args` to parse a command line. A missing query or file
    name is then reported by :meth:`minigrep.config.Config.from_args`.

    Parameters
    ----------
    prog : str, default "minigrep"
        Program name shown in usage messages

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Print the lines of a file that contain a query string.",
        epilog=(
            "Set the CASE_INSENSITIVE environment variable (to any value) for case-insensitive matching. "
            "Use '--' before the query if it is also a minigrep option, e.g. 'minigrep -- -v notes.txt'."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        POSITIONALS_DEST,
        nargs="*",
        metavar="ARG",
        help="The query, then the file to search; further arguments are ignored",
    )
    parser.add_argument("--version", "-V", action="version", version=f"{prog} {get_version()}")

    settings_group = parser.add_argument_group("settings")
    settings_group.add_argument("--config", help="Path to a settings file (.toml, .yaml, .json or pyproject.toml)")
    settings_group.add_argument("--no-config", action="store_true", help="Do not look for a settings file")

    logging_group = parser.add_argument_group("logging")
    add_settings_arguments({"settings": settings_group, "logging": logging_group})
    logging_group.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    logging_group.add_argument(
        "--trace", action="store_true", help="Enable debug logging with timestamps and logger names"
    )

    return parser


def split_cli_args(parser: argparse.ArgumentParser, args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate option tokens from positional tokens, keeping their order.

    Only the parser's own option strings (and ``--option=value``) are taken as
    options, together with the value that follows an option taking one. Any
    other token, including unknown ones starting with ``-``, is positional.
    Every token after the first ``--`` is positional.

    Returns
    -------
    tuple[list[str], list[str]]
        ``(option_tokens, positional_tokens)``

    """
    known = parser._option_string_actions
    option_tokens: list[str] = []
    positionals: list[str] = []

    tokens = iter(args)
    for token in tokens:
        if token == "--":
            positionals.extend(tokens)
            break

        name, has_value, _ = token.partition("=")
        action = known.get(name) if token.startswith("--") else known.get(token)
        if action is None:
            positionals.append(token)
            continue

        option_tokens.append(token)
        if action.nargs != 0 and not has_value:
            value = next(tokens, None)
            if value is not None:
                option_tokens.append(value)

    return option_tokens, positionals


def parse_cli_args(parser: argparse.ArgumentParser, args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse a command line; positional tokens land raw in ``arguments``.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser from :func:`create_parser`
    args : sequence of str, optional
        Arguments without the program name, defaults to ``sys.argv[1:]``

    Returns
    -------
    argparse.Namespace
        Parsed options with the positional tokens under ``arguments``

    """
    if args is None:
        args = sys.argv[1:]

    option_tokens, positionals = split_cli_args(parser, args)
    parsed = parser.parse_args(option_tokens)
    setattr(parsed, POSITIONALS_DEST, positionals)
    return parsed


__all__ = [
    "create_parser",
    "parse_cli_args",
    "split_cli_args",
    "add_settings_arguments",
    "get_version",
    "EXIT_SUCCESS",
    "EXIT_ERROR",
]
