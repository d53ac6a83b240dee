#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Search configuration built from command-line arguments and the environment.

A :class:`Config` holds the three inputs of a search: the query, the file to
search and whether matching is case-sensitive. It is immutable once built.

The case-sensitivity flag is derived from the *presence* of the
``CASE_INSENSITIVE`` environment variable, not from its value::

    $ minigrep to poem.txt                     # case-sensitive
    $ CASE_INSENSITIVE=1 minigrep to poem.txt  # case-insensitive
    $ CASE_INSENSITIVE=0 minigrep to poem.txt  # still case-insensitive
    $ CASE_INSENSITIVE= minigrep to poem.txt   # still case-insensitive

"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Mapping

from minigrep.constants import CASE_INSENSITIVE_ENV_VAR
from minigrep.exceptions import MissingFilenameError, MissingQueryError

logger = logging.getLogger(__name__)


def is_case_sensitive(env: Mapping[str, str] | None = None) -> bool:
    """Return False when ``CASE_INSENSITIVE`` is present in ``env``.

    Parameters
    ----------
    env : Mapping[str, str], optional
        Environment to inspect, defaults to ``os.environ``

    Returns
    -------
    bool
        True unless the variable is set, whatever its value

    """
    if env is None:
        env = os.environ
    return CASE_INSENSITIVE_ENV_VAR not in env


@dataclass(frozen=True)
class Config:
    """A fully valid search request.

    Parameters
    ----------
    query : str
        The substring to search for
    file_path : str
        The file to search within
    case_sensitive : bool, default True
        Whether matching respects case

    """

    query: str
    file_path: str
    case_sensitive: bool = True

    @property
    def filename(self) -> str:
        """Alias for :attr:`file_path`."""
        return self.file_path

    @classmethod
    def from_args(cls, args: Iterable[str], env: Mapping[str, str] | None = None) -> Config:
        """Build a config from raw arguments, as found in ``sys.argv``.

        The first token is the program name and is always skipped. The next
        two tokens are the query and the file path; anything after them is
        ignored. The file is not checked for existence here.

        Parameters
        ----------
        args : Iterable[str]
            Raw argument tokens, program name first
        env : Mapping[str, str], optional
            Environment used for the ``CASE_INSENSITIVE`` lookup, defaults
            to ``os.environ``

        Returns
        -------
        Config
            The validated configuration

        Raises
        ------
        MissingQueryError
            If no query token follows the program name
        MissingFilenameError
            If no file path token follows the query

        Examples
        --------
        >>> Config.from_args(["minigrep", "duct", "poem.txt"], env={})
        Config(query='duct', file_path='poem.txt', case_sensitive=True)

        """
        tokens = iter(args)
        next(tokens, None)

        query = next(tokens, None)
        if query is None:
            raise MissingQueryError()

        file_path = next(tokens, None)
        if file_path is None:
            raise MissingFilenameError()

        config = cls(query=query, file_path=file_path, case_sensitive=is_case_sensitive(env))
        logger.debug("Built config: %r", config)
        return config


__all__ = ["Config", "is_case_sensitive"]
