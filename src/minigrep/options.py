#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Ambient settings for the minigrep CLI.

These settings never change what a search matches. They control how the file
is decoded, how the run is logged and whether an empty result is announced.
"""

from __future__ import annotations

import codecs
import logging
import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from minigrep.constants import DEFAULT_ENCODING, DEFAULT_LOG_LEVEL, DEFAULT_NO_MATCHES_NOTICE

logger = logging.getLogger(__name__)

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class SearchSettings(CloneFrozenMixin):
    """Settings read from settings files and CLI flags."""

    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={"help": "Text encoding of the searched file", "cli_group": "settings"},
    )
    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        metadata={"help": "Logging level", "choices": LOG_LEVEL_CHOICES, "type": str.upper, "cli_group": "logging"},
    )
    log_file: str | None = field(
        default=None,
        metadata={"help": "Also write log records to this file", "cli_group": "logging"},
    )
    no_matches_notice: bool = field(
        default=DEFAULT_NO_MATCHES_NOTICE,
        metadata={
            "help": "Print a notice when no line matches the query",
            "cli_name": "empty-notice",
            "cli_group": "settings",
        },
    )

    def __post_init__(self) -> None:
        """Validate field values at construction time.

        Raises
        ------
        ValueError
            If the encoding is unknown, the log level is not a level name, or
            a flag has the wrong type.

        """
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ValueError("encoding must be a non-empty string")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from e
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVEL_CHOICES:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVEL_CHOICES)}, got {self.log_level!r}")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError("log_file must be a string path")
        if not isinstance(self.no_matches_notice, bool):
            raise ValueError("no_matches_notice must be true or false")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SearchSettings:
        """Build settings from a loaded settings-file mapping.

        Keys are matched with hyphens treated as underscores; unknown keys are
        skipped.

        Raises
        ------
        ValueError
            If a known key holds an invalid value

        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                logger.debug("Ignoring unknown settings key: %s", raw_key)
                continue
            values[key] = value
        return cls(**values)


__all__ = ["CloneFrozenMixin", "SearchSettings", "LOG_LEVEL_CHOICES"]
