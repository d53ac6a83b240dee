#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/minigrep/utils/io_utils.py
"""I/O utilities for reading the file to search.

The whole file is read into memory and decoded strictly; every failure is
reported as a single :class:`~minigrep.exceptions.FileReadError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from minigrep.constants import DEFAULT_ENCODING
from minigrep.exceptions import FileReadError

logger = logging.getLogger(__name__)


def read_text_file(file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> str:
    """Read the full contents of a text file.

    Parameters
    ----------
    file_path : str or Path
        File to read
    encoding : str, default "utf-8"
        Encoding used to decode the file's bytes

    Returns
    -------
    str
        Decoded file contents, line endings untouched

    Raises
    ------
    FileReadError
        If the file does not exist, cannot be opened, is a directory, or its
        bytes are not valid in ``encoding``

    """
    path = Path(file_path)
    try:
        data = path.read_bytes()
        text = data.decode(encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.debug("Failed to read %s: %s", path, e)
        raise FileReadError(str(file_path), original_error=e) from e

    logger.debug("Read %d bytes from %s as %s", len(data), path, encoding)
    return text
