#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Settings file discovery and loading for the minigrep CLI.

Settings can be kept in ``.minigrep.toml``, ``.minigrep.yaml``,
``.minigrep.yml``, ``.minigrep.json`` or in a ``[tool.minigrep]`` table of
``pyproject.toml``. The first one found walking up from the current directory
is used, unless a path is given explicitly.
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from minigrep.constants import PYPROJECT_SECTION, SETTINGS_FILENAMES
from minigrep.exceptions import SettingsError
from minigrep.options import SearchSettings

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.minigrep]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    SettingsError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise SettingsError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    tool = data.get("tool")
    if not isinstance(tool, dict):
        return {}
    section = tool.get(PYPROJECT_SECTION, {})
    if not isinstance(section, dict):
        raise SettingsError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(section).__name__}",
            str(pyproject_path),
        )
    return section


def find_settings_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a settings file by searching parent directories.

    Each directory is checked for the dedicated settings files first, then
    for a pyproject.toml with a non-empty ``[tool.minigrep]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        Path to the first settings file found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in SETTINGS_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                return candidate

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except SettingsError as e:
                # Unrelated broken pyproject files should not stop discovery
                logger.debug("Skipping %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_settings_file(settings_path: Path | str) -> Dict[str, Any]:
    """Load a settings mapping from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    settings_path : Path or str
        Path to the settings file

    Returns
    -------
    dict
        Settings mapping loaded from the file

    Raises
    ------
    SettingsError
        If the file is missing, unreadable, malformed, or not a mapping

    """
    settings_path = Path(settings_path)

    if not settings_path.is_file():
        raise SettingsError(f"Settings file does not exist: {settings_path}", str(settings_path))

    filename = settings_path.name.lower()
    ext = settings_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(settings_path)

    try:
        if ext == ".toml":
            with open(settings_path, "rb") as f:
                data = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(settings_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif ext == ".json":
            with open(settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise SettingsError(
                f"Unsupported settings file format: {ext}. Use .json, .toml, or .yaml", str(settings_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise SettingsError(f"Invalid settings file {settings_path}: {e}", str(settings_path), e) from e
    except OSError as e:
        raise SettingsError(f"Error reading settings file {settings_path}: {e}", str(settings_path), e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(
            f"Settings file {settings_path} must contain a mapping, got {type(data).__name__}", str(settings_path)
        )
    return data


def load_settings(settings_path: Path | str | None = None, discover: bool = True) -> SearchSettings:
    """Resolve the settings to use for a run.

    Parameters
    ----------
    settings_path : Path or str, optional
        Explicit settings file; takes precedence over discovery
    discover : bool, default True
        Search the current directory and its parents when no path is given

    Returns
    -------
    SearchSettings
        Settings from the file, or defaults when none is found

    Raises
    ------
    SettingsError
        If the settings file cannot be loaded or holds invalid values

    """
    path: Optional[Path]
    if settings_path is not None:
        path = Path(settings_path)
    elif discover:
        path = find_settings_in_parents()
    else:
        path = None

    if path is None:
        return SearchSettings()

    logger.debug("Loading settings from %s", path)
    data = load_settings_file(path)
    try:
        return SearchSettings.from_mapping(data)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"Invalid settings in {path}: {e}", str(path), e) from e


__all__ = ["find_settings_in_parents", "load_settings_file", "load_settings"]
