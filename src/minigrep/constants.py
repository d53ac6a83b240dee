#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants shared across minigrep modules."""

# Presence of this variable (with any value, even empty) disables case-sensitive matching
CASE_INSENSITIVE_ENV_VAR = "CASE_INSENSITIVE"

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_NO_MATCHES_NOTICE = True

HEADER_TEMPLATE = "Searching for '{query}' in file '{file_path}'"
NO_MATCHES_MESSAGE = "No lines matched your query."

SETTINGS_FILENAMES = [".minigrep.toml", ".minigrep.yaml", ".minigrep.yml", ".minigrep.json"]
PYPROJECT_SECTION = "minigrep"
