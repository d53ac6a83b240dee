"""Pytest configuration and shared fixtures for the minigrep test suite."""

import os
from pathlib import Path

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will be skipped
    pass


POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "slow: Slow tests that start a subprocess")


@pytest.fixture(autouse=True)
def _no_case_insensitive_env(monkeypatch):
    """Keep the host's CASE_INSENSITIVE setting out of every test."""
    monkeypatch.delenv("CASE_INSENSITIVE", raising=False)


@pytest.fixture
def poem_text() -> str:
    """Provide the sample poem used across search tests."""
    return POEM


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """Write the sample poem to a temporary file.

    Returns
    -------
    Path
        Path to a UTF-8 file containing the poem

    """
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path
