"""Pytest configuration and shared fixtures for the md2atlassian test suite."""

import logging
import os
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers after code that calls configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def sample_markdown() -> str:
    """Markdown document touching most block constructs."""
    return (
        "# Project\n"
        "\n"
        "Intro with *emphasis*, **strong** and `code`.\n"
        "\n"
        "## Install\n"
        "\n"
        "```console\n"
        "$ pip install project\n"
        "```\n"
        "\n"
        "- one\n"
        "- two\n"
        "\n"
        "<details>\n"
        "<summary>More</summary>\n"
        "\n"
        "Hidden **markdown**\n"
        "</details>\n"
    )
