"""
Shared test fixtures for the mailstrip test suite.
"""
from pathlib import Path

import pytest

from mailstrip.parsing.pipeline import parse

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ==========================================================================
# Fixture files
# ==========================================================================

@pytest.fixture
def load_fixture():
    """Return a loader: load_fixture("email_1_1") -> body text."""
    def _load(name: str) -> str:
        return (FIXTURES_DIR / f"{name}.txt").read_text(encoding="utf-8")
    return _load


@pytest.fixture
def fixture_path():
    def _path(name: str) -> Path:
        return FIXTURES_DIR / f"{name}.txt"
    return _path


# ==========================================================================
# Inline bodies
# ==========================================================================

@pytest.fixture
def top_post_body():
    return (
        "Yeah, that works!\n"
        "\n"
        "-Bob\n"
        "\n"
        "On 01/03/11 7:07 PM, Alice wrote:\n"
        "> Hi Bob,\n"
        ">\n"
        "> can I push the latest release later tonight?\n"
    )


@pytest.fixture
def plain_body():
    return "Hi team,\n\nThe build is green again.\nShipping tomorrow.\n"


# ==========================================================================
# Parsed emails
# ==========================================================================

@pytest.fixture
def parsed_top_post(top_post_body):
    return parse(top_post_body)
