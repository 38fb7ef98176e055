"""Shared pytest fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def read_fixture():
    """Return a loader for captured tool output under tests/fixtures/."""
    def _read(*parts: str) -> str:
        # newline='' keeps CRLF fixtures byte-for-byte
        with open(FIXTURES_DIR.joinpath(*parts), encoding='utf-8', newline='') as f:
            return f.read()
    return _read
