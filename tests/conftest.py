# conftest.py - shared fixtures
import json
import textwrap

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write a config.json next to the test and return its path."""

    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def write_transcript(tmp_path):
    """Write a dedented transcript and return its path."""

    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return str(path)

    return _write
