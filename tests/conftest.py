import json
import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so the cli/core/adapters packages import without install
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from core.domain.models import PersonRecord  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep a project .env and LIVELIEST_* variables out of tests."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("LIVELIEST_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_person():
    """Build a raw record using the JSON wire keys."""

    def _make(name, birth, death):
        return PersonRecord.model_validate({"name": name, "birthYear": birth, "deathYear": death})

    return _make


@pytest.fixture
def alice_and_bob(make_person):
    return [make_person("Alice", 1950, 1960), make_person("Bob", 1955, 1965)]


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON payload (or raw text) to a temporary file and return its path."""

    def _write(payload, name="people.json"):
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
