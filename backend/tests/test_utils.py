import json

import pytest

from screener.config import settings
from screener.utils import skill_vocabulary
from screener.utils.skill_vocabulary import (
    DEFAULT_SKILL_VOCABULARY,
    get_vocabulary,
    normalize_vocabulary,
    reset_vocabulary,
)
from screener.utils.text_cleanup import normalize_text


@pytest.fixture
def vocabulary_file(monkeypatch, tmp_path):
    path = tmp_path / "skills.json"
    monkeypatch.setattr(settings, "skill_vocabulary_file", str(path))
    reset_vocabulary()
    yield path
    monkeypatch.undo()
    reset_vocabulary()


def test_default_vocabulary_is_lowercase_and_unique():
    assert normalize_vocabulary(DEFAULT_SKILL_VOCABULARY) == DEFAULT_SKILL_VOCABULARY


def test_normalize_vocabulary_keeps_sequence_order():
    assert normalize_vocabulary(["SQL", "python", "sql", "  "]) == ("sql", "python")


def test_normalize_vocabulary_sorts_sets():
    assert normalize_vocabulary({"sql", "Docker", "aws"}) == ("aws", "docker", "sql")


def test_vocabulary_file_override(vocabulary_file):
    vocabulary_file.write_text(json.dumps(["Rust", "Go", "rust"]))
    assert get_vocabulary() == ("rust", "go")


def test_vocabulary_file_missing_falls_back(vocabulary_file):
    assert get_vocabulary() == DEFAULT_SKILL_VOCABULARY


def test_vocabulary_file_wrong_shape_falls_back(vocabulary_file):
    vocabulary_file.write_text(json.dumps({"rust": []}))
    assert get_vocabulary() == DEFAULT_SKILL_VOCABULARY


def test_vocabulary_is_cached(vocabulary_file):
    vocabulary_file.write_text(json.dumps(["rust"]))
    assert get_vocabulary() == ("rust",)
    vocabulary_file.write_text(json.dumps(["go"]))
    assert skill_vocabulary.get_vocabulary() == ("rust",)


def test_normalize_text_replaces_typography():
    raw = "Mary O\u2019Brien \u2013 Developer\u2026\ufeff"
    assert normalize_text(raw) == "Mary O'Brien - Developer..."


def test_normalize_text_keeps_blank_lines_between_sections():
    raw = "  Jane Doe  \n\n\n\nSkills:\tPython (cid:12)\n"
    assert normalize_text(raw) == "Jane Doe\n\nSkills: Python"
