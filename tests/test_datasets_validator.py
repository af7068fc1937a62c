from pathlib import Path

import pytest
from packages.datasets import (
    DEFAULT_START_WORDS, FileWordSource, WordSourceError, pretty_summary, validate_start_words,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_start_words_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["silkworm", "mountain", "absolute"])

    rep = validate_start_words(str(start))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_start_words_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    # 'cat' too short to hide a playable word, 'Mountain' not lowercase, '???' invalid chars
    start.write_text("silkworm\ncat\nMountain\n???\nsilkworm\n", encoding="utf-8")

    rep = validate_start_words(str(start))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_start_words_missing_file(tmp_path: Path):
    rep = validate_start_words(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_bundled_start_words_pass():
    rep = validate_start_words(str(DEFAULT_START_WORDS))
    assert rep["passed"] is True, rep["issues"]
    assert rep["count"] == rep["unique_count"]


def test_file_word_source_cleans_lines(tmp_path: Path):
    start = tmp_path / "start.txt"
    start.write_text("Silkworm\r\n\n  mountain \n", encoding="utf-8")
    assert FileWordSource(start).load() == ["silkworm", "mountain"]


def test_file_word_source_missing_raises(tmp_path: Path):
    with pytest.raises(WordSourceError):
        FileWordSource(tmp_path / "missing.txt").load()


def test_roots_must_be_longer_than_min_length(tmp_path: Path):
    start = tmp_path / "start.txt"
    _write(start, ["stop", "silkworm"])  # 'stop' only yields same-length anagrams

    assert validate_start_words(str(start))["invalid_lines"] == 1
    assert validate_start_words(str(start), min_length=3)["passed"] is True
