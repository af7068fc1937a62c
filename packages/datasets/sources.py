"""
Word sources: where candidate root words come from.

A source only has to provide `load() -> list[str]`. The game picks one entry
at random each time a new round starts, so `load()` is called once per
new-game action and reads the whole list into memory.

`FileWordSource` wraps every I/O failure in `WordSourceError`; the game state
decides whether that is recoverable (fallback word) or fatal.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .io import read_lines

logger = logging.getLogger(__name__)

# Bundled list of start words (one per line).
DEFAULT_START_WORDS = Path(__file__).resolve().parent / "data" / "start.txt"


class WordSourceError(RuntimeError):
    """The word source could not supply any root word."""


def _clean(lines: Iterable[str]) -> List[str]:
    return [ln.strip().lower() for ln in lines if ln.strip()]


class StaticWordSource:
    """In-memory source; handy for tests and for a fixed `--root` word."""

    def __init__(self, words: Iterable[str]):
        self._words = list(words)

    def load(self) -> List[str]:
        return _clean(self._words)


class FileWordSource:
    """Newline-separated text file, read fully on every `load()`."""

    def __init__(self, path: Path | str = DEFAULT_START_WORDS):
        self.path = Path(path)

    def load(self) -> List[str]:
        try:
            lines = read_lines(self.path)
        except (OSError, UnicodeDecodeError) as e:
            raise WordSourceError(f"could not read word source {self.path}: {e}") from e
        words = _clean(lines)
        logger.debug(f"[word-source] path={self.path} words={len(words)}")
        return words
