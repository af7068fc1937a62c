"""
Static word-list dictionary.

Backed by an in-memory set, optionally loaded from a one-word-per-line file
(see `script/fetch_wordlist.py`). Membership is case-insensitive.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable

from packages.datasets.io import read_lines
from .base import DEFAULT_LANGUAGE, DictionaryOracle, register

logger = logging.getLogger(__name__)


@register
class WordListDictionary(DictionaryOracle):
    id = "wordlist"
    name = "Word list"

    def __init__(self, words: Iterable[str] = (), language: str = DEFAULT_LANGUAGE):
        self.language = language
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in words if w.strip()
        )

    @classmethod
    def from_file(cls, path: Path | str, language: str = DEFAULT_LANGUAGE) -> "WordListDictionary":
        words = read_lines(path)
        d = cls(words, language=language)
        logger.info(f"[dictionary] loaded path={path} words={len(d)}")
        return d

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._words

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word or language != self.language:
            return False
        return word in self
