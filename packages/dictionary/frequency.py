"""
Frequency-based dictionary backed by `wordfreq`.

A word counts as recognized when its Zipf frequency in the requested language
is at least `min_zipf`. Zipf 0 means wordfreq has never seen the token; common
English words sit between 3 and 7. The default threshold keeps rare but real
words (e.g. "silk", "worm", "mows") while dropping most typos.
"""

from __future__ import annotations

from wordfreq import zipf_frequency

from .base import DEFAULT_LANGUAGE, DictionaryOracle, register

DEFAULT_MIN_ZIPF = 1.5


@register
class WordfreqDictionary(DictionaryOracle):
    id = "wordfreq"
    name = "wordfreq (Zipf threshold)"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = float(min_zipf)

    def frequency(self, word: str, language: str = DEFAULT_LANGUAGE) -> float:
        return zipf_frequency(word, language)

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        w = word.strip().lower()
        # wordfreq tokenizes punctuation and digits too; only plain words count
        if not w.isalpha():
            return False
        return self.frequency(w, language) >= self.min_zipf
