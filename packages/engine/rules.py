"""
Individual acceptance rules for a submitted word.

Each rule is a plain predicate over an already-normalized word. The pipeline in
`validation.py` evaluates them in a fixed order; they are exposed separately so
candidate filtering (`constraints.py`) and tests can reuse them.

Conventions:
  - words are compared lower-case with surrounding whitespace removed
  - derivability is a multiset check: letter order does not matter, but every
    repeated letter in the word needs a matching repeat in the root
"""

from collections import Counter
from typing import Iterable

# Words must be strictly longer than three letters.
MIN_WORD_LENGTH = 4

# Language tag passed to the dictionary oracle.
DEFAULT_LANGUAGE = "en"


def normalize_submission(raw: str) -> str:
    """Lower-case `raw` and strip leading/trailing whitespace and newlines."""
    return raw.lower().strip()


def is_long_enough(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH


def is_not_root(word: str, root_word: str) -> bool:
    return word != root_word


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_derivable(word: str, root_word: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root_word`.

    Each letter of `word` consumes one occurrence of that letter from the
    root's remaining pool; running out of a letter fails the check.

    Examples:
      is_derivable("silent", "listen") -> True
      is_derivable("tennis", "listen") -> False   (needs two 'n')
    """
    remaining = Counter(root_word)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def is_real_word(word: str, dictionary, language: str = DEFAULT_LANGUAGE) -> bool:
    """Ask the dictionary oracle whether `word` is a recognized word."""
    return bool(dictionary.is_recognized(word, language))
