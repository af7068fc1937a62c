"""
Candidate filtering for a root word.

Given:
  - a pool of words (e.g., a dictionary word list)
  - the current root word
  - the words already accepted this round

Return:
  - the words that would pass every letter-level rule (length, not the root,
    not used, derivable). Dictionary validity is not checked here; the pool is
    assumed to be made of real words already.

The autoplayer and the terminal hint command use this to know how many words
are still out there.
"""

from typing import Iterable, List

from .rules import is_derivable, is_long_enough, is_not_root, normalize_submission


def filter_derivable(words: Iterable[str], root_word: str,
                     used: Iterable[str] = ()) -> List[str]:
    """
    Keep only words from `words` that can still be played against `root_word`.

    Args:
      words     : iterable of candidate words (any case, may carry whitespace)
      root_word : the round's root word
      used      : words already accepted this round

    Returns:
      List[str] of normalized candidates, order preserved, duplicates dropped.
    """
    root = normalize_submission(root_word)
    seen = {normalize_submission(u) for u in used}
    out: List[str] = []

    for w in words:
        w = normalize_submission(w)

        # Skip anything that isn't a clean alphabetic token
        if not w.isalpha() or w in seen:
            continue

        if is_long_enough(w) and is_not_root(w, root) and is_derivable(w, root):
            out.append(w)
            seen.add(w)

    return out
