"""
Submission validation pipeline.

This module answers the question: "May this word be added to the round?"
A submission is accepted iff, in this order:
  1) it is at least four letters long
  2) it is not the root word itself
  3) it has not been accepted already this round
  4) it can be spelled from the root word's letters
  5) the dictionary oracle recognizes it

Evaluation stops at the first failing rule so the player sees exactly one
reason. The pipeline never mutates the round; recording an accepted word is
the caller's job (see `packages.game`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ErrorKind, describe
from .rules import (
    DEFAULT_LANGUAGE,
    is_derivable,
    is_long_enough,
    is_not_root,
    is_original,
    is_real_word,
    normalize_submission,
)


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one submission."""
    accepted: bool
    word: str                          # normalized submission
    kind: Optional[ErrorKind] = None   # None when accepted
    title: str = ""
    message: str = ""

    @classmethod
    def ok(cls, word: str) -> "ValidationOutcome":
        return cls(accepted=True, word=word)

    @classmethod
    def rejected(cls, word: str, kind: ErrorKind, root_word: str) -> "ValidationOutcome":
        title, message = describe(kind, root_word)
        return cls(accepted=False, word=word, kind=kind, title=title, message=message)


def validate_word(word: str, game_round, dictionary,
                  language: str = DEFAULT_LANGUAGE) -> ValidationOutcome:
    """
    Validate `word` against `game_round` and return the outcome.

    Args:
      word       : raw or normalized submission (normalized here again)
      game_round : object exposing `root_word` and `used_words`
      dictionary : oracle with `is_recognized(word, language) -> bool`
      language   : language tag handed to the oracle

    Returns:
      ValidationOutcome; on rejection `kind` names the first failing rule.
    """
    w = normalize_submission(word)
    root = game_round.root_word

    if not is_long_enough(w):
        return ValidationOutcome.rejected(w, ErrorKind.TOO_SHORT, root)
    if not is_not_root(w, root):
        return ValidationOutcome.rejected(w, ErrorKind.IS_ROOT_WORD, root)
    if not is_original(w, game_round.used_words):
        return ValidationOutcome.rejected(w, ErrorKind.ALREADY_USED, root)
    if not is_derivable(w, root):
        return ValidationOutcome.rejected(w, ErrorKind.NOT_DERIVABLE, root)
    # Oracle last: it is the only rule that may be expensive.
    if not is_real_word(w, dictionary, language):
        return ValidationOutcome.rejected(w, ErrorKind.NOT_A_REAL_WORD, root)

    return ValidationOutcome.ok(w)
