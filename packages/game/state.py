"""
Game state for a single round.

A round is one play session scoped by one root word. `GameRound` is an
immutable value; `GameState` owns the current one and replaces it whenever
the round changes (new game, accepted word). Callers get snapshots they
cannot mutate behind the state's back.

Invariants of every round:
  - used_words is most-recent-first and holds no duplicates
  - score == sum(len(w) for w in used_words)
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from packages.datasets.sources import WordSourceError

logger = logging.getLogger(__name__)

# Root word used when the word source has nothing usable to offer.
DEFAULT_ROOT_WORD = "silkworm"


@dataclass(frozen=True)
class GameRound:
    root_word: str
    used_words: Tuple[str, ...] = ()
    score: int = 0

    def with_word(self, word: str) -> "GameRound":
        """Return a copy with `word` prepended and its length added to the score."""
        return GameRound(
            root_word=self.root_word,
            used_words=(word,) + self.used_words,
            score=self.score + len(word),
        )


class GameState:
    """
    Holds the current GameRound.

    Args:
      seed          : RNG seed so root-word picks are reproducible
      fallback_word : root used when the source is empty or unavailable;
                      None disables the fallback (source failure is fatal)
    """

    def __init__(self, *, seed: int | None = None,
                 fallback_word: Optional[str] = DEFAULT_ROOT_WORD):
        if fallback_word is not None and not fallback_word.strip():
            raise ValueError("fallback_word must be non-empty (or None to disable it)")
        self.rng = random.Random(seed)
        self.fallback_word = fallback_word.strip().lower() if fallback_word else None
        self._round: Optional[GameRound] = None

    def start_new_round(self, source) -> GameRound:
        """
        Pick a random root word from `source` and start a fresh round.

        Falls back to `fallback_word` when the source is unavailable or
        yields no usable word. Raises WordSourceError only when there is no
        fallback to use.
        """
        try:
            words = [w for w in source.load() if w.strip()]
            reason = "empty source"
        except WordSourceError as e:
            if self.fallback_word is None:
                raise
            words = []
            reason = str(e)

        if words:
            root = self.rng.choice(words).strip().lower()
        elif self.fallback_word is not None:
            logger.warning(f"[new-round] using fallback={self.fallback_word} ({reason})")
            root = self.fallback_word
        else:
            raise WordSourceError("word source yielded no usable root word and no fallback is set")

        self._round = GameRound(root_word=root)
        logger.debug(f"[new-round] root={root} candidates={len(words)}")
        return self._round

    def current_round(self) -> GameRound:
        if self._round is None:
            raise RuntimeError("no round started; call start_new_round() first")
        return self._round

    def record_accepted_word(self, word: str) -> GameRound:
        """
        Prepend `word` to the used words and add its length to the score.

        Precondition: `word` already passed the validation pipeline. Nothing
        is re-checked here.
        """
        self._round = self.current_round().with_word(word)
        return self._round
