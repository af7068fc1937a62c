"""
Game session: the object a front end talks to.

Bundles the three collaborators of a game (state, word source, dictionary)
so the interaction loop only needs two calls:

    session = GameSession(FileWordSource(), create_dictionary("wordfreq"))
    session.new_game()
    outcome = session.submit("  Mount\n")
    if not outcome.accepted:
        show(outcome.title, outcome.message)
"""

from __future__ import annotations

import logging
from typing import Optional

from packages.engine import ValidationOutcome, validate_word
from .state import DEFAULT_ROOT_WORD, GameRound, GameState

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, source, dictionary, *, seed: int | None = None,
                 fallback_word: Optional[str] = DEFAULT_ROOT_WORD):
        self.source = source
        self.dictionary = dictionary
        self.state = GameState(seed=seed, fallback_word=fallback_word)

    @property
    def round(self) -> GameRound:
        return self.state.current_round()

    def new_game(self) -> GameRound:
        r = self.state.start_new_round(self.source)
        logger.info(f"[new-game] root={r.root_word}")
        return r

    def submit(self, raw: str) -> ValidationOutcome:
        """
        Validate `raw` against the current round; record it if accepted.

        Rejections leave the round untouched.
        """
        outcome = validate_word(raw, self.round, self.dictionary)
        if outcome.accepted:
            r = self.state.record_accepted_word(outcome.word)
            logger.debug(f"[accept] word={outcome.word} score={r.score}")
        else:
            logger.debug(f"[reject] word={outcome.word!r} kind={outcome.kind.value}")
        return outcome
