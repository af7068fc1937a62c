"""
Replay harness core primitives.

- run_transcript: play a fixed list of submissions against one root word.
- run_autoplay:   submit every derivable candidate (longest first) to see the
                  best score a word list allows for that root.
- run_batch:      autoplay many root words in sequence (optionally a sample).

These functions drive the same GameSession a front end uses, so reports
reflect exactly what a player would have seen.
"""

from __future__ import annotations
import random
import time
from typing import Callable, Dict, Iterable, List, Tuple

from packages.datasets.sources import StaticWordSource
from packages.engine import filter_derivable
from packages.game import GameSession

# Marker stored in history for accepted submissions.
ACCEPTED = "ok"


def _fresh_session(root_word: str, dictionary) -> GameSession:
    session = GameSession(StaticWordSource([root_word]), dictionary)
    session.new_game()
    return session


def run_transcript(root_word: str, submissions: Iterable[str], dictionary) -> Dict:
    """
    Submit each entry of `submissions` in order against a fresh round.

    Returns:
        dict with keys:
            root_word (str), score (int), used_words (list[str]),
            accepted (int), rejected (int), time_ms (float),
            history (list[(submission, "ok" | ErrorKind value)])
    """
    session = _fresh_session(root_word, dictionary)
    history: List[Tuple[str, str]] = []

    t0 = time.time()
    for raw in submissions:
        outcome = session.submit(raw)
        history.append((raw, ACCEPTED if outcome.accepted else outcome.kind.value))
    dt = (time.time() - t0) * 1000.0

    final = session.round
    accepted = sum(1 for _, k in history if k == ACCEPTED)
    return {
        "root_word": final.root_word,
        "score": final.score,
        "used_words": list(final.used_words),
        "accepted": accepted,
        "rejected": len(history) - accepted,
        "time_ms": dt,
        "history": history,
    }


def run_autoplay(root_word: str, candidates: Iterable[str], dictionary) -> Dict:
    """
    Submit every candidate that can be spelled from `root_word`.

    Longest words go first (ties alphabetical) so the history reads like a
    greedy player's game. The dictionary still has the final say.
    """
    pool = filter_derivable(candidates, root_word)
    pool.sort(key=lambda w: (-len(w), w))
    return run_transcript(root_word, pool, dictionary)


def run_batch(
        root_words: List[str],
        candidates: Iterable[str],
        dictionary,
        *,
        sample: int | None = None,
        seed: int | None = None,
        progress: Callable[[Iterable[str]], Iterable[str]] | None = None,
) -> List[Dict]:
    """
    Autoplay several root words back-to-back. If `sample` is given, a
    deterministic (by `seed`) subset of that size is used instead.

    `progress` may wrap the root iterable (e.g. a tqdm bar).
    """
    pool = list(root_words)
    if sample is not None and sample < len(pool):
        rng = random.Random(seed)
        rng.shuffle(pool)
        pool = pool[:sample]

    candidates = list(candidates)
    roots = progress(pool) if progress else pool
    return [run_autoplay(root, candidates, dictionary) for root in roots]
