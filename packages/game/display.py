"""Plain-text rendering helpers for a round."""

from typing import List

from .state import GameRound


def letter_badge(word: str) -> str:
    """Letter-count badge shown next to each accepted word, e.g. "(5)"."""
    return f"({len(word)})"


def word_label(word: str) -> str:
    """Spoken label for screen readers: word first, then its letter count."""
    n = len(word)
    return f"{word}, {n} letter{'s' if n != 1 else ''}"


def score_line(game_round: GameRound) -> str:
    return f"Score: {game_round.score}"


def render_round(game_round: GameRound, spoken: bool = False) -> List[str]:
    """
    Title line, accepted words (most recent first), score line.

    With `spoken`, each word is rendered as its screen-reader label instead of
    the badge layout.
    """
    lines = [game_round.root_word.upper()]
    for w in game_round.used_words:
        lines.append(f"  {word_label(w)}" if spoken else f"  {letter_badge(w):>4} {w}")
    lines.append(score_line(game_round))
    return lines
