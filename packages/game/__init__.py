from .state import DEFAULT_ROOT_WORD, GameRound, GameState
from .session import GameSession
from .display import letter_badge, word_label, score_line, render_round

__all__ = [
    "DEFAULT_ROOT_WORD", "GameRound", "GameState", "GameSession",
    "letter_badge", "word_label", "score_line", "render_round",
]
