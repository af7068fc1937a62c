"""
Rejection reasons for submitted words.

Every reason maps to a fixed (title, message) pair that a front end can show
as-is. Only the "not possible" message interpolates the current root word.
"""

from enum import Enum
from typing import Tuple


class ErrorKind(str, Enum):
    TOO_SHORT = "too_short"
    IS_ROOT_WORD = "is_root_word"
    ALREADY_USED = "already_used"
    NOT_DERIVABLE = "not_derivable"
    NOT_A_REAL_WORD = "not_a_real_word"


_MESSAGES = {
    ErrorKind.TOO_SHORT: ("Word too short", "Words must be four characters or more."),
    ErrorKind.IS_ROOT_WORD: ("Nice try...", "You can't use the starting word."),
    ErrorKind.ALREADY_USED: ("Word used already", "Be more original."),
    ErrorKind.NOT_DERIVABLE: ("Word not possible", "You can't spell that word from {root}!"),
    ErrorKind.NOT_A_REAL_WORD: ("Word not recognized", "You can't make up words."),
}


def describe(kind: ErrorKind, root_word: str = "") -> Tuple[str, str]:
    """
    Return the (title, message) pair for `kind`.

    Example:
      describe(ErrorKind.NOT_DERIVABLE, "silkworm")
        -> ("Word not possible", "You can't spell that word from silkworm!")
    """
    title, template = _MESSAGES[kind]
    return title, template.format(root=root_word)
