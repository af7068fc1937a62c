from .errors import ErrorKind, describe
from .rules import MIN_WORD_LENGTH, normalize_submission, is_derivable
from .validation import ValidationOutcome, validate_word
from .constraints import filter_derivable

__all__ = [
    "ErrorKind", "describe", "MIN_WORD_LENGTH", "normalize_submission",
    "is_derivable", "ValidationOutcome", "validate_word", "filter_derivable",
]
