from .validator import validate_start_words, pretty_summary
from .io import read_lines, write_lines, unique_preserve_order
from .sources import DEFAULT_START_WORDS, FileWordSource, StaticWordSource, WordSourceError

__all__ = [
    "validate_start_words", "pretty_summary", "read_lines", "write_lines",
    "unique_preserve_order", "DEFAULT_START_WORDS", "FileWordSource",
    "StaticWordSource", "WordSourceError",
]
