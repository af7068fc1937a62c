"""
Start-word list validator.

What this module does:
- Validate a start-word file (one root word per line).
- Enforce formatting rules (lowercase, a–z only). Roots must also be longer
  than the minimum playable word: a root of exactly that length only admits
  same-length anagrams, which makes for a thin round.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.rules import MIN_WORD_LENGTH


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class StartWordsReport:
    """Diagnostics and metadata for one start-word file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # minimum playable word length the list was checked against
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must be longer than `min_length` (list policy, not a game rule)
      - blank lines are skipped (a trailing newline is normal), not counted

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w.islower() and w.isalpha() and w.isascii() and len(w) > min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_start_words(path: str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a start-word list.

    Parameters
    ----------
    path : str
        Path to the start-word file (one word per line).
    min_length : int
        Minimum playable word length; every root must be strictly longer.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see StartWordsReport) with counts,
        SHA-256, invalid/duplicate diagnostics, a strict `passed` flag and
        `issues` (list of strings).
    """
    issues: List[str] = []
    p = Path(path)

    # Early return if the file is missing
    if not p.exists():
        issues.append(f"start-word file not found: {path}")
        rep = StartWordsReport(path, False, min_length, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    if not words:
        issues.append("start-word file contains 0 valid words")
    if invalid:
        issues.append(f"start-word file has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("start-word file contains duplicate lines")

    # Strict pass criteria: non-empty + no invalids
    passed = bool(words) and invalid == 0

    rep = StartWordsReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=packages/datasets/data/start.txt | words=120 (uniq=120, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"start={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
