"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per submission).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from .core import ACCEPTED

FIELDS = ["root_word", "turn", "submission", "result", "score_after"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of replay results to CSV.

    Schema (columns):
      root_word, turn, submission, result, score_after

    `score_after` is the running score once that submission was handled, so
    the last row of each root equals its final score.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            running = 0
            for turn, (submission, result) in enumerate(r.get("history", []), 1):
                if result == ACCEPTED:
                    running += len(submission.strip())
                w.writerow({
                    "root_word": r["root_word"],
                    "turn": turn,
                    "submission": submission,
                    "result": result,
                    "score_after": running,
                })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - start_words: output of datasets.validate_start_words(...)
      - num_rounds, total_score
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
