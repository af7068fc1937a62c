import csv
import json

from packages.dictionary import WordListDictionary
from packages.harness import ACCEPTED, run_autoplay, run_batch, run_transcript, write_csv, write_manifest

WORDS = ["mount", "main", "amount", "unit", "into", "mutation", "silk", "worm", "milk"]
DICT = WordListDictionary(WORDS)


def test_run_transcript_smoke():
    r = run_transcript("mountain", ["mount", "mnt", "Mount", "silk", "unit"], DICT)
    assert r["root_word"] == "mountain"
    assert r["used_words"] == ["unit", "mount"]
    assert r["score"] == 9
    assert r["accepted"] == 2 and r["rejected"] == 3
    assert [k for _, k in r["history"]] == ["ok", "too_short", "already_used", "not_derivable", "ok"]


def test_run_autoplay_longest_first():
    r = run_autoplay("mountain", WORDS, DICT)
    assert r["history"][0][0] == "amount"
    assert set(r["used_words"]) == {"mount", "main", "amount", "unit", "into"}
    assert r["rejected"] == 0
    assert r["score"] == sum(len(w) for w in r["used_words"])


def test_run_batch_sample_is_deterministic():
    roots = ["mountain", "silkworm", "mutation"]
    a = run_batch(roots, WORDS, DICT, sample=2, seed=5)
    b = run_batch(roots, WORDS, DICT, sample=2, seed=5)
    assert [r["root_word"] for r in a] == [r["root_word"] for r in b]
    assert len(a) == 2


def test_run_batch_progress_wrapper():
    seen = []

    def progress(it):
        for x in it:
            seen.append(x)
            yield x

    run_batch(["silkworm"], WORDS, DICT, progress=progress)
    assert seen == ["silkworm"]


def test_write_csv_and_manifest(tmp_path):
    r = run_transcript("mountain", ["mount", "mnt", "unit"], DICT)
    csv_path = write_csv([r], str(tmp_path / "out" / "replay.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["result"] for row in rows] == ["ok", "too_short", "ok"]
    assert rows[-1]["score_after"] == "9"

    m_path = write_manifest({"num_rounds": 1}, str(tmp_path / "m.json"))
    assert json.loads(open(m_path, encoding="utf-8").read()) == {"num_rounds": 1}


def test_csv_scores_only_accepted_marker(tmp_path):
    r = {"root_word": "mountain", "history": [("mount", ACCEPTED), ("main", "not_a_real_word")]}
    with open(write_csv([r], str(tmp_path / "r.csv")), newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["score_after"] for row in rows] == ["5", "5"]
