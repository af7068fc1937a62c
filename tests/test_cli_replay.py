import csv
import json
from pathlib import Path

import pytest
from apps.cli.replay import main


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def _manifest(outdir: Path) -> dict:
    [path] = list(outdir.glob("replay_*_manifest.json"))
    return json.loads(path.read_text(encoding="utf-8"))


def _csv_rows(outdir: Path) -> list:
    [path] = list(outdir.glob("replay_*.csv"))
    with path.open(newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def test_transcript_without_word_list_uses_wordfreq(tmp_path: Path):
    tries = _write(tmp_path / "tries.txt", ["mount", "mnt", "main"])
    outdir = tmp_path / "reports"

    assert main(["--root", "mountain", "--submissions", tries, "--outdir", str(outdir)]) == 0

    m = _manifest(outdir)
    assert m["config"]["dictionary"] == "wordfreq"
    assert m["num_rounds"] == 1
    assert m["total_score"] == 9
    assert [r["result"] for r in _csv_rows(outdir)] == ["ok", "too_short", "ok"]


def test_transcript_with_word_list(tmp_path: Path):
    tries = _write(tmp_path / "tries.txt", ["mount", "muton", "unit"])
    words = _write(tmp_path / "words.txt", ["mount", "unit"])
    outdir = tmp_path / "reports"

    main(["--root", "mountain", "--submissions", tries, "--words", words,
          "--outdir", str(outdir)])

    m = _manifest(outdir)
    assert m["config"]["dictionary"] == "wordlist"
    assert m["scores"] == {"mountain": 9}
    assert [r["result"] for r in _csv_rows(outdir)] == ["ok", "not_a_real_word", "ok"]


def test_autoplay_with_word_list(tmp_path: Path):
    words = _write(tmp_path / "words.txt", ["mount", "main", "amount", "unit", "into", "silk"])
    outdir = tmp_path / "reports"

    main(["--auto", "--root", "mountain", "--words", words, "--progress", "off",
          "--outdir", str(outdir)])

    m = _manifest(outdir)
    assert m["total_score"] == 6 + 5 + 4 + 4 + 4
    rows = _csv_rows(outdir)
    assert rows[0]["submission"] == "amount"
    assert rows[-1]["score_after"] == "23"


def test_autoplay_sample_of_start_words(tmp_path: Path):
    start = _write(tmp_path / "start.txt", ["mountain", "silkworm", "absolute"])
    words = _write(tmp_path / "words.txt", ["mount", "silk", "worm", "solute"])
    outdir = tmp_path / "reports"

    main(["--auto", "--start-words", start, "--words", words, "--sample", "2",
          "--seed", "7", "--progress", "off", "--outdir", str(outdir)])

    assert _manifest(outdir)["num_rounds"] == 2


@pytest.mark.parametrize("argv", [
    ["--submissions", "tries.txt"],                 # no --root
    ["--root", "mountain"],                         # neither --submissions nor --auto
    ["--auto", "--root", "mountain"],               # --auto without --words
])
def test_bad_argument_combinations_exit(argv, tmp_path: Path):
    with pytest.raises(SystemExit):
        main(argv + ["--outdir", str(tmp_path)])
