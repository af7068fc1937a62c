import io

import pytest

from apps.cli.play import main, play
from packages.datasets import StaticWordSource
from packages.dictionary import WordListDictionary
from packages.game import GameSession


def _session():
    return GameSession(StaticWordSource(["mountain"]), WordListDictionary(["mount", "main", "unit"]))


def test_play_loop_reports_errors_and_score():
    stdin = io.StringIO("mount\nmnt\nMOUNTAIN\n:quit\nmain\n")
    stdout = io.StringIO()
    score = play(_session(), stdin, stdout)
    out = stdout.getvalue()
    assert score == 5
    assert "Word too short: Words must be four characters or more." in out
    assert "Nice try...: You can't use the starting word." in out
    assert "Score: 5" in out


def test_play_new_game_and_hint():
    stdin = io.StringIO("unit\n:hint\n:new\n:hint\n")
    stdout = io.StringIO()
    score = play(_session(), stdin, stdout, hint_words=["mount", "main", "unit"])
    out = stdout.getvalue()
    assert score == 0  # EOF after the reset
    assert "2 word(s) left to find." in out
    assert "3 word(s) left to find." in out


def test_hint_without_word_list():
    stdout = io.StringIO()
    play(_session(), io.StringIO(":hint\n"), stdout)
    assert "Hints need a word list" in stdout.getvalue()


def test_play_spoken_labels():
    stdout = io.StringIO()
    play(_session(), io.StringIO("mount\n"), stdout, spoken=True)
    assert "mount, 5 letters" in stdout.getvalue()


def test_main_missing_start_words_plays_on_fallback(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("silk\nworm\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("silk\nworm\n:quit\n"))

    rc = main(["--start-words", str(tmp_path / "missing.txt"),
               "--dictionary", "wordlist", "--wordlist", str(words)])

    captured = capsys.readouterr()
    assert rc == 0
    assert "SILKWORM" in captured.out
    assert "Final score: 8" in captured.out
    assert "FAIL" in captured.err  # start-word summary reports the missing file


def test_main_wordlist_dictionary_needs_wordlist(tmp_path):
    with pytest.raises(SystemExit):
        main(["--dictionary", "wordlist"])
