import pytest
from packages.dictionary import (
    WordfreqDictionary, WordListDictionary, create_dictionary, get_dictionary_ids,
)


def test_registry_ids():
    assert get_dictionary_ids() == ["wordfreq", "wordlist"]


def test_create_dictionary_unknown_id():
    with pytest.raises(ValueError):
        create_dictionary("aspell")


def test_wordlist_membership_is_case_insensitive():
    d = create_dictionary("wordlist", words=["Mount", " main\n", ""])
    assert isinstance(d, WordListDictionary)
    assert len(d) == 2
    assert d.is_recognized("MOUNT")
    assert d.is_recognized("main", "en")
    assert not d.is_recognized("mnt")
    assert not d.is_recognized("")


def test_wordlist_other_language_not_recognized():
    d = WordListDictionary(["mount"])
    assert not d.is_recognized("mount", "fr")


def test_wordlist_from_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("silk\nworm\r\n\n", encoding="utf-8")
    d = WordListDictionary.from_file(p)
    assert d.words == frozenset({"silk", "worm"})


def test_wordfreq_dictionary():
    d = WordfreqDictionary()
    assert d.is_recognized("mountain")
    assert d.is_recognized(" Mount ")
    assert not d.is_recognized("qzxqjv")
    assert not d.is_recognized("it's")


def test_wordfreq_threshold():
    strict = WordfreqDictionary(min_zipf=8.0)
    assert not strict.is_recognized("mountain")


def test_dictionary_and_engine_share_language_tag():
    from packages.dictionary import DEFAULT_LANGUAGE
    from packages.engine.rules import DEFAULT_LANGUAGE as ENGINE_LANGUAGE
    assert DEFAULT_LANGUAGE is ENGINE_LANGUAGE == "en"
