from __future__ import annotations
from typing import List
from .base import DEFAULT_LANGUAGE, DictionaryOracle, REGISTRY, register

from .wordlist import WordListDictionary
from .frequency import DEFAULT_MIN_ZIPF, WordfreqDictionary


def create_dictionary(dictionary_id: str, **kwargs) -> DictionaryOracle:
    """
    Factory: instantiate a registered dictionary oracle by id.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "DEFAULT_LANGUAGE", "DEFAULT_MIN_ZIPF", "DictionaryOracle", "REGISTRY", "register",
    "WordListDictionary", "WordfreqDictionary", "create_dictionary", "get_dictionary_ids",
]
