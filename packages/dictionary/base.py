from __future__ import annotations
from typing import Dict, Type

from packages.engine.rules import DEFAULT_LANGUAGE

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["DictionaryOracle"]] = {}


def register(cls: Type["DictionaryOracle"]) -> Type["DictionaryOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that oracles inherit ----
class DictionaryOracle:
    """
    Answers one question: is this a recognized word in `language`?

    The validation pipeline only ever calls `is_recognized`, so any backing
    store (static list, frequency table, remote service) can be swapped in.
    """
    id = "base"
    name = "Base"

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")
