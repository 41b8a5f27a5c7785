from __future__ import annotations

import os
from dataclasses import dataclass

from processing.text import PUNCTUATION


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class SearchConfig:
    per_term: int = 9  # documents pulled from each matching term
    max_results: int = 100
    punctuation: frozenset[str] = PUNCTUATION

    @classmethod
    def from_env(cls) -> SearchConfig:
        return cls(
            per_term=_env_int("PREFIX_SEARCH_PER_TERM", cls.per_term),
            max_results=_env_int("PREFIX_SEARCH_MAX_RESULTS", cls.max_results),
        )
