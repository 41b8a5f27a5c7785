from __future__ import annotations

import bisect
import logging
import math
from collections.abc import Iterator, Mapping
from decimal import Decimal

log = logging.getLogger(__name__)


def to_score(value: float) -> Decimal:
    """Exact decimal expansion of a binary float, usable as a total-order key."""
    if not math.isfinite(value):
        raise ValueError(f"score must be finite, got {value!r}")
    return Decimal(value)


class RankedDocs:
    """
    Score -> document mapping kept in ascending score order.

    Keys are unique: inserting a score that is already present replaces the
    document stored under it.
    """

    __slots__ = ("_scores", "_docs")

    def __init__(self) -> None:
        self._scores: list[Decimal] = []
        self._docs: list[str] = []

    @classmethod
    def from_mapping(cls, entries: Mapping[Decimal, str]) -> RankedDocs:
        """Bulk build with a single sort; keys are already unique."""
        inst = cls()
        items = sorted(entries.items())
        inst._scores = [score for score, _ in items]
        inst._docs = [doc for _, doc in items]
        return inst

    def insert(self, score: Decimal, doc_id: str) -> None:
        i = bisect.bisect_left(self._scores, score)
        if i != len(self._scores) and self._scores[i] == score:
            log.debug("score %s for %s replaces %s", score, doc_id, self._docs[i])
            self._docs[i] = doc_id
            return
        self._scores.insert(i, score)
        self._docs.insert(i, doc_id)

    def top(self, n: int) -> list[tuple[Decimal, str]]:
        """Up to `n` entries from the highest score down."""
        if n <= 0:
            return []
        start = max(len(self._scores) - n, 0)
        return list(zip(self._scores[start:], self._docs[start:], strict=True))[::-1]

    def max(self) -> tuple[Decimal, str] | None:
        if not self._scores:
            return None
        return self._scores[-1], self._docs[-1]

    def __len__(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[tuple[Decimal, str]]:
        return zip(self._scores, self._docs, strict=True)
