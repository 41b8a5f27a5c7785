from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from index.scores import RankedDocs
from index.trie import ByteTrie
from processing.text import normalize_term
from search.config import SearchConfig


@dataclass(frozen=True)
class Hit:
    doc_id: str
    term: str
    score: Decimal


def rank_prefix(
    trie: ByteTrie[RankedDocs], query: str, cfg: SearchConfig | None = None
) -> list[Hit]:
    """
    Rank documents for every indexed term that starts with the normalized query.

    Each matching term contributes at most `cfg.per_term` of its best documents.
    The candidates are stably sorted ascending on (exact term match, score) and
    the whole list is then reversed, which puts exact matches first and each
    group in descending score order. Ties on both keys come out in reverse
    enumeration order. An empty list means nothing matched.
    """
    cfg = cfg or SearchConfig()
    q_norm = normalize_term(query, cfg.punctuation)

    hits: list[Hit] = []
    for term, ranked in trie.iter_prefix(q_norm):
        for score, doc_id in ranked.top(cfg.per_term):
            hits.append(Hit(doc_id, term, score))

    # not sort(reverse=True): that would keep ties in enumeration order
    hits.sort(key=lambda h: (h.term == q_norm, h.score))
    hits.reverse()
    return hits[: cfg.max_results]
