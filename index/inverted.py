from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal

from index.scores import RankedDocs, to_score
from index.trie import ByteTrie

log = logging.getLogger(__name__)


def invert(vectors: Mapping[str, Mapping[str, float]]) -> dict[str, RankedDocs]:
    """doc -> term -> score  becomes  term -> ranked (score, doc) entries."""
    by_term: dict[str, dict[Decimal, str]] = {}
    for doc_id, scores in vectors.items():
        for term, score in scores.items():
            entries = by_term.get(term)
            if entries is None:
                entries = by_term[term] = {}
            key = to_score(score)
            if key in entries:
                log.debug("score %s for %s replaces %s under %r", key, doc_id, entries[key], term)
            # equal scores: the later document takes the key
            entries[key] = doc_id
    return {term: RankedDocs.from_mapping(entries) for term, entries in by_term.items()}


def build_inverted(vectors: Mapping[str, Mapping[str, float]]) -> ByteTrie[RankedDocs]:
    trie: ByteTrie[RankedDocs] = ByteTrie()
    for term, ranked in invert(vectors).items():
        trie.insert(term, ranked)
    log.info("indexed %d terms from %d documents", len(trie), len(vectors))
    return trie
