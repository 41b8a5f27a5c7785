from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from index.inverted import build_inverted
from index.scores import RankedDocs
from index.tfidf import TfidfIndex
from index.trie import ByteTrie
from search.config import SearchConfig
from search.ranker import Hit, rank_prefix

log = logging.getLogger(__name__)


@dataclass
class Doc:
    id: str
    content: str


@dataclass
class PrefixIndex:
    """Built once, read-only afterwards; safe to query from several readers."""

    trie: ByteTrie[RankedDocs]
    documents: int
    skipped: list[str] = field(default_factory=list)
    cfg: SearchConfig = field(default_factory=SearchConfig)

    @property
    def terms(self) -> int:
        return len(self.trie)

    def search(self, query: str) -> list[Hit]:
        return rank_prefix(self.trie, query, self.cfg)


def build_index(docs: Iterable[Doc], cfg: SearchConfig | None = None) -> PrefixIndex:
    cfg = cfg or SearchConfig()
    idx = TfidfIndex(punctuation=cfg.punctuation)
    for d in docs:
        idx.add_document(d.id, d.content)
    vectors = idx.build()
    return PrefixIndex(
        trie=build_inverted(vectors),
        documents=len(vectors),
        skipped=list(idx.skipped),
        cfg=cfg,
    )


def build_index_from_texts(texts: dict[str, str], cfg: SearchConfig | None = None) -> PrefixIndex:
    return build_index((Doc(id=k, content=v) for k, v in texts.items()), cfg)


def hit_to_dict(h: Hit) -> dict[str, str]:
    # str() of the Decimal keeps the exact score
    return {"id": h.doc_id, "term": h.term, "score": str(h.score)}


def search_docs(docs: Iterable[Doc], query: str, cfg: SearchConfig | None = None) -> list[dict]:
    index = build_index(docs, cfg)
    hits = index.search(query)
    if not hits:
        log.info("no matches for %r", query)
    return [hit_to_dict(h) for h in hits]
