from __future__ import annotations

import logging
import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping

import numpy as np

from processing.text import PUNCTUATION, count_terms

log = logging.getLogger(__name__)


class EmptyDocumentError(ValueError):
    """Raised for a document with no tokens, or a vector with zero norm."""


def term_frequencies(counts: Mapping[str, int]) -> dict[str, float]:
    total = sum(counts.values())
    if total == 0:
        raise EmptyDocumentError("document has no terms")
    return {term: count / total for term, count in counts.items()}


def document_frequencies(doc_counts: Iterable[Mapping[str, int]]) -> dict[str, int]:
    df: dict[str, int] = defaultdict(int)
    for counts in doc_counts:
        # presence only; counts beyond one are irrelevant here
        for term in counts:
            df[term] += 1
    return dict(df)


def inverse_document_frequencies(doc_counts: Mapping[str, Mapping[str, int]]) -> dict[str, float]:
    """
    Smoothed idf: ln((N + 1) / (df + 1)) + 1.

    Never zero or undefined; a term present in every document gets exactly 1.0.
    """
    n = len(doc_counts)
    df = document_frequencies(doc_counts.values())
    return {term: math.log((n + 1.0) / (freq + 1.0)) + 1.0 for term, freq in df.items()}


def tfidf_vector(tf: Mapping[str, float], idf: Mapping[str, float]) -> dict[str, float]:
    return {term: freq * idf.get(term, 0.0) for term, freq in tf.items()}


def l2_normalize(vec: Mapping[str, float]) -> dict[str, float]:
    values = np.fromiter(vec.values(), dtype=np.float64, count=len(vec))
    norm = float(np.linalg.norm(values))
    if norm == 0.0:
        raise EmptyDocumentError("cannot normalize a zero vector")
    return {term: value / norm for term, value in vec.items()}


class TfidfIndex:
    """
    Collects per-document term counts, then derives normalized tf-idf vectors.

    Documents without any token are left out of the corpus (they would make
    both tf and the l2 norm divide by zero) and their ids kept in `skipped`.
    """

    def __init__(self, punctuation: frozenset[str] = PUNCTUATION) -> None:
        self.punctuation = punctuation
        self.doc_counts: dict[str, Counter[str]] = {}
        self.skipped: list[str] = []
        self.idf: dict[str, float] = {}
        self.doc_vecs: dict[str, dict[str, float]] = {}

    def add_document(self, doc_id: str, text: str) -> None:
        counts = count_terms(text, self.punctuation)
        if not counts:
            log.warning("skipping empty document %s", doc_id)
            self.skipped.append(doc_id)
            return
        self.doc_counts[doc_id] = counts

    def build(self) -> dict[str, dict[str, float]]:
        self.idf = inverse_document_frequencies(self.doc_counts)
        self.doc_vecs = {
            doc_id: l2_normalize(tfidf_vector(term_frequencies(counts), self.idf))
            for doc_id, counts in self.doc_counts.items()
        }
        log.info(
            "built tf-idf vectors for %d documents over %d terms", len(self.doc_vecs), len(self.idf)
        )
        return self.doc_vecs
