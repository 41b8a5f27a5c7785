from __future__ import annotations

from decimal import Decimal

from index.scores import RankedDocs
from index.trie import ByteTrie
from search.config import SearchConfig
from search.pipeline import Doc, build_index, search_docs
from search.ranker import rank_prefix


def _scenario():
    return build_index(
        [Doc(id="doc1", content="apple apple banana"), Doc(id="doc2", content="banana cherry")]
    )


def test_exact_term_single_document():
    hits = _scenario().search("apple")
    assert [(h.doc_id, h.term) for h in hits] == [("doc1", "apple")]


def test_exact_term_in_both_documents_ranked_by_score():
    hits = _scenario().search("Banana!")
    assert [h.doc_id for h in hits] == ["doc2", "doc1"]
    assert hits[0].score > hits[1].score
    assert all(isinstance(h.score, Decimal) for h in hits)


def test_prefix_without_exact_term():
    hits = _scenario().search("ap")
    assert [(h.doc_id, h.term) for h in hits] == [("doc1", "apple")]


def test_no_matches_is_empty_list():
    assert _scenario().search("zebra") == []


def test_empty_corpus():
    index = build_index([])
    assert index.terms == 0 and index.documents == 0
    assert index.search("anything") == []


def test_exact_match_outranks_higher_scoring_prefix_match():
    index = build_index(
        [
            Doc(id="rug", content="carpet"),
            Doc(id="garage", content="car oil oil oil tyre tyre"),
        ]
    )
    hits = index.search("car")
    assert [(h.term, h.doc_id) for h in hits] == [("car", "garage"), ("carpet", "rug")]
    assert hits[1].score > hits[0].score


def _trie(entries: dict[str, list[tuple[str, str]]]) -> ByteTrie[RankedDocs]:
    trie: ByteTrie[RankedDocs] = ByteTrie()
    for term, docs in entries.items():
        ranked = RankedDocs()
        for score, doc in docs:
            ranked.insert(Decimal(score), doc)
        trie.insert(term, ranked)
    return trie


def test_groups_each_sorted_descending_when_scores_interleave():
    trie = _trie(
        {
            "ab": [("0.2", "x"), ("0.8", "y")],
            "abc": [("0.9", "p"), ("0.1", "q")],
            "abd": [("0.5", "r")],
        }
    )
    hits = rank_prefix(trie, "ab")
    assert [(h.term, h.doc_id) for h in hits] == [
        ("ab", "y"),
        ("ab", "x"),
        ("abc", "p"),
        ("abd", "r"),
        ("abc", "q"),
    ]


def test_full_ties_come_out_in_reverse_enumeration_order():
    index = build_index([Doc(id="d", content="ab ac")])
    hits = index.search("a")
    assert hits[0].score == hits[1].score
    assert [h.term for h in hits] == ["ac", "ab"]


def test_at_most_nine_documents_per_term():
    docs = [Doc(id=f"d{i}", content="word" + f" pad{i}" * i) for i in range(1, 13)]
    hits = build_index(docs).search("word")
    assert len(hits) == 9
    # fewest padding tokens means the highest weight on "word"
    assert [h.doc_id for h in hits] == [f"d{i}" for i in range(1, 10)]


def test_result_cap():
    entries = {
        f"t{i:02d}": [(f"0.{j}{i:02d}", f"doc{i}-{j}") for j in range(1, 10)] for i in range(20)
    }
    trie = _trie(entries)
    assert len(rank_prefix(trie, "t")) == 100
    assert len(rank_prefix(trie, "t", SearchConfig(max_results=7))) == 7
    assert len(rank_prefix(trie, "t05", SearchConfig(per_term=3))) == 3


def test_equal_scores_for_one_term_keep_the_later_document():
    hits = build_index([Doc(id="a", content="zeta"), Doc(id="b", content="zeta")]).search("zeta")
    assert [h.doc_id for h in hits] == ["b"]


def test_blank_documents_are_reported_not_indexed():
    index = build_index([Doc(id="empty", content=""), Doc(id="full", content="hello")])
    assert index.skipped == ["empty"]
    assert index.documents == 1


def test_search_docs_returns_display_rows():
    rows = search_docs([Doc(id="only", content="hello")], "HEL")
    assert rows == [{"id": "only", "term": "hello", "score": "1"}]
