from __future__ import annotations

import argparse
import logging
import os
import sys

from ingestion.corpus import load_corpus
from search.config import SearchConfig
from search.pipeline import build_index_from_texts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Prefix search over a directory of text files")
    parser.add_argument("query", nargs="*", help="single search term (prefix)")
    parser.add_argument(
        "--root",
        default=os.getenv("PREFIX_SEARCH_ROOT", "."),
        help="corpus directory (default: $PREFIX_SEARCH_ROOT or .)",
    )
    parser.add_argument("--verbose", action="store_true")
    # a dash-prefixed query like "-foo" is not an option; keep it as a search term
    args, extra = parser.parse_known_args(argv)
    terms = args.query + extra

    if len(terms) != 1:
        print("Please use a single argument")
        return 0
    query = terms[0]

    verbose = args.verbose or os.getenv("PREFIX_SEARCH_VERBOSE") == "1"
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Searching for {query}")
    index = build_index_from_texts(load_corpus(args.root), SearchConfig.from_env())
    hits = index.search(query)
    if not hits:
        print("No matches")
        return 0
    for h in hits:
        print(f"Document {h.doc_id} matching word {h.term} with score {h.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
