from __future__ import annotations

import re
from collections import Counter

PUNCTUATION: frozenset[str] = frozenset('!"#$%&\'()*+,;./:<=>?@[\\]^_`{|}~-')

# runs of anything outside the Unicode White_Space property; unlike str.split()
# this keeps the \x1c-\x1f separators inside tokens
_TOKEN = re.compile(
    "[^\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def normalize_term(word: str, punctuation: frozenset[str] = PUNCTUATION) -> str:
    """Lowercase `word` and drop every character found in `punctuation`."""
    return "".join(ch for ch in word.lower() if ch not in punctuation)


def tokenize(text: str, punctuation: frozenset[str] = PUNCTUATION) -> list[str]:
    # whitespace is the only delimiter; all-punctuation tokens survive as ""
    return [normalize_term(tok, punctuation) for tok in _TOKEN.findall(text)]


def count_terms(text: str, punctuation: frozenset[str] = PUNCTUATION) -> Counter[str]:
    return Counter(tokenize(text, punctuation))
