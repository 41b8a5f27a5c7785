from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

log = logging.getLogger(__name__)


def iter_document_paths(root: str | os.PathLike[str]) -> Iterator[Path]:
    """Every regular file below `root`, depth first, in sorted order. Symlinks are skipped."""
    for entry in sorted(Path(root).iterdir()):
        if entry.is_symlink():
            continue
        if entry.is_dir():
            yield from iter_document_paths(entry)
        elif entry.is_file():
            yield entry


def read_text_lossy(path: Path) -> str:
    # invalid utf-8 sequences become U+FFFD instead of failing the run
    return path.read_bytes().decode("utf-8", errors="replace")


def load_corpus(root: str | os.PathLike[str]) -> dict[str, str]:
    """Map each file path under `root` to its decoded text. I/O errors propagate."""
    texts = {str(p): read_text_lossy(p) for p in iter_document_paths(root)}
    log.info("loaded %d documents from %s", len(texts), root)
    return texts
