"""Text search over project files, in the spirit of ``grep -rq``."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

log = structlog.get_logger("migration_verifier.search")

# VCS and IDE metadata; scans start below src/, so package names like
# "build" or "target" are real source
_SKIP_DIRS = {".git", ".svn", ".hg", ".idea"}


def iter_files(root: Path, suffixes: Iterable[str] | None = None) -> Iterator[Path]:
    """Yield files under *root* in a stable order, optionally filtered by suffix."""
    if not root.is_dir():
        return
    wanted = {s.lower() for s in suffixes} if suffixes is not None else None
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP_DIRS)
        for name in sorted(filenames):
            if wanted is not None and Path(name).suffix.lower() not in wanted:
                continue
            yield Path(dirpath) / name


def read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log.debug("search.unreadable", file=str(path), error=str(e))
        return None


class TextCorpus:
    """A lazily-read set of files searched as one unit.

    Each file is read at most once per corpus.
    """

    def __init__(self, files: Iterable[Path]) -> None:
        self._files = list(files)
        self._contents: list[str] | None = None

    @classmethod
    def from_tree(cls, root: Path, suffixes: Iterable[str] | None = None) -> TextCorpus:
        return cls(iter_files(root, suffixes))

    @classmethod
    def from_text(cls, text: str) -> TextCorpus:
        corpus = cls([])
        corpus._contents = [text]
        return corpus

    @property
    def contents(self) -> list[str]:
        if self._contents is None:
            self._contents = [t for t in (read_text(f) for f in self._files) if t is not None]
        return self._contents

    def contains(self, pattern: re.Pattern[str]) -> bool:
        return any(pattern.search(text) for text in self.contents)
