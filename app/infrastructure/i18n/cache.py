"""Parsed template cache.

Maps the exact raw template text to its TemplateAST. Entries are created
lazily and never evicted, so callers rendering an unbounded number of
distinct generated templates will grow the cache without bound.
"""

import threading
from typing import Dict, Optional

from infrastructure.i18n.nodes import TemplateAST


class TemplateCache:
    """Thread-safe raw text -> TemplateAST mapping.

    Lookup and insert take the lock separately. Two threads missing on the
    same text may both parse it; parsing is deterministic, so the last insert
    wins with an equivalent tree.

    Attributes:
        _entries: Dict mapping template text to its parsed tree.
        _lock: Threading lock for thread-safe operations.
    """

    def __init__(self):
        self._entries: Dict[str, TemplateAST] = {}
        self._lock = threading.Lock()

    def get(self, text: str) -> Optional[TemplateAST]:
        with self._lock:
            return self._entries.get(text)

    def set(self, text: str, ast: TemplateAST) -> None:
        with self._lock:
            self._entries[text] = ast

    def __contains__(self, text: object) -> bool:
        with self._lock:
            return text in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
