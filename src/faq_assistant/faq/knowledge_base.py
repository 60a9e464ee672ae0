"""
FAQ Knowledge Base

Holds the current FaqIndex snapshot for the process and swaps it when the
FAQ source is (re)loaded.

Thread Safety
-------------
- The snapshot reference is swapped under an RLock
- Snapshots are immutable, so readers hold a consistent view for the whole
  query even if a reload happens concurrently
- Before the first successful load the snapshot is empty and every query
  receives the fallback answer
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Optional, Sequence

from .index import FaqIndex, build_index
from .loader import FaqLoader, FaqLoadError
from .matcher import match
from .models import FaqEntry, MatchResult
from ..config import settings

logger = logging.getLogger("faq.kb")


class KnowledgeBase:
    """
    Process-wide owner of the indexed FAQ corpus.
    """

    def __init__(self, loader: Optional[FaqLoader] = None) -> None:
        self._loader = loader or FaqLoader()
        self._index: FaqIndex = FaqIndex.empty()
        self._source: Optional[str] = None
        self._load_error: Optional[str] = None
        self._loaded = False
        self._lock = RLock()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def index(self) -> FaqIndex:
        with self._lock:
            return self._index

    @property
    def loaded(self) -> bool:
        """True once a load has succeeded and not been followed by a failure."""
        with self._lock:
            return self._loaded

    @property
    def load_error(self) -> Optional[str]:
        with self._lock:
            return self._load_error

    @property
    def source(self) -> Optional[str]:
        with self._lock:
            return self._source

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self, source: Optional[str] = None) -> FaqIndex:
        """
        Fetch the FAQ corpus and replace the current snapshot.

        A failed load never raises: the corpus is reset to empty and the
        failure is kept in `load_error`.

        Parameters
        ----------
        source : Optional[str]
            File path or URL. Defaults to settings.faq_source.
        """
        source = source or settings.faq_source

        try:
            entries = await self._loader.load(source)
        except FaqLoadError as exc:
            logger.error("Failed to load FAQ from %s: %s", source, exc)
            empty = FaqIndex.empty()
            with self._lock:
                self._index = empty
                self._source = source
                self._load_error = str(exc)
                self._loaded = False
            return empty

        return self.load_entries(entries, source=source)

    def load_entries(
        self,
        entries: Sequence[FaqEntry],
        source: Optional[str] = None,
    ) -> FaqIndex:
        """
        Index already-fetched entries and make them the current snapshot.
        """
        index = build_index(entries)

        with self._lock:
            self._index = index
            self._source = source
            self._load_error = None
            self._loaded = True

        logger.info(
            "FAQ index ready: %d entries, %d terms",
            len(index),
            len(index.vocabulary),
        )
        return index

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def match(self, query: str) -> MatchResult:
        return match(query, self.index)


# Global singleton used by the application.
knowledge_base = KnowledgeBase()
