from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import time

from loguru import logger

from vspace.application.settings import Settings
from vspace.application.services.embedder import TermFrequencyEmbedder
from vspace.application.services.vector_store import InMemoryIndex, rank


class DocumentTooLarge(ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"document has {size} characters, limit is {limit}")
        self.size = size
        self.limit = limit


@dataclass
class SearchResult:
    elapsed: float  # seconds spent inside Index.search
    results: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"elapsed": self.elapsed, "results": list(self.results)}


@dataclass
class SearchService:
    settings: Settings
    index: InMemoryIndex

    @classmethod
    def build(cls, settings: Settings) -> "SearchService":
        logger.info("Using in-memory term-frequency index")
        return cls(settings=settings, index=InMemoryIndex(TermFrequencyEmbedder()))

    def add(self, document: str) -> int:
        limit = self.settings.max_document_chars
        if limit is not None and len(document) > limit:
            logger.warning("Rejected document of {} chars (limit {})", len(document), limit)
            raise DocumentTooLarge(len(document), limit)

        size = self.index.add(document)
        logger.debug("Indexed document #{}: {!r}", size, document[:80])
        return size

    def search(self, query: str) -> SearchResult:
        # a blank query and a query with no matches answer the same way
        if not query:
            logger.info("Empty query, returning no results")
            return SearchResult(elapsed=0.0, results=[])

        start = time.perf_counter()
        hits = self.index.search(query)
        elapsed = time.perf_counter() - start

        ranked = rank(hits)
        logger.info("Query {!r} matched {} document(s) in {:.6f}s", query[:80], len(ranked), elapsed)
        return SearchResult(elapsed=elapsed, results=[text for _, text in ranked])
