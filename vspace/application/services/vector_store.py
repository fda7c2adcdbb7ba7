from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import math
import threading

from vspace.application.services.embedder import TermFrequencyEmbedder

TermVector = Dict[str, int]
Hit = Tuple[float, str]  # (score, document)


def magnitude(v: TermVector) -> float:
    return math.sqrt(sum(c * c for c in v.values()))


def cosine_similarity(a: TermVector, b: TermVector) -> float:
    # cosine = dot(a,b) / (||a|| * ||b||) for sparse dicts
    # iterate the smaller dict; the sum is the same either way
    small, large = (a, b) if len(a) <= len(b) else (b, a)
    dot = 0
    for term, count in small.items():
        other = large.get(term)
        if other is not None:
            dot += count * other
    denom = magnitude(a) * magnitude(b)
    if denom == 0.0:
        return 0.0
    return dot / denom


@dataclass(frozen=True)
class IndexEntry:
    text: str
    vector: TermVector


class InMemoryIndex:
    """Append-only (text, tf_vector) store. Not persistent."""

    def __init__(self, embedder: TermFrequencyEmbedder | None = None):
        self.embedder = embedder or TermFrequencyEmbedder()
        self._entries: List[IndexEntry] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def add(self, document: str) -> int:
        """Appends one entry and returns the index size right after it."""
        # vectorize outside the lock, append inside it
        entry = IndexEntry(text=document, vector=self.embedder.embed(document))
        with self._lock:
            self._entries.append(entry)
            return len(self._entries)

    def search(self, query: str) -> Optional[List[Hit]]:
        """
        Returns every (score, text) with a non-zero score, in insertion order,
        or None when nothing matched.
        """
        qv = self.embedder.embed(query)

        with self._lock:
            entries = list(self._entries)

        hits: List[Hit] = []
        for entry in entries:
            score = cosine_similarity(qv, entry.vector)
            if score != 0.0:
                hits.append((score, entry.text))

        return hits or None


def rank(hits: Optional[List[Hit]]) -> List[Hit]:
    """Highest score first; equal scores stay in insertion order."""
    if not hits:
        return []
    return sorted(hits, key=lambda h: h[0], reverse=True)
