# Term-frequency "embedder": split on single spaces → raw counts (no external libs)
from collections import Counter
from typing import Dict


def vectorize(text: str) -> Dict[str, int]:
    # "a  b" -> {"a": 1, "": 1, "b": 1}; "" -> {"": 1}
    return dict(Counter(text.split(" ")))


class TermFrequencyEmbedder:
    """Case-sensitive, no stemming, no stopwords. Any string is accepted."""

    def embed(self, text: str) -> Dict[str, int]:
        return vectorize(text)
