"""
Text services: reading the input file, normalizing words and counting them.

The input format is one word per line.
"""

import os
from typing import Dict, Iterable, Iterator, List, Optional

DEFAULT_STOP_WORDS = (
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to",
    "of", "for", "with", "by", "as", "is", "was", "were", "be",
    "been", "have", "has", "had", "do", "does", "did", "will",
    "would", "should", "could", "may", "might", "must", "can",
)


def read_lines(path: str, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a text file without trailing newlines."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, encoding=encoding) as fh:
        for line in fh:
            yield line.rstrip("\r\n")


def load_stop_words(path: Optional[str]) -> List[str]:
    if not path:
        return []
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Stop words file not found: {path}")

    with open(path, encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip()]


class WordPreprocessor:
    """
    Lower-cases words (optionally) and drops blanks and stop words.
    An empty stop word list means "use DEFAULT_STOP_WORDS".
    """

    def __init__(self, stop_words: Iterable[str] = (), to_lower: bool = True):
        words = list(stop_words) or list(DEFAULT_STOP_WORDS)
        self.stop_words = {w.strip().casefold() for w in words if w.strip()}
        self.to_lower = to_lower

    def process(self, words: Iterable[str]) -> Iterator[str]:
        for word in words:
            processed = word.strip()
            if self.to_lower:
                processed = processed.lower()
            if not processed or processed.casefold() in self.stop_words:
                continue
            yield processed


def count_frequencies(words: Iterable[str]) -> Dict[str, int]:
    """
    Case-insensitive word counts. The spelling kept for each word is the
    first one encountered; insertion order follows first appearance.
    """
    spelling: Dict[str, str] = {}
    counts: Dict[str, int] = {}
    for word in words:
        key = word.casefold()
        if key not in spelling:
            spelling[key] = word
            counts[word] = 0
        counts[spelling[key]] += 1
    return counts
