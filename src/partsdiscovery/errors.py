"""
Errors raised by the parts discovery statistics.
"""

from __future__ import annotations


class EmptyCorpusError(ValueError):
    """Raised when IDF scores are requested for a corpus with no catalogs."""


class MissingIdfScoreError(KeyError):
    """Raised when a catalog word has no IDF score to weight it with."""

    def __init__(self, word: str) -> None:
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f"no IDF score for word {self.word!r}"
