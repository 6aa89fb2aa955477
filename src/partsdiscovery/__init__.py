"""
Parts discovery module.

Word statistics for surfacing key words from part catalogs:
- Word counting, removal and most frequent word lookup
- IDF across a corpus of catalogs
- TF-IDF scoring
- Top-K word selection
"""

from .catalog import PartCatalog
from .config import DiscoveryConfig
from .counts import calculate_word_counts, get_most_frequent_word, remove_word
from .discovery import PartDiscovery
from .errors import EmptyCorpusError, MissingIdfScoreError
from .idf import calculate_document_frequencies, calculate_idf_scores
from .ranking import DEFAULT_TOP_K, get_best_scored_words
from .schemas import CatalogKeywords
from .tfidf import get_tfidf_scores

__all__ = [
    "PartCatalog",
    "DiscoveryConfig",
    "PartDiscovery",
    "CatalogKeywords",
    "calculate_word_counts",
    "remove_word",
    "get_most_frequent_word",
    "calculate_document_frequencies",
    "calculate_idf_scores",
    "get_tfidf_scores",
    "get_best_scored_words",
    "DEFAULT_TOP_K",
    "EmptyCorpusError",
    "MissingIdfScoreError",
]
