"""
Keyword discovery over new editions of part catalogs.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, MutableMapping, Optional, Sequence

from .catalog import PartCatalog
from .config import DiscoveryConfig
from .counts import calculate_word_counts, get_most_frequent_word, remove_word
from .errors import EmptyCorpusError
from .idf import calculate_idf_scores
from .ranking import get_best_scored_words
from .schemas import CatalogKeywords
from .tfidf import get_tfidf_scores

logger = logging.getLogger(__name__)


class PartDiscovery:
    """
    Exposes key words from part catalogs.

    Each statistic is available on its own, and ``analyze`` chains them:

        - count words per catalog
        - drop configured ignored words
        - compute IDF across all catalogs
        - score each catalog with TF-IDF and keep the top words
    """

    def __init__(self, config: Optional[DiscoveryConfig] = None) -> None:
        self.config = config or DiscoveryConfig()

    def calculate_word_counts(self, catalog: PartCatalog) -> Dict[str, int]:
        return calculate_word_counts(catalog.catalog_words)

    def remove_word(self, word: str, word_counts: MutableMapping[str, int]) -> None:
        remove_word(word, word_counts)

    def get_most_frequent_word(self, word_counts: Optional[Dict[str, int]]) -> Optional[str]:
        return get_most_frequent_word(word_counts)

    def get_tfidf_scores(
        self,
        word_counts: Mapping[str, int],
        idf_scores: Mapping[str, float],
    ) -> Dict[str, float]:
        return get_tfidf_scores(word_counts, idf_scores)

    def get_best_scored_words(
        self,
        tfidf_scores: Mapping[str, float],
        k: Optional[int] = None,
    ) -> List[str]:
        return get_best_scored_words(tfidf_scores, self.config.top_k if k is None else k)

    def calculate_idf_scores(
        self,
        catalog_word_counts: Sequence[Mapping[str, int]],
    ) -> Dict[str, float]:
        return calculate_idf_scores(catalog_word_counts)

    def analyze(self, catalogs: Iterable[PartCatalog]) -> List[CatalogKeywords]:
        """
        Run the full pipeline and return one report per catalog, in input order.

        Raises:
            EmptyCorpusError: If no catalogs are given.
        """
        catalogs = list(catalogs)
        if not catalogs:
            raise EmptyCorpusError("no catalogs to analyze")

        all_counts: List[Dict[str, int]] = []
        for catalog in catalogs:
            counts = self.calculate_word_counts(catalog)
            for word in self.config.ignored_words:
                self.remove_word(word, counts)
            all_counts.append(counts)

        if self.config.ignored_words and not any(all_counts):
            logger.warning("All catalog words were removed by ignored_words")

        idf_scores = self.calculate_idf_scores(all_counts)

        reports: List[CatalogKeywords] = []
        for catalog, counts in zip(catalogs, all_counts):
            tfidf_scores = self.get_tfidf_scores(counts, idf_scores)
            reports.append(
                CatalogKeywords(
                    catalog_id=catalog.catalog_id,
                    total_words=sum(counts.values()),
                    distinct_words=len(counts),
                    most_frequent_word=self.get_most_frequent_word(counts),
                    best_scored_words=self.get_best_scored_words(tfidf_scores),
                )
            )
            logger.debug(
                "Catalog %s: %d distinct words scored",
                catalog.catalog_id,
                len(counts),
            )
        return reports
