"""
Tests for the catalog discovery pipeline.
"""

from __future__ import annotations

import math

import pytest

from src.partsdiscovery import (
    CatalogKeywords,
    DiscoveryConfig,
    EmptyCorpusError,
    PartCatalog,
    PartDiscovery,
)


@pytest.fixture
def sample_catalogs() -> list[PartCatalog]:
    """Create sample catalogs for testing."""
    return [
        PartCatalog(
            catalog_id="2024",
            catalog_words=["hinge", "screw", "hinge", "the", "screw", "hinge", "bracket"],
        ),
        PartCatalog(
            catalog_id="2025",
            catalog_words=["spring", "screw", "the", "spring", "latch"],
        ),
        PartCatalog(
            catalog_id="2026",
            catalog_words=["screw", "the", "gasket"],
        ),
    ]


def test_analyze_reports_each_catalog(sample_catalogs: list[PartCatalog]):
    reports = PartDiscovery().analyze(sample_catalogs)

    assert [r.catalog_id for r in reports] == ["2024", "2025", "2026"]
    assert all(isinstance(r, CatalogKeywords) for r in reports)

    first = reports[0]
    assert first.total_words == len(sample_catalogs[0]) == 7
    assert first.distinct_words == 4
    assert first.most_frequent_word == "hinge"
    # "screw" and "the" are in every catalog and score 0.
    assert first.best_scored_words == ["hinge", "bracket", "screw", "the"]


def test_analyze_with_ignored_words(sample_catalogs: list[PartCatalog]):
    config = DiscoveryConfig(top_k=2, ignored_words=["the", "screw"])
    reports = PartDiscovery(config).analyze(sample_catalogs)

    second = reports[1]
    assert second.total_words == 3
    assert second.most_frequent_word == "spring"
    assert second.best_scored_words == ["spring", "latch"]
    assert reports[2].best_scored_words == ["gasket"]


def test_analyze_empty_corpus_raises():
    with pytest.raises(EmptyCorpusError):
        PartDiscovery().analyze([])


def test_analyze_catalog_without_words():
    reports = PartDiscovery().analyze([PartCatalog(catalog_id="blank")])

    assert reports[0].most_frequent_word is None
    assert reports[0].best_scored_words == []
    assert reports[0].total_words == 0


def test_facade_methods(sample_catalogs: list[PartCatalog]):
    discovery = PartDiscovery(DiscoveryConfig(top_k=1))

    counts = [discovery.calculate_word_counts(c) for c in sample_catalogs]
    discovery.remove_word("the", counts[0])
    idf = discovery.calculate_idf_scores(counts)
    scores = discovery.get_tfidf_scores(counts[0], idf)

    assert "the" not in counts[0]
    assert idf["the"] == pytest.approx(math.log10(3 / 2))
    assert scores["hinge"] == pytest.approx(3 * math.log10(3))
    assert discovery.get_best_scored_words(scores) == ["hinge"]
    assert discovery.get_best_scored_words(scores, k=5)[0] == "hinge"
    assert discovery.get_most_frequent_word(counts[0]) == "hinge"


def test_config_rejects_negative_top_k():
    with pytest.raises(ValueError):
        DiscoveryConfig(top_k=-1)
