from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class CatalogKeywords(BaseModel):
    """Keyword statistics discovered for one catalog."""

    catalog_id: str
    total_words: int = Field(
        default=0,
        ge=0,
        description="Number of words in the catalog after ignored words are removed",
    )
    distinct_words: int = Field(default=0, ge=0)
    most_frequent_word: Optional[str] = None
    best_scored_words: List[str] = Field(
        default_factory=list,
        description="Highest TF-IDF scored words, best first",
    )
