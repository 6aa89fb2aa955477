"""
Part catalog records fed into keyword discovery.
"""

from __future__ import annotations

import dataclasses
from typing import List


@dataclasses.dataclass
class PartCatalog:
    """A single edition of a part catalog, already tokenized into words."""

    catalog_id: str
    catalog_words: List[str] = dataclasses.field(default_factory=list)

    def __len__(self) -> int:
        return len(self.catalog_words)
