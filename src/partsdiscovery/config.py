"""
Configuration for catalog keyword discovery.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class DiscoveryConfig:
    """Settings for PartDiscovery.analyze."""

    top_k: int = 10
    ignored_words: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.top_k < 0:
            raise ValueError("top_k must be non-negative")
