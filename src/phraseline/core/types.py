"""Data types and result structures for phraseline operations."""

from dataclasses import dataclass, field
from typing import List, Mapping

# feature group -> n-gram -> weight; missing entries weigh 0
WeightTable = Mapping[str, Mapping[str, int]]

@dataclass
class Segmentation:
    """Result of segmenting one sentence."""
    chunks: List[str] = field(default_factory=list)      # in input order
    boundaries: List[int] = field(default_factory=list)  # codepoint offsets, strictly increasing

    @property
    def chunk_count(self) -> int:
        """Number of chunks produced."""
        return len(self.chunks)

    @property
    def text(self) -> str:
        """The original sentence, rebuilt from the chunks."""
        return "".join(self.chunks)
