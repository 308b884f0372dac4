"""Boundary scoring and phrase segmentation over a fixed n-gram weight table."""

from types import MappingProxyType
from typing import List, Mapping
import numpy as np
from ..core.features import extract_features
from ..core.types import Segmentation, WeightTable

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

def freeze_table(table: Mapping[str, Mapping[str, int]]) -> WeightTable:
    """Return a read-only copy of a weight table."""
    return MappingProxyType({
        group: MappingProxyType(dict(ngrams))
        for group, ngrams in table.items()
    })

def compute_base_score(table: Mapping[str, Mapping[str, int]]) -> int:
    """
    Derive the bias term added to every candidate boundary.

    The bias is -((S + 1) / 2) where S is the sum of all weights in the
    table and the division truncates toward zero.

    Args:
        table: Weight table

    Returns:
        int: Base score (0 for an empty table)
    """
    total = sum(weight for ngrams in table.values() for weight in ngrams.values())
    numerator = total + 1
    half = abs(numerator) // 2
    return -half if numerator >= 0 else half

class Parser:
    """
    Rule-free phrase segmenter.

    Scores every position between two characters with a linear model over
    thirteen overlapping n-gram features and splits wherever the score is
    positive. The parser is immutable; one instance can serve any number of
    callers concurrently.
    """

    def __init__(self, table: Mapping[str, Mapping[str, int]]):
        """
        Initialize parser with a weight table.

        Args:
            table: Mapping of feature group to n-gram to integer weight.
                   Any mapping is accepted, including an empty one.
        """
        self._table = freeze_table(table)
        self._base_score = compute_base_score(self._table)

    @property
    def table(self) -> WeightTable:
        """Read-only weight table."""
        return self._table

    @property
    def base_score(self) -> int:
        """Bias term derived from the table at construction."""
        return self._base_score

    def _get_score(self, group: str, ngram: str) -> int:
        # n-grams cut off by the sentence edges never score
        if not ngram:
            return 0
        ngrams = self._table.get(group)
        if ngrams is None:
            return 0
        return ngrams.get(ngram, 0)

    def _position_scores(self, sentence: str) -> List[int]:
        scores = []
        for i in range(1, len(sentence)):
            score = self._base_score
            for group, ngram in extract_features(sentence, i):
                score += self._get_score(group, ngram)
            scores.append(score)
        return scores

    def score_positions(self, sentence: str) -> np.ndarray:
        """
        Score every interior position of a sentence.

        Args:
            sentence: Input sentence

        Returns:
            np.ndarray: vector of length max(len(sentence) - 1, 0); element k holds
                        the score of the boundary before sentence[k + 1]. The dtype is
                        int64, or object when a score falls outside the int64 range
                        (only possible for tables that bypassed the loader)
        """
        scores = self._position_scores(sentence)
        if all(INT64_MIN <= s <= INT64_MAX for s in scores):
            return np.array(scores, dtype=np.int64)
        return np.array(scores, dtype=object)

    def parse_boundaries(self, sentence: str) -> List[int]:
        """
        Find the chunk boundaries of a sentence.

        Args:
            sentence: Input sentence

        Returns:
            List[int]: Strictly increasing codepoint offsets p with 0 < p < len(sentence)
        """
        return [i for i, score in enumerate(self._position_scores(sentence), start=1) if score > 0]

    def parse(self, sentence: str) -> List[str]:
        """
        Split a sentence into semantic chunks.

        Args:
            sentence: Input sentence

        Returns:
            List[str]: Non-empty chunks whose concatenation is the sentence;
                       [] for an empty sentence
        """
        return self.segment(sentence).chunks

    def segment(self, sentence: str) -> Segmentation:
        """
        Split a sentence and keep the boundaries that produced the chunks.

        Args:
            sentence: Input sentence

        Returns:
            Segmentation: Chunks and boundaries from one scoring pass
        """
        if not sentence:
            return Segmentation(chunks=[], boundaries=[])

        boundaries = self.parse_boundaries(sentence)
        chunks = []
        start = 0
        for boundary in boundaries:
            chunks.append(sentence[start:boundary])
            start = boundary
        chunks.append(sentence[start:])

        return Segmentation(chunks=chunks, boundaries=boundaries)
