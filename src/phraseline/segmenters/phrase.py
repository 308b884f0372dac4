"""Phrase segmenter backed by a weight-table Parser."""

from typing import List, Optional
from ..core.abc import Logger, Meter
from ..runtime.parser import Parser

class PhraseSegmenter:
    """
    Text segmenter over a Parser, with optional logging and metrics.
    Chunks are returned as produced; no stripping or filtering.
    """

    def __init__(self, parser: Parser, *, logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            parser: Parser holding the weight table
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.parser = parser
        self.log = logger
        self.meter = meter

    def segment(self, text: str) -> List[str]:
        """
        Segment text into phrase chunks.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Chunks whose concatenation is the input text
        """
        chunks = self.parser.parse(text)

        if self.meter:
            self.meter.inc("phraseline.segments")
            self.meter.observe("phraseline.chunks", float(len(chunks)))
        if self.log:
            self.log.info("segmented", text_length=len(text), chunks=len(chunks))

        return chunks

    def segment_lines(self, text: str) -> List[List[str]]:
        """
        Segment each line of a multi-line text independently.

        Line breaks are not part of any chunk; empty lines give empty lists.
        """
        return [self.segment(line) for line in text.splitlines()]
