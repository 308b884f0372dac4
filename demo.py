#!/usr/bin/env python3
"""
phraseline Demo - Shows phrase segmentation with the built-in models.
Prints each sample sentence split into chunks, with the raw boundary scores.
"""

import sys
from pathlib import Path

# Add src to path so we can import phraseline
sys.path.insert(0, str(Path(__file__).parent / "src"))

from phraseline.core.util import ConsoleLogger
from phraseline.model.loader import ModelLoadError
from phraseline.model.registry import ModelRegistry
from phraseline.model.schema import Language

SAMPLES = {
    Language.JAPANESE: [
        "今日は天気です。",
        "私はその人を常に先生と呼んでいた。",
    ],
    Language.SIMPLIFIED_CHINESE: ["我们的目标是让每个人都能读懂。"],
    Language.TRADITIONAL_CHINESE: ["我們的目標是讓每個人都能讀懂。"],
    Language.THAI: ["วันนี้อากาศดีมาก"],
}

def main():
    """Run the demo."""
    print("🚀 phraseline Demo")
    print("=" * 50)

    registry = ModelRegistry(logger=ConsoleLogger())

    for language, sentences in SAMPLES.items():
        try:
            parser = registry.create_parser(language)
        except ModelLoadError as e:
            print(f"❌ {language.value}: {e}")
            continue

        print(f"\n🌐 {language.value} (base score {parser.base_score})")
        for sentence in sentences:
            result = parser.segment(sentence)
            scores = parser.score_positions(sentence)
            print(f"   Input:  {sentence}")
            print(f"   Chunks: {' | '.join(result.chunks)}")
            print(f"   Boundaries: {result.boundaries}")
            print(f"   Max score: {int(scores.max()) if scores.size else 0}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
