"""
phraseline - Machine-learned phrase segmentation for Japanese, Chinese and Thai.

Scores every position between two characters with a fixed linear model
over character n-grams and splits where the score is positive.
"""

from .runtime.parser import Parser
from .model.schema import Language, UnsupportedLanguageError
from .model.loader import ModelLoadError, load_model, load_model_from_string
from .model.registry import (
    ModelRegistry,
    load_default_parser,
    load_default_japanese_parser,
    load_default_simplified_chinese_parser,
    load_default_traditional_chinese_parser,
    load_default_thai_parser,
)

__version__ = "0.1.0"

__all__ = [
    'Parser', 'Language', 'UnsupportedLanguageError', 'ModelLoadError',
    'load_model', 'load_model_from_string', 'ModelRegistry', 'load_default_parser',
    'load_default_japanese_parser', 'load_default_simplified_chinese_parser',
    'load_default_traditional_chinese_parser', 'load_default_thai_parser',
]
