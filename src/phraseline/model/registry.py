"""Resolve languages to built-in weight tables and build parsers from them."""

import os
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional, Union
from ..core.abc import Logger
from ..core.types import WeightTable
from ..runtime.parser import Parser
from .loader import ModelLoadError, load_model, load_model_from_string
from .schema import Language

MODELS_DIR_ENV = "PHRASELINE_MODELS_DIR"

# distribution that bundles the per-language model files
BUNDLED_MODELS_PACKAGE = "budoux"

class ModelRegistry:
    """
    Loads one weight table per language and hands it to parsers.

    Tables are looked up in `models_dir` (or $PHRASELINE_MODELS_DIR) as
    `<tag>.json`, then in the model files bundled with the budoux
    distribution. Each table is loaded at most once per registry.
    """

    def __init__(self, models_dir: Optional[Union[str, Path]] = None,
                 logger: Optional[Logger] = None):
        """
        Initialize registry.

        Args:
            models_dir: Directory with <tag>.json files (if None, uses PHRASELINE_MODELS_DIR)
            logger: Optional structured logger
        """
        if models_dir is None:
            models_dir = os.environ.get(MODELS_DIR_ENV) or None
        self.models_dir = Path(models_dir) if models_dir is not None else None
        self.log = logger
        self._tables: Dict[Language, WeightTable] = {}

    def available_languages(self) -> List[Language]:
        """Languages this registry can resolve."""
        return list(Language)

    def get_table(self, language: Union[Language, str]) -> WeightTable:
        """
        Get the weight table for a language, loading it on first use.

        Args:
            language: Language enum member or tag

        Returns:
            WeightTable: Read-only weight table

        Raises:
            UnsupportedLanguageError: If the tag is not supported
            ModelLoadError: If the model resource is missing or invalid
        """
        lang = Language.from_tag(language)
        table = self._tables.get(lang)
        if table is None:
            table = self._load(lang)
            self._tables[lang] = table
        return table

    def create_parser(self, language: Union[Language, str]) -> Parser:
        """Build a parser over the built-in table of a language."""
        return Parser(self.get_table(language))

    def _load(self, lang: Language) -> WeightTable:
        filename = f"{lang.value}.json"

        if self.models_dir is not None:
            path = self.models_dir / filename
            if path.exists():
                if self.log:
                    self.log.info("model_source", language=lang.value, path=str(path))
                return load_model(path, logger=self.log)
            if self.log:
                self.log.warn("model_not_in_models_dir", language=lang.value,
                              models_dir=str(self.models_dir))

        return self._load_bundled(lang, filename)

    def _load_bundled(self, lang: Language, filename: str) -> WeightTable:
        try:
            resource = resources.files(BUNDLED_MODELS_PACKAGE) / "models" / filename
        except ModuleNotFoundError as e:
            raise ModelLoadError(
                f"No model for '{lang.value}': set {MODELS_DIR_ENV} or install "
                f"the '{BUNDLED_MODELS_PACKAGE}' package ({e})"
            )

        if not resource.is_file():
            raise ModelLoadError(f"Bundled model not found: {BUNDLED_MODELS_PACKAGE}/models/{filename}")

        try:
            content = resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ModelLoadError(f"Cannot read bundled model {filename}: {e}")

        if self.log:
            self.log.info("model_source", language=lang.value,
                          path=f"{BUNDLED_MODELS_PACKAGE}/models/{filename}")
        return load_model_from_string(content, fmt="json", logger=self.log)

def load_default_parser(language: Union[Language, str],
                        models_dir: Optional[Union[str, Path]] = None) -> Parser:
    """Build a parser equipped with the built-in model of a language."""
    return ModelRegistry(models_dir=models_dir).create_parser(language)

def load_default_japanese_parser() -> Parser:
    """Build a parser equipped with the default Japanese model."""
    return load_default_parser(Language.JAPANESE)

def load_default_simplified_chinese_parser() -> Parser:
    """Build a parser equipped with the default Simplified Chinese model."""
    return load_default_parser(Language.SIMPLIFIED_CHINESE)

def load_default_traditional_chinese_parser() -> Parser:
    """Build a parser equipped with the default Traditional Chinese model."""
    return load_default_parser(Language.TRADITIONAL_CHINESE)

def load_default_thai_parser() -> Parser:
    """Build a parser equipped with the default Thai model."""
    return load_default_parser(Language.THAI)
