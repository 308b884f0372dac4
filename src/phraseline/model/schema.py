"""Pydantic schemas for weight tables and segmenter configuration."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Dict, List, Optional, Union
from pydantic import BaseModel, Field, RootModel, field_validator, model_validator
from ..core.features import FEATURE_GROUPS, GROUP_WIDTHS
from ..runtime.parser import INT64_MAX, INT64_MIN

class UnsupportedLanguageError(ValueError):
    """Exception raised when a language tag has no built-in model."""
    pass

class Language(str, Enum):
    """Languages with a built-in weight table, valued by their model tag."""
    JAPANESE = "ja"
    SIMPLIFIED_CHINESE = "zh-hans"
    TRADITIONAL_CHINESE = "zh-hant"
    THAI = "th"

    @classmethod
    def tags(cls) -> List[str]:
        """All supported tags, in declaration order."""
        return [lang.value for lang in cls]

    @classmethod
    def from_tag(cls, tag: Union[str, "Language"]) -> "Language":
        """
        Resolve a language tag such as "ja" or "ZH_HANS".

        Raises:
            UnsupportedLanguageError: If the tag names no supported language
        """
        if isinstance(tag, cls):
            return tag
        normalized = str(tag).strip().lower().replace("_", "-")
        for lang in cls:
            if lang.value == normalized:
                return lang
        raise UnsupportedLanguageError(
            f"Unsupported language '{tag}'; expected one of: {', '.join(cls.tags())}"
        )

Weight = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]

class WeightTableModel(RootModel[Dict[str, Dict[str, Weight]]]):
    """Feature group -> n-gram -> signed 64-bit integer weight."""

    @model_validator(mode="after")
    def _check_weight_sums(self) -> "WeightTableModel":
        # bounds the base score and every position score to int64
        positive = sum(w for ngrams in self.root.values() for w in ngrams.values() if w > 0)
        negative = sum(w for ngrams in self.root.values() for w in ngrams.values() if w < 0)
        if positive > INT64_MAX:
            raise ValueError(f"Sum of positive weights {positive} exceeds {INT64_MAX}")
        if negative < INT64_MIN:
            raise ValueError(f"Sum of negative weights {negative} is below {INT64_MIN}")
        return self

    def total_weight(self) -> int:
        """Sum of every weight in the table."""
        return sum(w for ngrams in self.root.values() for w in ngrams.values())

    def entry_counts(self) -> Dict[str, int]:
        """Number of n-grams per feature group."""
        return {group: len(ngrams) for group, ngrams in self.root.items()}

    def validate_groups(self) -> List[str]:
        """Check group names and n-gram widths and return any issues."""
        issues = []

        unknown = sorted(g for g in self.root if g not in FEATURE_GROUPS)
        if unknown:
            issues.append(f"Unknown feature groups (never scored): {unknown}")

        empty = sorted(g for g, ngrams in self.root.items() if "" in ngrams)
        if empty:
            issues.append(f"Groups with an empty n-gram: {empty}")

        for group, ngrams in self.root.items():
            width = GROUP_WIDTHS.get(group)
            if width is None:
                continue
            mismatched = [n for n in ngrams if n and len(n) != width]
            if mismatched:
                issues.append(
                    f"Group '{group}' has {len(mismatched)} n-grams that are not {width} characters long"
                )

        return issues

class SegmenterConfig(BaseModel):
    """Runtime configuration for building and running a segmenter."""
    language: Language = Field(default=Language.JAPANESE,
                               description="Built-in model to use when no model file is given")
    models_dir: Optional[Path] = Field(default=None,
                                       description="Directory holding <tag>.json model files")
    delimiter: str = Field(default="\n", description="Separator used when printing chunks")

    class Config:
        extra = "forbid"  # Strict validation

    @field_validator("language", mode="before")
    @classmethod
    def _resolve_language(cls, value):
        return Language.from_tag(value)
