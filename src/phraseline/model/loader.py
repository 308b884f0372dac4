"""Weight table and configuration loading and validation."""

import json
import yaml
from pathlib import Path
from typing import Any, Optional, Union
from pydantic import ValidationError
from ..core.abc import Logger
from ..core.types import WeightTable
from ..runtime.parser import freeze_table
from .schema import SegmenterConfig, WeightTableModel

class ModelLoadError(Exception):
    """Exception raised when a weight table or config file cannot be loaded or is invalid."""
    pass

def _parse_content(content: str, fmt: str, source: str) -> Any:
    """Decode JSON or YAML text, wrapping decoder errors in ModelLoadError."""
    if fmt == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ModelLoadError(f"Invalid JSON in {source}: {e}")
    if fmt == "yaml":
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ModelLoadError(f"Invalid YAML in {source}: {e}")
    raise ModelLoadError(f"Unsupported model format '{fmt}' for {source}; expected json or yaml")

def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return "json"

def validate_table(data: Any, source: str = "<string>",
                   logger: Optional[Logger] = None) -> WeightTable:
    """
    Validate decoded table data and freeze it.

    Args:
        data: Decoded JSON/YAML content
        source: Name used in error messages
        logger: Optional structured logger for non-fatal issues

    Returns:
        WeightTable: Read-only weight table

    Raises:
        ModelLoadError: If the data is not a mapping of groups to integer weights
    """
    if not isinstance(data, dict):
        raise ModelLoadError(f"Model {source} must contain a mapping, got {type(data).__name__}")

    try:
        model = WeightTableModel.model_validate(data)
    except ValidationError as e:
        raise ModelLoadError(f"Model validation failed for {source}: {e}")

    issues = model.validate_groups()
    if logger:
        for issue in issues:
            logger.warn("model_issue", source=source, issue=issue)
        logger.info("model_loaded", source=source,
                    groups=len(model.root), total_weight=model.total_weight())

    return freeze_table(model.root)

def load_model(path: Union[str, Path], logger: Optional[Logger] = None) -> WeightTable:
    """
    Load and validate a weight table from a JSON or YAML file.

    Args:
        path: Path to a .json, .yaml or .yml model file
        logger: Optional structured logger

    Returns:
        WeightTable: Read-only weight table

    Raises:
        ModelLoadError: If the file cannot be read or the table is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ModelLoadError(f"Model file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ModelLoadError(f"Cannot read model file {path}: {e}")

    data = _parse_content(content, _format_for(path), str(path))
    return validate_table(data, source=str(path), logger=logger)

def load_model_from_string(content: str, fmt: str = "json",
                           logger: Optional[Logger] = None) -> WeightTable:
    """
    Load and validate a weight table from a JSON or YAML string.

    Args:
        content: Serialized table
        fmt: "json" or "yaml"
        logger: Optional structured logger

    Returns:
        WeightTable: Read-only weight table

    Raises:
        ModelLoadError: If the content is malformed or the table is invalid
    """
    data = _parse_content(content, fmt.lower(), "<string>")
    return validate_table(data, logger=logger)

def load_config(path: Union[str, Path]) -> SegmenterConfig:
    """
    Load segmenter configuration from a YAML file.

    Args:
        path: Path to YAML config file

    Returns:
        SegmenterConfig: Validated configuration

    Raises:
        ModelLoadError: If the file cannot be read or the config is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ModelLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ModelLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ModelLoadError(f"Cannot read config file {path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ModelLoadError(f"Config file must contain a YAML mapping, got {type(data).__name__}")

    try:
        return SegmenterConfig.model_validate(data)
    except ValidationError as e:
        raise ModelLoadError(f"Config validation failed: {e}")
