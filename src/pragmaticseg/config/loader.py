"""YAML segmenter configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union
from .schema import SegmenterConfig

class ConfigLoadError(Exception):
    """Exception raised when configuration loading or validation fails."""
    pass

def _validate(data: Any, source: str) -> SegmenterConfig:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{source} must contain a YAML mapping, got {type(data)}")

    try:
        config = SegmenterConfig.model_validate(data)
    except Exception as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

    issues = config.validate_rules()
    if issues:
        raise ConfigLoadError(f"Config validation issues: {'; '.join(issues)}")

    return config

def load_config(path: Union[str, Path]) -> SegmenterConfig:
    """
    Load and validate a segmenter configuration from a YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to YAML config file

    Returns:
        SegmenterConfig: Validated configuration

    Raises:
        ConfigLoadError: If file cannot be read or config is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")

    return _validate(data, f"Config file {path}")

def load_config_from_string(yaml_content: str) -> SegmenterConfig:
    """
    Load and validate a segmenter configuration from a YAML string.

    Raises:
        ConfigLoadError: If YAML is invalid or config validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")

    return _validate(data, "Config content")
