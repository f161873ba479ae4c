"""YAML configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Optional, Union
from .schema import SegmenterConfig


class ConfigLoadError(Exception):
    """Exception raised when configuration loading or validation fails."""
    pass


def load_config(path: Union[str, Path]) -> SegmenterConfig:
    """
    Load and validate a dictbreak configuration from a YAML file.

    Relative dictionary paths are resolved against the directory of the file.

    Args:
        path: Path to YAML configuration file

    Returns:
        SegmenterConfig: Validated configuration object

    Raises:
        ConfigLoadError: If file cannot be read or configuration is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")

    return load_config_from_string(content, base_dir=path.parent, source=str(path))


def load_config_from_string(yaml_content: str, base_dir: Optional[Union[str, Path]] = None,
                            source: str = "content") -> SegmenterConfig:
    """
    Load and validate a dictbreak configuration from a YAML string.

    Args:
        yaml_content: YAML content as string
        base_dir: Directory relative dictionary paths are resolved against (left as-is if None)
        source: Name used in error messages

    Returns:
        SegmenterConfig: Validated configuration object

    Raises:
        ConfigLoadError: If YAML is invalid or configuration validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {source}: {e}")

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config {source} must contain a YAML mapping, got {type(data)}")

    try:
        config = SegmenterConfig.model_validate(data)
    except Exception as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

    # Run additional validation
    issues = config.validate_dictionaries()
    if issues:
        raise ConfigLoadError(f"Config validation issues: {'; '.join(issues)}")

    if base_dir is not None:
        for source_cfg in config.dictionaries:
            dictionary_path = Path(source_cfg.path)
            if not dictionary_path.is_absolute():
                source_cfg.path = str(Path(base_dir) / dictionary_path)

    return config
