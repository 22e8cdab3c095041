"""YAML parsing and validation for grouper configuration.

This module handles parsing activitytext.yaml files and validating their
structure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml


@dataclass
class GrouperConfig:
    """Parsed YAML configuration."""
    config: Dict[str, Any] = field(default_factory=dict)
    baseline: List[str] = field(default_factory=list)
    history: List[Any] = field(default_factory=list)


class ConfigParseError(Exception):
    """Error parsing or validating a configuration file."""
    pass


VALID_HISTORY_TYPES = {'file', 's3'}


def parse_config_file(path: Union[str, Path]) -> GrouperConfig:
    """Parse and validate an activitytext.yaml file.

    Args:
        path: Path to the YAML file

    Returns:
        GrouperConfig with parsed options, baseline and history sources

    Raises:
        ConfigParseError: If the file is invalid
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding='utf-8') as f:
        return parse_config_string(f.read())


def parse_config_string(content: str) -> GrouperConfig:
    """Parse YAML configuration from a string.

    Args:
        content: YAML content as string

    Returns:
        GrouperConfig with parsed options, baseline and history sources
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigParseError("YAML root must be a mapping")

    return _validate_config_data(data)


def _validate_config_data(data: Dict[str, Any]) -> GrouperConfig:
    """Validate parsed YAML data structure.

    Raises:
        ConfigParseError: If validation fails
    """
    config = data.get('config') or {}
    if not isinstance(config, dict):
        raise ConfigParseError("'config' must be a mapping")
    _validate_options(config)

    baseline = data.get('baseline') or []
    if not isinstance(baseline, list):
        raise ConfigParseError("'baseline' must be a list")
    for i, entry in enumerate(baseline):
        if not isinstance(entry, str):
            raise ConfigParseError(f"Baseline entry {i} must be a string")

    history = data.get('history') or []
    if not isinstance(history, list):
        raise ConfigParseError("'history' must be a list")
    for i, spec in enumerate(history):
        _validate_history_spec(spec, i)

    return GrouperConfig(config=config, baseline=baseline, history=history)


def _validate_options(config: Dict[str, Any]) -> None:
    """Validate the 'config' mapping."""
    if 'min_group_length' in config:
        value = config['min_group_length']
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigParseError(
                "'min_group_length' must be a positive integer"
            )

    if 'base_path' in config and not isinstance(config['base_path'], str):
        raise ConfigParseError("'base_path' must be a string")


def _validate_history_spec(spec: Any, index: int) -> None:
    """Validate a history source specification.

    Args:
        spec: History specification (string or dict)
        index: Index in history list (for error messages)

    Raises:
        ConfigParseError: If validation fails
    """
    if isinstance(spec, str):
        # Short form: just a file pattern
        return

    if not isinstance(spec, dict):
        raise ConfigParseError(f"History {index} must be a string or mapping")

    # Long form: dict with pattern and options
    if 'pattern' not in spec:
        raise ConfigParseError(f"History {index} missing 'pattern'")
    if not isinstance(spec['pattern'], str):
        raise ConfigParseError(f"History {index}: 'pattern' must be a string")

    history_type = spec.get('type', 'file')
    if history_type not in VALID_HISTORY_TYPES:
        raise ConfigParseError(
            f"History {index} has invalid type '{history_type}'. "
            f"Valid types: {sorted(VALID_HISTORY_TYPES)}"
        )

    if history_type == 's3' and 'bucket' not in spec:
        raise ConfigParseError(f"S3 history {index} missing 'bucket'")
