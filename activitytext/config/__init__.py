"""YAML-based configuration for the activity grouper.

This module reads the baseline strings, history sources and options of a
grouper from a declarative YAML file.

Example activitytext.yaml:
    config:
      base_path: .
      min_group_length: 3

    baseline:
      - "pause"
      - "meeting"

    history:
      - "activities/*.txt"
      - pattern: "exports/*.log"
        type: s3
        bucket: my-bucket

Usage:
    from activitytext.config import load_grouper
    grouper = load_grouper('activitytext.yaml')

CLI:
    python -m activitytext.config "text to segment"
"""

from .parser import (
    parse_config_file,
    parse_config_string,
    GrouperConfig,
    ConfigParseError,
)
from .converter import config_to_sources, config_to_grouper
from .runner import load_grouper, main

__all__ = [
    'parse_config_file',
    'parse_config_string',
    'GrouperConfig',
    'ConfigParseError',
    'config_to_sources',
    'config_to_grouper',
    'load_grouper',
    'main',
]
