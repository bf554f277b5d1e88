"""
YAML configuration for traversal runs.

Document format:

    values:
      - hourglass
      - cat
    filter:
      type: length_gt
      length: 5
    log_level: INFO

Every key is optional. The filter uses the same tagged dicts as
strcursor.serialization.
"""

from dataclasses import dataclass, field
from typing import List

import yaml

from strcursor.predicates import LengthGreaterThan, StringPredicate
from strcursor.serialization import predicate_from_dict


class ConfigError(Exception):
    """Raised when a configuration document is malformed."""
    pass


@dataclass
class TraversalConfig:
    values: List[str] = field(default_factory=list)
    predicate: StringPredicate = field(default_factory=lambda: LengthGreaterThan(5))
    log_level: str = "INFO"


def config_from_yaml(text: str) -> TraversalConfig:
    """
    Parse a YAML configuration document.

    Raises:
        ConfigError: If the YAML is invalid or a key has the wrong shape
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")

    if data is None:
        return TraversalConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    config = TraversalConfig()

    values = data.get("values", [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ConfigError("'values' must be a list of strings")
    config.values = values

    if "filter" in data:
        if not isinstance(data["filter"], dict):
            raise ConfigError("'filter' must be a mapping")
        try:
            config.predicate = predicate_from_dict(data["filter"])
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid filter: {e}")

    log_level = str(data.get("log_level", config.log_level)).upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigError(f"Unknown log_level: {log_level}")
    config.log_level = log_level

    return config


def load_config(filepath: str) -> TraversalConfig:
    """
    Load a configuration file from disk.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigError: If the document is malformed
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return config_from_yaml(f.read())
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")
