"""
Configuration Management

Loads, validates and saves the JSON configuration used by the command line
runner. Values missing from the file fall back to DEFAULT_CONFIG.
"""

import json
import os
from typing import Dict, Optional

from .models import DEFAULT_K


DEFAULT_CONFIG_PATH = "./classifier_config.json"

DEFAULT_CONFIG: Dict = {
    "default_model": "knn",
    "k": DEFAULT_K,
    "include_confusion_matrix": True,
    "max_workers": None,
    "log_level": "INFO"
}

_VALID_MODELS = ("knn", "decision_tree", "naive_bayes", "all")
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict:
    """
    Load configuration from a JSON file, merged over the defaults.

    Args:
        config_path (str): Path to the configuration file

    Returns:
        dict: Validated configuration

    Raises:
        FileNotFoundError: If config file does not exist
        json.JSONDecodeError: If config file is not valid JSON
        ValueError: If a configuration value is invalid
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        loaded = json.load(f)

    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration must be a JSON object, got: {type(loaded).__name__}")

    config = dict(DEFAULT_CONFIG)
    config.update(loaded)
    return validate_config(config)


def save_config(config: Dict, config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config (dict): Configuration dictionary to save
        config_path (str): Path to the configuration file
    """
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(config, f, indent=2)


def validate_config(config: Dict) -> Dict:
    """
    Validate configuration parameters.

    Validates that:
    - default_model is a known model name or 'all'
    - k is a positive integer
    - include_confusion_matrix is a boolean
    - max_workers is a positive integer or null
    - log_level is a standard logging level name

    Args:
        config: Configuration dictionary to validate

    Returns:
        dict: Validated configuration with normalized values

    Raises:
        ValueError: If configuration values are invalid
    """
    validated_config = dict(config)

    model = config.get('default_model', DEFAULT_CONFIG['default_model'])
    if model not in _VALID_MODELS:
        raise ValueError(
            f"default_model must be one of {', '.join(_VALID_MODELS)}, got: {model!r}"
        )
    validated_config['default_model'] = model

    k = config.get('k', DEFAULT_CONFIG['k'])
    if isinstance(k, bool) or not isinstance(k, int):
        raise ValueError(f"k must be an integer, got: {type(k).__name__}")
    if k < 1:
        raise ValueError(f"k must be a positive integer, got: {k}")
    validated_config['k'] = k

    include_matrix = config.get('include_confusion_matrix', DEFAULT_CONFIG['include_confusion_matrix'])
    if not isinstance(include_matrix, bool):
        raise ValueError(
            f"include_confusion_matrix must be a boolean (true/false), got: {type(include_matrix).__name__}"
        )
    validated_config['include_confusion_matrix'] = include_matrix

    max_workers = config.get('max_workers', DEFAULT_CONFIG['max_workers'])
    if max_workers is not None:
        if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
            raise ValueError(f"max_workers must be a positive integer or null, got: {max_workers!r}")
    validated_config['max_workers'] = max_workers

    log_level = str(config.get('log_level', DEFAULT_CONFIG['log_level'])).upper()
    if log_level not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {', '.join(_VALID_LOG_LEVELS)}, got: {log_level}"
        )
    validated_config['log_level'] = log_level

    return validated_config


def get_config(config_path: Optional[str] = None) -> Dict:
    """
    Configuration from config_path, or the defaults when no path is given.

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    if config_path is None:
        return dict(DEFAULT_CONFIG)
    return load_config(config_path)
