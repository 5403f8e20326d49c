"""Shared utilities for lattice match workflows."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from latticeMatch.circular.ordering import ConfigurationError


def configure_logging(debug: bool = False, log_config: Optional[Dict[str, Any]] = None) -> None:
    """Configure application logging.

    Parameters:
        debug: Whether to enable DEBUG logging.
        log_config: Optional logging configuration dictionary.

    Returns:
        None.
    """

    log_config = log_config or {}
    level_name = str(log_config.get("level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)
    if debug:
        level = logging.DEBUG
    log_format = log_config.get("format", "%(levelname)s - %(name)s - %(message)s")
    handlers = [logging.StreamHandler()]
    file_path = log_config.get("file_path")
    if file_path:
        handlers.append(logging.FileHandler(file_path))
    logging.basicConfig(level=level, format=log_format, handlers=handlers, force=True)


def load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load a YAML configuration file.

    Parameters:
        config_path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary.
    """

    with Path(config_path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


DEFAULT_CONFIG: Dict[str, Any] = {
    "sort_mode": "lower",
    "report": {"precision": 6},
    "logging": {"level": "WARNING"},
}


def load_lattice_match_config(config_path: Optional[Path]) -> Tuple[Dict[str, Any], bool]:
    """Load the ``lattice_match`` section with defaults applied.

    A missing file is not an error: the defaults are returned and the caller
    reports it once logging is configured. Keys left empty in the file keep
    their default value.

    Parameters:
        config_path: Path to the YAML file, or None for defaults only.

    Returns:
        Configuration dictionary for the lattice match workflow, and True
        when a config path was given but the file does not exist.

    Raises:
        ConfigurationError: If a nested section is not a mapping.
    """

    section: Dict[str, Any] = {}
    missing = False
    if config_path is not None:
        try:
            section = load_yaml_config(config_path).get("lattice_match", {}) or {}
        except FileNotFoundError:
            missing = True
    config: Dict[str, Any] = {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in DEFAULT_CONFIG.items()
    }
    for key, value in section.items():
        if value is None:
            continue
        if isinstance(config.get(key), dict):
            if not isinstance(value, dict):
                raise ConfigurationError(f"Config key lattice_match.{key} must be a mapping.")
            config[key].update({name: item for name, item in value.items() if item is not None})
        else:
            config[key] = value
    return config, missing
