#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the snippetfmt CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and merging them underneath the values given
on the command line.

Recognised keys::

    to = "sublime"            # default output format
    scope = "source.python"   # Sublime Text scope selector
    json_indent = 4           # indentation of .code-snippets documents
    log_level = "INFO"

"""

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from snippetfmt.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES
from snippetfmt.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("to", "scope", "json_indent", "log_level")
CONFIG_KEY_TYPES: Dict[str, type] = {"to": str, "scope": str, "json_indent": int, "log_level": str}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.snippetfmt]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get("snippetfmt", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.snippetfmt] section in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for ``.snippetfmt.toml``, ``.snippetfmt.yaml``,
    ``.snippetfmt.yml``, ``.snippetfmt.json`` and finally a ``pyproject.toml``
    that has a ``[tool.snippetfmt]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e.message)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Search order:

    1. The file named by the ``SNIPPETFMT_CONFIG`` environment variable
    2. Parent directory search from ``start_dir`` (or the cwd) to the root
    3. ``.snippetfmt.*`` files in the user's home directory

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension. Unknown keys are
    logged and dropped.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, has an unsupported format, or a
        value has the wrong type

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_with(config_path, "TOML", tomllib.load, binary=True)
    elif ext in (".yaml", ".yml"):
        config = _load_with(config_path, "YAML", yaml.safe_load)
    elif ext == ".json":
        config = _load_with(config_path, "JSON", json.load)
    else:
        raise ConfigError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", str(config_path))

    unknown = sorted(set(config) - set(CONFIG_KEYS))
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", config_path, ", ".join(unknown))
    config = {key: value for key, value in config.items() if key in CONFIG_KEYS}
    _check_value_types(config, config_path)
    return config


def _check_value_types(config: Dict[str, Any], config_path: Path) -> None:
    for key, value in config.items():
        expected = CONFIG_KEY_TYPES[key]
        # bool is an int subclass but never a valid indent.
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"Config key '{key}' in {config_path} must be {expected.__name__}, got {type(value).__name__}",
                str(config_path),
            )


def _load_with(config_path: Path, kind: str, loader: Any, binary: bool = False) -> Dict[str, Any]:
    try:
        if binary:
            with open(config_path, "rb") as f:
                config = loader(f)
        else:
            with open(config_path, "r", encoding="utf-8") as f:
                config = loader(f)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid {kind} in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None.
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"{kind} config file must contain a mapping at root level, got {type(config).__name__}",
            str(config_path),
        )
    return config


def load_config(explicit_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the explicit config file, or the discovered one, or nothing."""
    config_path = Path(explicit_path) if explicit_path else discover_config_file()
    if config_path is None:
        return {}
    logger.debug("Loading configuration from %s", config_path)
    return load_config_file(config_path)
