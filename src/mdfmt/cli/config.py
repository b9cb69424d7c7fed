#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/cli/config.py
"""Configuration file discovery and loading for the mdfmt CLI.

Configuration is a flat table of option names shared by
``MarkdownRendererOptions`` and ``MarkdownParserOptions``, e.g.::

    # .mdfmt.toml
    heading_style = "setext"
    list_indent = 4
    format_code_blocks = false

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from mdfmt.constants import CONFIG_FILENAMES
from mdfmt.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

logger = logging.getLogger(__name__)

# Options that cannot be expressed in a config file
_NON_CONFIG_FIELDS = {"render_node_hook"}


def _load_pyproject_mdfmt_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.mdfmt] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary, or empty dict if the section is missing

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("mdfmt", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.mdfmt] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root. In each directory the
    dedicated files (.mdfmt.toml, .mdfmt.yaml, .mdfmt.yml, .mdfmt.json) are
    checked first, then a pyproject.toml with a [tool.mdfmt] section.

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
                if _load_pyproject_mdfmt_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The cwd and its parents are searched first (see ``find_config_in_parents``),
    then the user's home directory for the dedicated config filenames.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
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
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_mdfmt_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MDFMT_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug(f"Using configuration from {discovered_path}")
        return load_config_file(discovered_path)

    return {}


def _normalize_list_indent(value: Any) -> Any:
    """Accept an indent as a string, a count of spaces, or the word 'tab'."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return " " * value
    if isinstance(value, str) and value.lower() == "tab":
        return "\t"
    return value


def split_config(config: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Split a flat config mapping into renderer and parser keyword arguments.

    Unknown keys are logged and ignored.

    Parameters
    ----------
    config : dict
        Flat configuration mapping

    Returns
    -------
    tuple of (dict, dict)
        Renderer option values and parser option values

    """
    renderer_fields = set(MarkdownRendererOptions.field_names()) - _NON_CONFIG_FIELDS
    parser_fields = set(MarkdownParserOptions.field_names())

    renderer_values: Dict[str, Any] = {}
    parser_values: Dict[str, Any] = {}
    for key, value in config.items():
        normalized_key = key.replace("-", "_")
        if normalized_key in renderer_fields:
            if normalized_key == "list_indent":
                value = _normalize_list_indent(value)
            renderer_values[normalized_key] = value
        elif normalized_key in parser_fields:
            parser_values[normalized_key] = value
        else:
            logger.warning(f"Ignoring unknown configuration key: {key}")

    return renderer_values, parser_values
