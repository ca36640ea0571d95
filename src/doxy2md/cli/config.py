#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/cli/config.py
"""Configuration files of the ``doxy2md`` command.

A configuration file holds the same settings as the command line flags,
spelled with dashes or underscores (``base-url`` or ``page_base_url``).
It is found by searching, from the current folder upwards:

1. ``.doxy2md.yaml``, ``.doxy2md.yml``, ``.doxy2md.toml``, ``.doxy2md.json``;
2. a ``pyproject.toml`` with a ``[tool.doxy2md]`` table;

and finally the dedicated files in the home folder.
"""

import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional, Union

import yaml

from doxy2md.exceptions import ConfigError

CONFIG_FILENAMES = [".doxy2md.yaml", ".doxy2md.yml", ".doxy2md.toml", ".doxy2md.json"]
PYPROJECT_FILENAME = "pyproject.toml"


def _parse_toml(config_path: Path) -> Any:
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def _parse_json(config_path: Path) -> Any:
    with open(config_path, encoding="utf-8") as f:
        return json.load(f)


def _parse_yaml(config_path: Path) -> Any:
    with open(config_path, encoding="utf-8") as f:
        # an empty file is an empty configuration
        return yaml.safe_load(f) or {}


# suffix -> (format name, parser, decode error, name of the expected top level value)
_FORMATS: Dict[str, tuple[str, Callable[[Path], Any], type[Exception], str]] = {
    ".toml": ("TOML", _parse_toml, tomllib.TOMLDecodeError, "a table"),
    ".json": ("JSON", _parse_json, json.JSONDecodeError, "an object"),
    ".yaml": ("YAML", _parse_yaml, yaml.YAMLError, "a mapping"),
    ".yml": ("YAML", _parse_yaml, yaml.YAMLError, "a mapping"),
}


def _read_mapping(config_path: Path) -> Dict[str, Any]:
    try:
        format_name, parse, decode_error, expected = _FORMATS[config_path.suffix.lower()]
    except KeyError:
        raise ConfigError(
            f"Unsupported config file format: {config_path.suffix}. Use .yaml, .json or .toml", str(config_path)
        ) from None

    try:
        config = parse(config_path)
    except decode_error as e:
        raise ConfigError(f"Invalid {format_name} in {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"{format_name} config file must contain {expected}, got {type(config).__name__}", str(config_path)
        )
    return config


def _pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.doxy2md]`` table of a pyproject.toml, empty when absent."""
    section = _read_mapping(pyproject_path).get("tool", {}).get("doxy2md", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.doxy2md] in {pyproject_path} must be a table", str(pyproject_path))
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Return the first configuration file of ``start_dir`` or its parents.

    In each folder the dedicated files win over ``pyproject.toml``, which
    only counts when it has a ``[tool.doxy2md]`` table. Broken pyproject
    files are skipped.
    """
    folder = (start_dir or Path.cwd()).resolve()
    for current in (folder, *folder.parents):
        for filename in CONFIG_FILENAMES:
            if (current / filename).is_file():
                return current / filename

        pyproject_path = current / PYPROJECT_FILENAME
        if not pyproject_path.is_file():
            continue
        try:
            if _pyproject_section(pyproject_path):
                return pyproject_path
        except ConfigError:
            continue
    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Search the parents of ``start_dir``, then the home folder."""
    found = find_config_in_parents(start_dir)
    if found is not None:
        return found
    home = Path.home()
    return next((home / name for name in CONFIG_FILENAMES if (home / name).is_file()), None)


def load_config_file(config_path: Union[Path, str]) -> Dict[str, Any]:
    """Load a configuration file.

    Parameters
    ----------
    config_path : Path or str
        A ``.yaml``/``.yml``, ``.json`` or ``.toml`` file, or a
        ``pyproject.toml`` whose ``[tool.doxy2md]`` table is used

    Returns
    -------
    dict
        The settings, empty for an empty file or a pyproject.toml without
        the table

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, invalid or of an unknown format

    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", str(config_path))

    if config_path.name.lower() == PYPROJECT_FILENAME:
        return _pyproject_section(config_path)
    return _read_mapping(config_path)


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated with ``override``; nested tables are merged key by key.

    >>> merge_configs({"admonitions": {"note": "note"}}, {"admonitions": {"bug": "danger"}})
    {'admonitions': {'note': 'note', 'bug': 'danger'}}

    """
    merged = dict(base)
    for key, value in override.items():
        previous = merged.get(key)
        if isinstance(previous, dict) and isinstance(value, dict):
            value = merge_configs(previous, value)
        merged[key] = value
    return merged


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None, start_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """Load the configuration of a run: ``--config``, then ``DOXY2MD_CONFIG``, then discovery."""
    config_path = explicit_path or env_var_path or discover_config_file(start_dir)
    if not config_path:
        return {}
    return load_config_file(config_path)


__all__ = [
    "CONFIG_FILENAMES",
    "discover_config_file",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "merge_configs",
]
