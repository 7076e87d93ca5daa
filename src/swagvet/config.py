"""Configuration management with XDG paths and precedence resolution.

This module handles all persistent configuration for the ``swagvet`` CLI:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.swagvet/`` on macOS and Windows. See :func:`get_config_dir`.
* **Global config** -- A single :class:`~swagvet.models.ValidatorConfig`
  JSON file storing defaults.
* **Project config** -- An optional ``swagvet.json`` in the working
  directory, typically committed next to the API description.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, project-local config, and global config into the
  final effective configuration.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from swagvet.exceptions import ConfigError
from swagvet.models import ValidatorConfig

logger = logging.getLogger(__name__)

_APP_NAME = "swagvet"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "swagvet.json"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


# --- Directories ---


def _is_xdg_platform() -> bool:
    """Linux and the BSDs follow the XDG Base Directory layout."""
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def get_config_dir() -> Path:
    """Return the directory holding the global ``config.json``.

    ``$XDG_CONFIG_HOME/swagvet`` (or ``~/.config/swagvet``) on XDG
    platforms, ``~/.swagvet`` elsewhere.  The directory is not created.
    """
    if not _is_xdg_platform():
        return Path.home() / f".{_APP_NAME}"
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / _APP_NAME


# --- Config files ---


def _read_json(path: Path, label: str) -> Optional[dict[str, Any]]:
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Invalid {label} at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {label} at {path}: expected a JSON object")
    logger.debug("Loaded %s from %s", label, path)
    return data


def load_global_config() -> dict[str, Any]:
    """Load the global configuration from the XDG config directory.

    Returns:
        The parsed JSON object, or an empty dict if the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON.
    """
    return _read_json(get_config_dir() / _CONFIG_FILENAME, "global config") or {}


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./swagvet.json``.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON.
    """
    return _read_json(Path.cwd() / _PROJECT_CONFIG_FILENAME, "project config")


# --- Environment ---


def _env_bool(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value for {name}: {value!r}")


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    fail_on_warnings = _env_bool("SWAGVET_FAIL_ON_WARNINGS")
    if fail_on_warnings is not None:
        overrides["fail_on_warnings"] = fail_on_warnings

    no_remote_refs = _env_bool("SWAGVET_NO_REMOTE_REFS")
    if no_remote_refs is not None:
        overrides["resolve_remote"] = not no_remote_refs

    ignore = os.environ.get("SWAGVET_IGNORE")
    if ignore:
        overrides["ignore_codes"] = [code.strip() for code in ignore.split(",") if code.strip()]

    timeout = os.environ.get("SWAGVET_HTTP_TIMEOUT")
    if timeout:
        try:
            overrides["http_timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"Invalid value for SWAGVET_HTTP_TIMEOUT: {timeout!r}") from exc

    return overrides


# --- Precedence resolution ---


def resolve_config(
    cli_fail_on_warnings: Optional[bool] = None,
    cli_ignore: Optional[list[str]] = None,
    cli_no_remote_refs: Optional[bool] = None,
) -> ValidatorConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags
        2. Environment variables (``SWAGVET_FAIL_ON_WARNINGS``,
           ``SWAGVET_IGNORE``, ``SWAGVET_NO_REMOTE_REFS``,
           ``SWAGVET_HTTP_TIMEOUT``)
        3. Project config (``./swagvet.json``)
        4. User config (``~/.config/swagvet/config.json``)
        5. Defaults

    ``None`` CLI values mean "not given".  CLI ``--ignore`` codes are added
    to the configured ones rather than replacing them.

    Raises:
        ConfigError: If a config file or environment variable is invalid.
    """
    # 5 + 4. Defaults and global config
    merged: dict[str, Any] = dict(load_global_config())

    # 3. Project-local config
    project = load_project_config()
    if project is not None:
        merged.update(project)

    # 2. Environment variables
    merged.update(_env_overrides())

    # 1. CLI flags (highest precedence)
    if cli_fail_on_warnings:
        merged["fail_on_warnings"] = True
    if cli_no_remote_refs:
        merged["resolve_remote"] = False
    if cli_ignore:
        merged["ignore_codes"] = list(merged.get("ignore_codes") or []) + list(cli_ignore)

    try:
        return ValidatorConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
