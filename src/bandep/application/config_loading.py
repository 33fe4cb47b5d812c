from __future__ import annotations

from pathlib import Path
from typing import Any, cast
import logging
import tomllib

import jsonschema
import yaml

from bandep.adapters.errors import ConfigError
from bandep.domain.config import DEFAULT_PATTERN, CheckConfig
from bandep.domain.imports import DenyList
from bandep.domain.pattern import PackagePattern

PYPROJECT = "pyproject.toml"

SETTINGS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "pkg": {"type": "string", "minLength": 1},
        "ban": {
            "anyOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
        "strict": {"type": "boolean"},
    },
    "additionalProperties": False,
}

Settings = dict[str, Any]

logger = logging.getLogger(__name__)


def validate_settings(raw: object, source: Path) -> Settings:
    try:
        jsonschema.validate(raw, SETTINGS_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ConfigError(
            f"invalid config {source}: {e.message}",
            details={"path": str(source)},
            cause=e,
        ) from e
    return cast(Settings, raw)


def load_config_file(path: Path) -> Settings:
    """Read settings from a YAML file, or ``[tool.bandep]`` of a TOML file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e.strerror or e}", cause=e) from e
    try:
        if path.suffix == ".toml":
            data = tomllib.loads(text)
            raw: object = data.get("tool", {}).get("bandep", {})
        else:
            raw = yaml.safe_load(text) or {}
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot parse config {path}: {e}", cause=e) from e
    return validate_settings(raw, path)


def discover_settings(root: Path) -> Settings:
    """Use ``[tool.bandep]`` from a project file when it has one.

    A project file that cannot be read or parsed is left alone; it only
    matters once it declares a bandep table.
    """
    pyproject = root / PYPROJECT
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("ignoring %s: %s", pyproject, e)
        return {}
    tool = data.get("tool")
    if not isinstance(tool, dict) or "bandep" not in tool:
        return {}
    return validate_settings(tool["bandep"], pyproject)


def _deny_list(raw: object) -> DenyList:
    if isinstance(raw, str):
        return DenyList.parse(raw)
    if isinstance(raw, list):
        return DenyList.of(str(item) for item in raw)
    return DenyList()


def build_config(
    settings: Settings,
    pkg: str | None = None,
    ban: str | None = None,
    strict: bool | None = None,
) -> CheckConfig:
    """Merge file settings with command line values, the latter winning."""
    pattern = pkg or str(settings.get("pkg") or DEFAULT_PATTERN)
    bans = _deny_list(settings.get("ban"))
    if ban:
        bans = bans.union(DenyList.parse(ban))
    strict_enabled = bool(settings.get("strict", False)) if strict is None else strict
    return CheckConfig(
        pattern=PackagePattern(pattern), bans=bans, strict=strict_enabled
    )
