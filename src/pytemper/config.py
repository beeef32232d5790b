"""Load extension overrides for the backend registry.

The configuration file holds a single ``extensions`` section mapping a file
extension to the backends to try, in order of preference::

    [extensions]
    .tpl = jinja2
    .mustache = pybars, chevron

JSON and YAML files use a mapping of extension to a list instead.
"""
from __future__ import annotations

import configparser
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .backends import get_backend
from .errors import TemperConfigError
from .paths import config_file
from .registry import extension_of

logger = logging.getLogger("pytemper.config")

SECTION = "extensions"


def _read_ini(path: Path) -> Mapping[str, Any]:
    parser = configparser.ConfigParser(strict=False)
    # keep extension keys as written; they are normalised later
    parser.optionxform = str  # type: ignore[assignment]
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise TemperConfigError(str(exc)) from exc
    if not parser.has_section(SECTION):
        return {}
    return {
        key: [part.strip() for part in value.split(",") if part.strip()]
        for key, value in parser.items(SECTION)
    }


def _read_json(path: Path) -> Mapping[str, Any]:
    raw = path.read_text(encoding="utf-8")
    if raw.strip() == "":
        return {}
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise TemperConfigError(str(exc)) from exc
    if not isinstance(data, dict):
        raise TemperConfigError("Root of JSON config must be a mapping")
    return data.get(SECTION) or {}


def _require_yaml():
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as exc:
        raise TemperConfigError("PyYAML is required for YAML config files") from exc
    return yaml


def _read_yaml(path: Path) -> Mapping[str, Any]:
    yaml = _require_yaml()
    raw = path.read_text(encoding="utf-8")
    if raw.strip() == "":
        return {}
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise TemperConfigError(str(exc)) from exc
    if not isinstance(data, dict):
        raise TemperConfigError("Root of YAML config must be a mapping")
    return data.get(SECTION) or {}


_READERS = {
    ".ini": _read_ini,
    ".cfg": _read_ini,
    ".json": _read_json,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
}


def _candidates(ext: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [part.strip() for part in value.split(",") if part.strip()]
    if not isinstance(value, (list, tuple)) or not value:
        raise TemperConfigError(f"{ext}: expected a non-empty list of backends")
    cands = tuple(str(v) for v in value)
    for ident in cands:
        if get_backend(ident) is None:
            raise TemperConfigError(f"{ext}: unknown template backend {ident!r}")
    return cands


def load_overrides(path: Path | str | None = None) -> dict[str, tuple[str, ...]]:
    """Return extension overrides from *path* or the default config file."""
    path = Path(path) if path is not None else config_file()
    if not path.exists():
        logger.debug("no config file at %s", path)
        return {}
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise TemperConfigError(f"Unsupported config format: {path.suffix}")
    section = reader(path)
    if not isinstance(section, Mapping):
        raise TemperConfigError(f"{SECTION} must be a mapping")
    out: dict[str, tuple[str, ...]] = {}
    for key, value in section.items():
        ext = extension_of(key if str(key).startswith(".") else f".{key}")
        out[ext] = _candidates(ext, value)
    logger.debug("loaded %d extension override(s) from %s", len(out), path)
    return out


__all__ = ["SECTION", "load_overrides"]
