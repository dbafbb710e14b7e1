"""YAML configuration loading.

Loading never fails: a missing, unreadable or malformed file, and any single
invalid value, falls back to the documented defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidBackendChoice
from .models import BackendKind

logger = logging.getLogger(__name__)

DEFAULT_MPD_HOST = "localhost"
DEFAULT_MPD_PORT = 6600


@dataclass(frozen=True)
class Config:
    """Connection settings and backend priority for one invocation."""

    mpd_host: str = DEFAULT_MPD_HOST
    mpd_port: int = DEFAULT_MPD_PORT
    priority: BackendKind = BackendKind.MPD


def _coerce_config(data: dict[str, Any]) -> Config:
    def _host_or_default(value: Any) -> str:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULT_MPD_HOST

    def _port_or_default(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            return DEFAULT_MPD_PORT
        if 0 < value <= 65535:
            return value
        return DEFAULT_MPD_PORT

    def _priority_or_default(value: Any) -> BackendKind:
        if not isinstance(value, str):
            return BackendKind.MPD
        try:
            return BackendKind.parse_priority(value)
        except InvalidBackendChoice:
            return BackendKind.MPD

    return Config(
        mpd_host=_host_or_default(data.get("mpd_host")),
        mpd_port=_port_or_default(data.get("mpd_port")),
        priority=_priority_or_default(data.get("priority")),
    )


def load_config(path: Path) -> Config:
    """Load config from `path`, substituting defaults on any failure."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Config file missing at %s; using defaults.", path)
        return Config()
    except OSError as exc:
        logger.info("Failed to read config file %s: %s; using defaults.", path, exc)
        return Config()
    except UnicodeDecodeError as exc:
        logger.info("Config file %s is not UTF-8 (%s); using defaults.", path, exc)
        return Config()

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        logger.info(
            "Config file at %s is invalid YAML (%s); using defaults.", path, exc
        )
        return Config()

    if data is None:
        return Config()
    if not isinstance(data, dict):
        logger.info("Config file at %s is not a mapping; using defaults.", path)
        return Config()
    return _coerce_config(data)
