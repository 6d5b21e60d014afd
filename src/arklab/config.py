"""Catalog configuration: .arklab.json loading and environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

BUNDLED_SOURCE = "bundled"

DEFAULT_LOAD_DELAY = 1.0
DEFAULT_HTTP_TIMEOUT = 10.0

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 41780

CONFIG_FILENAME = ".arklab.json"


def _safe_float(value: str, default: float) -> float:
    try:
        return float(value)
    except ValueError:
        return default


def _safe_int(value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class CatalogConfig:
    source: str = BUNDLED_SOURCE
    load_delay: float = DEFAULT_LOAD_DELAY
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))


def load_catalog_config(path: Path | None = None) -> CatalogConfig:
    """Load config from the "catalog" section of .arklab.json with env var overrides."""
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
    config = CatalogConfig()

    if path.exists():
        try:
            data = json.loads(path.read_text())
            section = data.get("catalog", {})
            if isinstance(section, dict):
                _apply(config, section)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load catalog config from {path}: {e}")

    if source := os.environ.get("ARKLAB_CATALOG_SOURCE"):
        config.source = source
    if delay := os.environ.get("ARKLAB_LOAD_DELAY"):
        config.load_delay = _safe_float(delay, config.load_delay)
    if timeout := os.environ.get("ARKLAB_HTTP_TIMEOUT"):
        config.http_timeout = _safe_float(timeout, config.http_timeout)
    if host := os.environ.get("ARKLAB_HOST"):
        config.host = host
    if port := os.environ.get("ARKLAB_PORT"):
        config.port = _safe_int(port, config.port)

    return config


def _apply(config: CatalogConfig, data: dict[str, object]) -> None:
    source = data.get("source")
    if isinstance(source, str) and source:
        config.source = source
    delay = data.get("load_delay")
    if isinstance(delay, (int, float)) and not isinstance(delay, bool) and delay >= 0:
        config.load_delay = float(delay)
    timeout = data.get("http_timeout")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        config.http_timeout = float(timeout)
    host = data.get("host")
    if isinstance(host, str) and host:
        config.host = host
    port = data.get("port")
    if isinstance(port, int) and not isinstance(port, bool):
        config.port = port
