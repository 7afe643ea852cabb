"""Server configuration and logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = ROOT / "config" / "server.yaml"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ServerConfig(BaseModel):
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    strict_king: bool = Field(default=False)


def load_config(path: str | Path | None = None) -> ServerConfig:
    """Load server settings from YAML, falling back to defaults.

    An explicit ``path`` must exist; the bundled default file is optional.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        return ServerConfig()

    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")
    logger.info("Loaded configuration from %s", config_path)
    return ServerConfig(**raw.get("server", raw))


def configure_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)
