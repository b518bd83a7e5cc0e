"""Configuration loading for Passion Hub.

Settings come from ``~/.config/passionhub/config.toml`` with environment
variable overrides. A missing or unreadable file yields the defaults.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from passionhub.models import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "passionhub"
CONFIG_PATH = CONFIG_DIR / "config.toml"

BACKEND_URL_ENV = "PASSIONHUB_BACKEND_URL"
LOG_LEVEL_ENV = "PASSIONHUB_LOG_LEVEL"


class ClientConfig(BaseModel):
    """Resolved client settings."""

    backend_url: str = Field(
        default="", description="Entries service base URL; empty means same origin"
    )
    origin: str = Field(
        default="http://localhost:8000", description="The client's own origin"
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    default_category: str = Field(
        default=DEFAULT_CATEGORY, min_length=1, description="Category active on start"
    )
    log_level: str = Field(default="WARNING", description="Log level name")

    model_config = {"frozen": True}

    @property
    def api_base(self) -> str:
        """Base URL requests are issued against."""
        return (self.backend_url or self.origin).rstrip("/")


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        return {}

    try:
        return toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}


def _section(raw: dict, name: str) -> dict:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring config section [%s]: not a table", name)
        return {}
    return section


def load_config(path: Optional[Path] = None) -> ClientConfig:
    """Load configuration from file and environment.

    A setting that fails validation is logged and replaced by its default.

    Args:
        path: Config file path. Defaults to ~/.config/passionhub/config.toml.

    Returns:
        ClientConfig with environment overrides applied.
    """
    raw = _read_config_file(path or CONFIG_PATH)
    backend = _section(raw, "backend")
    journal = _section(raw, "journal")
    logging_section = _section(raw, "logging")

    values = {}
    if backend.get("url") is not None:
        values["backend_url"] = str(backend["url"])
    if backend.get("origin"):
        values["origin"] = str(backend["origin"])
    if backend.get("timeout") is not None:
        values["timeout"] = backend["timeout"]
    if journal.get("default_category") is not None:
        values["default_category"] = str(journal["default_category"])
    if logging_section.get("level"):
        values["log_level"] = str(logging_section["level"])

    # Environment wins over the file
    env_url = os.environ.get(BACKEND_URL_ENV)
    if env_url:
        values["backend_url"] = env_url
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        values["log_level"] = env_level

    valid = {}
    for key, value in values.items():
        try:
            ClientConfig(**{key: value})
        except ValidationError as e:
            default = ClientConfig.model_fields[key].default
            logger.warning(
                "Invalid config value %s=%r, using default %r: %s",
                key, value, default, e.errors()[0]["msg"],
            )
            continue
        valid[key] = value

    return ClientConfig(**valid)


def create_template_config(path: Optional[Path] = None) -> Path:
    """Write a template configuration file.

    Args:
        path: Destination. Defaults to ~/.config/passionhub/config.toml.

    Returns:
        Path of the written file.
    """
    config_path = path or CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "backend": {
            "url": "",  # Leave empty to use the origin (or set PASSIONHUB_BACKEND_URL)
            "origin": "http://localhost:8000",
            "timeout": 10.0,
        },
        "journal": {
            "default_category": DEFAULT_CATEGORY,
        },
        "logging": {
            "level": "WARNING",
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
