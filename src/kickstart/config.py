"""User-level configuration for kickstart.

Settings are stored in ~/.kickstart/config.json. The location can be
overridden with the KICKSTART_CONFIG environment variable.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "KICKSTART_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".kickstart" / "config.json"


@dataclass
class Settings:
    """Settings for the template registry and CLI identity."""
    # Template registry (GitHub search API)
    registry_url: str = "https://api.github.com"
    registry_topic: str = "kickstart-template"
    registry_timeout: float = 5.0  # seconds

    # Sent as User-Agent on every registry request
    user_agent: str = "Kickstart CLI"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })


def config_path() -> Path:
    """Return the path of the user config file."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, falling back to defaults.

    A missing file is not an error. A corrupted file is logged and
    ignored so the CLI keeps working with defaults.
    """
    path = path or config_path()
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError("top-level value must be an object")
        return Settings.from_dict(data)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning("Config file %s is invalid: %s. Using defaults.", path, e)
        return Settings()
