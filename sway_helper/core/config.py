"""Configuration for sway-helper.

Settings are read from ~/.config/sway-helper/config.json when it exists;
a missing file means defaults. Command-line flags take precedence over the
file, and the file over the environment.

Example config.json:

    {
        "socket_path": "/run/user/1000/sway-ipc.sock",
        "resize_amount": 10,
        "resize_unit": "ppt"
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..errors import ConfigLoadError
from ..models.resize import Amount, Unit

logger = logging.getLogger('sway_helper.config')

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "sway-helper" / "config.json"


class HelperConfig(BaseModel):
    """User configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    socket_path: Optional[Path] = Field(None, description="Sway IPC socket path")
    resize_amount: Optional[int] = Field(None, ge=0, description="Default resize amount")
    resize_unit: Optional[Unit] = Field(None, description="Default resize unit (px or ppt)")

    @model_validator(mode='after')
    def validate_unit_has_amount(self) -> 'HelperConfig':
        if self.resize_unit is not None and self.resize_amount is None:
            raise ValueError("resize_unit requires resize_amount")
        return self

    def default_amount(self) -> Amount:
        """Amount used when the resize command is given none."""
        if self.resize_amount is None:
            return Amount.none()
        return Amount.of(self.resize_amount, self.resize_unit)

    def resolve_socket(self, override: Optional[Path] = None) -> Optional[Path]:
        """Socket to connect to: CLI override, then config, then SWAYSOCK.

        None lets i3ipc discover the socket itself.
        """
        if override is not None:
            return override
        if self.socket_path is not None:
            return self.socket_path
        env = os.environ.get("SWAYSOCK")
        return Path(env) if env else None


def load_config(config_file: Optional[Path] = None) -> HelperConfig:
    """Load configuration from disk.

    Args:
        config_file: Path to config.json (default: ~/.config/sway-helper/config.json)

    Raises:
        ConfigLoadError: If the file is unreadable or invalid
    """
    if config_file is None:
        config_file = DEFAULT_CONFIG_FILE

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return HelperConfig()

    try:
        with config_file.open("r") as f:
            data = json.load(f)
        config = HelperConfig(**data)
    except (json.JSONDecodeError, IOError, ValidationError, TypeError) as e:
        raise ConfigLoadError(str(config_file), str(e))

    logger.debug(f"Loaded config from {config_file}")
    return config
