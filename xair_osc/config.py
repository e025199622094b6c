"""
Settings persistence

Connection and discovery defaults stored as a YAML file.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import yaml
from pydantic import TypeAdapter, ValidationError

from .client import DEFAULT_MIXER_PORT
from .discovery import DEFAULT_BROADCAST_ADDRESS, DEFAULT_DISCOVERY_TIMEOUT
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "xair_osc" / "config.yaml"


@dataclass
class MixerSettings:
    """
    Connection settings.

    Attributes:
        host: Console IP address (None until discovered or configured)
        port: Console OSC port
        local_address: Local address to bind the UDP socket to
        local_port: Local port (0 picks a free one)
        discovery_timeout: Seconds to collect discovery replies
        broadcast_address: Where the discovery probe is sent
        query_timeout: Seconds to wait for a query reply (None waits forever)
    """
    host: Optional[str] = None
    port: int = DEFAULT_MIXER_PORT
    local_address: str = "0.0.0.0"
    local_port: int = 0
    discovery_timeout: float = DEFAULT_DISCOVERY_TIMEOUT
    broadcast_address: str = DEFAULT_BROADCAST_ADDRESS
    query_timeout: Optional[float] = None


_SETTINGS_ADAPTER = TypeAdapter(MixerSettings)


def load_settings(path: Optional[Path] = None) -> MixerSettings:
    """
    Load settings from YAML.

    A missing file yields defaults; an unreadable or malformed one raises.

    Raises:
        ConfigError: If the file cannot be parsed, has unknown keys or
            holds values of the wrong type
    """
    path = path or DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.info(f"No settings file at {path}, using defaults")
        return MixerSettings()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read settings from {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")

    known = {f.name for f in fields(MixerSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")

    try:
        settings = _SETTINGS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc

    logger.info(f"Loaded settings from {path}")
    return settings


def save_settings(settings: MixerSettings, path: Optional[Path] = None) -> Path:
    """
    Save settings to YAML.

    Raises:
        ConfigError: If the file cannot be written
    """
    path = path or DEFAULT_CONFIG_PATH

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(asdict(settings), f, default_flow_style=False)
    except OSError as exc:
        raise ConfigError(f"Cannot write settings to {path}: {exc}") from exc

    logger.info(f"Saved settings to {path}")
    return path
