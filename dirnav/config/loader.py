from __future__ import annotations

import json
import logging
import os

from result import Err, Ok, Result

from dirnav.config.defaults import default_config
from dirnav.config.schema import AppConfig, from_dict
from dirnav.services.fs import DEFAULT_FS, FileSystem

logger = logging.getLogger(__name__)

CONFIG_PATH = "~/.config/dirnav/config.json"
CONFIG_ENV = "DIRNAV_CONFIG"


def config_path(fs: FileSystem = DEFAULT_FS) -> str:
    """``$DIRNAV_CONFIG`` when set, else the per-user default."""
    return fs.expanduser(os.environ.get(CONFIG_ENV) or CONFIG_PATH)


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[AppConfig, str]:
    resolved = path or config_path(fs)
    if not fs.exists(resolved):
        logger.debug("No config at %s, using defaults", resolved)
        return Ok(default_config())

    try:
        payload = json.loads(fs.read_text(resolved))
        if not isinstance(payload, dict):
            return Err(f"Config at {resolved} must be a JSON object.")
        config = from_dict(payload, default_config())
    except Exception as exc:  # noqa: BLE001
        return Err(f"Failed reading config at {resolved}: {exc}.")
    logger.debug("Loaded config from %s", resolved)
    return Ok(config)


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
