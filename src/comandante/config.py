"""Shell configuration loading."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "COMANDANTE_CONFIG"


@dataclass(frozen=True)
class ShellConfig:
    """Settings for the interactive front-ends."""

    prompt: str = "comandante> "
    banner: str = "comandante shell. Type: comandante list"
    log_level: str = "WARNING"
    register_builtins: bool = True


def load_config(path: str | Path | None = None) -> ShellConfig:
    """Load settings from a JSON object file.

    PATH defaults to $COMANDANTE_CONFIG. A missing file yields the defaults;
    unknown keys are ignored.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return ShellConfig()
        path = env_path

    config_path = Path(path).expanduser()
    if not config_path.is_file():
        logger.info("config file %s not found, using defaults", config_path)
        return ShellConfig()

    data = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"config file {config_path} must contain a JSON object")

    known = {f.name for f in fields(ShellConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("ignoring unknown config keys: %s", ", ".join(unknown))

    config = replace(ShellConfig(), **{key: data[key] for key in data if key in known})
    _validate(config)
    return config


def _validate(config: ShellConfig) -> None:
    for name in ("prompt", "banner", "log_level"):
        if not isinstance(getattr(config, name), str):
            raise ValueError(f"{name} must be a string")
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"unknown log level: {config.log_level}")
    if not isinstance(config.register_builtins, bool):
        raise ValueError("register_builtins must be a boolean")
