"""Configuration loader -- reads config.yaml + .env, validates with Pydantic.

Resolves ${ENV_VAR} references in YAML values from environment variables.
Both files are optional; missing ones fall back to defaults.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Default home directory for config files
DEFAULT_HOME = Path.home() / ".cronrange"

_ENV_PATTERN = re.compile(r"\$\{(\w+)\}")


def _resolve_env_vars(value: Any) -> Any:
    """Recursively resolve ${ENV_VAR} references in config values."""
    if isinstance(value, str):
        def replacer(match: re.Match) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                logger.warning("Environment variable %s not set", var_name)
                return match.group(0)  # leave unresolved
            return env_value
        return _ENV_PATTERN.sub(replacer, value)
    elif isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_vars(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# Config models (Pydantic)
# ---------------------------------------------------------------------------

class LoggingConfig(BaseModel):
    level: str = "WARNING"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    timezone: str = "UTC"
    strict: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def get_home_dir() -> Path:
    """Get the cronrange home directory."""
    return Path(os.environ.get("CRONRANGE_HOME", str(DEFAULT_HOME))).expanduser()


def load_config(
    config_path: str | Path | None = None,
    env_path: str | Path | None = None,
) -> AppConfig:
    """Load configuration from YAML + .env files.

    1. Load .env into environment variables
    2. Load config.yaml and resolve ${ENV_VAR} references
    3. Apply CRONRANGE_* environment overrides
    4. Validate against Pydantic models
    """
    home = get_home_dir()

    if env_path is None:
        env_path = home / ".env"
    if config_path is None:
        config_path = home / "config.yaml"

    env_path = Path(env_path)
    config_path = Path(config_path)

    # Load .env
    if env_path.exists():
        load_dotenv(env_path)
        logger.info("Loaded environment from %s", env_path)
    else:
        logger.debug("No .env file at %s", env_path)

    # Load config.yaml
    raw_config: dict = {}
    if config_path.exists():
        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}
        logger.info("Loaded config from %s", config_path)
    else:
        logger.debug("No config file at %s, using defaults", config_path)

    if not isinstance(raw_config, dict):
        raise ValueError(f"Config file {config_path} must hold a mapping, got {type(raw_config).__name__}")

    resolved = _resolve_env_vars(raw_config)

    if "CRONRANGE_TIMEZONE" in os.environ:
        resolved["timezone"] = os.environ["CRONRANGE_TIMEZONE"]
    if "CRONRANGE_STRICT" in os.environ:
        # Pydantic coerces "true"/"false"/"1"/"0"
        resolved["strict"] = os.environ["CRONRANGE_STRICT"]

    return AppConfig(**resolved)
