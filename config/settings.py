"""
Harness settings.

Defaults can be overridden by an optional YAML file and then by environment
variables (a local .env file is loaded first).
"""
import logging
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Environment variable -> settings field
ENV_OVERRIDES = {
    "AGENT_ASSETS_PATH": "assets_path",
    "AGENT_FRAMEWORK_WEB": "web_framework",
    "AGENT_FRAMEWORK_REST": "rest_framework",
    "PROBE_TIMEOUT_MS": "probe_timeout_ms",
    "PROBE_TIMEOUT_MESSAGE": "probe_timeout_message",
    "HARNESS_LOG_LEVEL": "log_level",
}

_settings: "HarnessSettings | None" = None


def load_config(config_path: str) -> dict[str, Any]:
    """Read harness settings fields from a YAML file.

    Args:
        config_path: Path to a YAML mapping of HarnessSettings field names

    Returns:
        Settings values keyed by field name

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        yaml.YAMLError: If the settings file is invalid YAML
        ValueError: If the settings file does not hold a mapping
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Harness settings file not found: {config_path}")

    with open(path) as f:
        values = yaml.safe_load(f)

    if not isinstance(values, dict):
        raise ValueError(
            f"Harness settings file must hold a mapping, got {type(values).__name__}"
        )

    return values


class HarnessSettings(BaseModel):
    """Settings shared by the agent factory and the reachability probes"""

    assets_path: str = Field(
        default="/base/public/aries-framework-go/assets",
        description="Path the agent framework loads its assets from",
    )
    web_framework: str = Field(
        default="aries_framework.web:Framework",
        description="Import path of the in-process agent constructor",
    )
    rest_framework: str = Field(
        default="aries_framework.rest:Framework",
        description="Import path of the REST-controller agent constructor",
    )
    probe_timeout_ms: int = Field(default=5000, gt=0)
    probe_timeout_message: str = Field(default="timeout waiting for endpoint")
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls, config_path: str | None = None) -> "HarnessSettings":
        """
        Build settings from defaults, an optional YAML file and the environment.

        Args:
            config_path: Optional path to a YAML file with settings fields

        Returns:
            Harness settings
        """
        load_dotenv()

        values: dict[str, Any] = {}
        if config_path:
            values.update(load_config(config_path))

        for env_name, field_name in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None:
                values[field_name] = value

        return cls(**values)


def get_settings() -> HarnessSettings:
    """Return the process-wide settings, loading them on first use"""
    global _settings
    if _settings is None:
        _settings = HarnessSettings.from_env(os.getenv("HARNESS_CONFIG"))
        logger.debug(f"Loaded harness settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them"""
    global _settings
    _settings = None


def configure_logging(level: str | None = None) -> None:
    """Configure root logging with the harness format"""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )
