"""Harness configuration."""

from .settings import HarnessSettings, configure_logging, get_settings, load_config

__all__ = ["HarnessSettings", "configure_logging", "get_settings", "load_config"]
