"""
Shared pytest fixtures.
"""
import pytest

from adapters.agent_framework.loader import reset_cache
from config.settings import ENV_OVERRIDES, reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings and an empty framework cache"""
    for env_name in [*ENV_OVERRIDES, "HARNESS_CONFIG"]:
        monkeypatch.delenv(env_name, raising=False)
    reset_settings()
    reset_cache()
    yield
    reset_settings()
    reset_cache()
