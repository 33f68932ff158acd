"""
Pytest fixtures for agent framework tests.
"""
import pytest

from config.settings import reset_settings

FAKE_MODULE = "tests.adapters.agent_framework.fake_framework"


@pytest.fixture
def fake_frameworks(monkeypatch):
    """Point both framework entry points at the fake framework module"""
    monkeypatch.setenv("AGENT_FRAMEWORK_WEB", f"{FAKE_MODULE}:WebFramework")
    monkeypatch.setenv("AGENT_FRAMEWORK_REST", f"{FAKE_MODULE}:RestFramework")
    monkeypatch.setenv("AGENT_ASSETS_PATH", "/test/assets")
    reset_settings()
