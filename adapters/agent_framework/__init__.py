"""Agent framework loading and agent construction."""

from .exceptions import FrameworkLoadError
from .factory import new_agent, new_rest_agent
from .loader import load_framework, reset_cache
from .schemas import AgentOptions, RestAgentOptions

__all__ = [
    "new_agent",
    "new_rest_agent",
    "load_framework",
    "reset_cache",
    "AgentOptions",
    "RestAgentOptions",
    "FrameworkLoadError",
]
