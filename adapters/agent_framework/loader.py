"""
Lazy loader for the agent framework entry points.

Each entry point is imported on first use and cached for the process.
"""
import importlib
import logging
from typing import Any

from config.settings import get_settings

from .exceptions import FrameworkLoadError

logger = logging.getLogger(__name__)

WEB = "web"
REST = "rest"

_frameworks: dict[str, Any] = {}


def _import_path(kind: str) -> str:
    settings = get_settings()
    if kind == WEB:
        return settings.web_framework
    if kind == REST:
        return settings.rest_framework
    raise ValueError(f"Invalid framework kind: {kind}. Must be '{WEB}' or '{REST}'")


def resolve(import_path: str) -> Any:
    """
    Resolve a "package.module:Attribute" import path.

    Args:
        import_path: Module path, optionally followed by ":" and a dotted attribute

    Returns:
        The module, or the attribute when one is named
    """
    module_name, _, attribute = import_path.partition(":")
    target: Any = importlib.import_module(module_name)
    for part in filter(None, attribute.split(".")):
        target = getattr(target, part)
    return target


def load_framework(kind: str) -> Any:
    """
    Return the agent constructor for a framework kind, importing it once.

    Args:
        kind: "web" for the in-process agent, "rest" for the REST-driven agent

    Returns:
        The agent constructor

    Raises:
        ValueError: If the kind is unknown
        FrameworkLoadError: If the entry point cannot be imported
    """
    if kind in _frameworks:
        logger.debug(f"Using cached {kind} agent framework")
        return _frameworks[kind]

    import_path = _import_path(kind)
    logger.info(f"Loading {kind} agent framework from {import_path}")
    try:
        framework = resolve(import_path)
    except (ImportError, AttributeError) as e:
        raise FrameworkLoadError(kind, import_path, str(e)) from e

    _frameworks[kind] = framework
    return framework


def reset_cache() -> None:
    """Forget loaded entry points"""
    _frameworks.clear()
