"""
Agent factory.

Builds agent instances from the lazily loaded framework entry points.
"""
import logging
from typing import Any

from config.settings import get_settings

from .loader import REST, WEB, load_framework
from .schemas import DEFAULT_AGENT_LABEL, AgentOptions, RestAgentOptions

logger = logging.getLogger(__name__)


async def new_agent(
    db_namespace: str = "",
    label: str = DEFAULT_AGENT_LABEL,
    http_resolver: list[str] | None = None,
) -> Any:
    """
    Create an in-process agent.

    Args:
        db_namespace: Storage namespace isolating this agent's data
        label: Default label the agent presents to peers
        http_resolver: Resolver URLs for DID resolution over HTTP

    Returns:
        The agent instance created by the framework
    """
    framework = load_framework(WEB)
    options = AgentOptions(
        assets_path=get_settings().assets_path,
        label=label,
        http_resolver_urls=http_resolver or [],
        db_namespace=db_namespace,
    )
    logger.debug(f"Creating agent '{label}' (namespace: '{db_namespace}')")
    return framework(options.to_config())


async def new_rest_agent(controller_url: str) -> Any:
    """
    Create an agent driven through a REST controller.

    Args:
        controller_url: Base URL of the agent's REST controller

    Returns:
        The agent instance created by the framework
    """
    framework = load_framework(REST)
    options = RestAgentOptions(
        assets_path=get_settings().assets_path,
        controller_url=controller_url,
    )
    logger.debug(f"Creating REST agent for controller {controller_url}")
    return framework(options.to_config())
