"""
Configuration maps consumed by the agent framework constructors.

Field aliases are the option names the framework recognises.
"""
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_AGENT_LABEL = "dem-js-agent"


class AgentOptions(BaseModel):
    """Options of an in-process agent"""

    model_config = ConfigDict(populate_by_name=True)

    assets_path: str = Field(..., alias="assetsPath")
    label: str = Field(default=DEFAULT_AGENT_LABEL, alias="agent-default-label")
    http_resolver_urls: list[str] = Field(
        default_factory=list, alias="http-resolver-url"
    )
    auto_accept: bool = Field(default=True, alias="auto-accept")
    outbound_transports: list[str] = Field(
        default_factory=lambda: ["ws", "http"], alias="outbound-transport"
    )
    transport_return_route: str = Field(default="all", alias="transport-return-route")
    log_level: str = Field(default="debug", alias="log-level")
    db_namespace: str = Field(default="", alias="db-namespace")

    def to_config(self) -> dict:
        return self.model_dump(by_alias=True)


class RestAgentOptions(BaseModel):
    """Options of an agent driven through a REST controller"""

    model_config = ConfigDict(populate_by_name=True)

    assets_path: str = Field(..., alias="assetsPath")
    controller_url: str = Field(..., alias="agent-rest-url")

    def to_config(self) -> dict:
        return self.model_dump(by_alias=True)
