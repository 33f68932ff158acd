"""
Schemas for reachability probes.
"""
from pydantic import BaseModel, Field

HTTP_SCHEME_PREFIX = "http"
WS_SCHEME_PREFIX = "ws"


class ProbeRequest(BaseModel):
    """Request to probe a single endpoint once"""

    url: str = Field(..., description="Endpoint URL (http(s):// or ws(s)://)")
    timeout_ms: int = Field(..., gt=0, description="Timeout in milliseconds")
    timeout_message: str = Field(
        ..., description="Message of the error raised when the timeout elapses"
    )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000
