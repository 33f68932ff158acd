"""Reachability probes for agent transport endpoints."""

from .exceptions import (
    NetworkError,
    ProbeError,
    ProbeTimeoutError,
    UnsupportedProtocolError,
    WebSocketConnectionError,
)
from .reachability_service import ReachabilityService, health_check
from .schemas import ProbeRequest

__all__ = [
    "ReachabilityService",
    "health_check",
    "ProbeRequest",
    "ProbeError",
    "UnsupportedProtocolError",
    "ProbeTimeoutError",
    "NetworkError",
    "WebSocketConnectionError",
]
