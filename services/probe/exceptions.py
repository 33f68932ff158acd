"""
Probe-specific exceptions.

Every failure of a reachability probe is raised to the caller as one of these.
"""


class ProbeError(Exception):
    """Base exception for probe errors."""

    pass


class UnsupportedProtocolError(ProbeError):
    """Raised when the URL scheme is neither HTTP(S) nor WS(S)."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"unsupported protocol for url: {url}")


class ProbeTimeoutError(ProbeError):
    """Raised when the endpoint did not respond before the timeout."""

    def __init__(self, url: str, timeout_ms: int, message: str):
        self.url = url
        self.timeout_ms = timeout_ms
        super().__init__(message)


class NetworkError(ProbeError):
    """Raised when the HTTP request fails before the timeout."""

    def __init__(self, url: str, error: str):
        self.url = url
        self.error = error
        super().__init__(f"failed to fetch url={url}: {error}")


class WebSocketConnectionError(ProbeError):
    """Raised when the WebSocket connection fails to open."""

    def __init__(self, url: str, error: str):
        self.url = url
        self.error = error
        super().__init__(error)
