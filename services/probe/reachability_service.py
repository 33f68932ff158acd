"""
Reachability probing service.

Checks once whether an HTTP(S) or WS(S) endpoint answers before a timeout.
"""
import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

import aiohttp

from config.settings import get_settings

from .exceptions import (
    NetworkError,
    ProbeTimeoutError,
    UnsupportedProtocolError,
    WebSocketConnectionError,
)
from .schemas import HTTP_SCHEME_PREFIX, WS_SCHEME_PREFIX, ProbeRequest

logger = logging.getLogger(__name__)

# The probe timer is the only deadline
PROBE_CLIENT_TIMEOUT = aiohttp.ClientTimeout(total=None)
WS_CLOSE_TIMEOUT_SECONDS = 1.0


def _discard_result(task: asyncio.Task) -> None:
    if not task.cancelled():
        task.exception()


def probe_kind(url: str) -> str:
    """
    Classify a URL by its scheme prefix.

    Args:
        url: Endpoint URL

    Returns:
        "http" or "ws"

    Raises:
        UnsupportedProtocolError: If the URL is neither http nor ws
    """
    if url.startswith(HTTP_SCHEME_PREFIX):
        return HTTP_SCHEME_PREFIX
    if url.startswith(WS_SCHEME_PREFIX):
        return WS_SCHEME_PREFIX
    raise UnsupportedProtocolError(url)


class ReachabilityService:
    """Service for probing inbound transport endpoints of agents"""

    async def probe(self, request: ProbeRequest) -> aiohttp.ClientResponse | None:
        """
        Probe an endpoint once.

        Args:
            request: Probe request

        Returns:
            The HTTP response for http(s) URLs (any status code), None for ws(s) URLs

        Raises:
            UnsupportedProtocolError: If the URL is neither http nor ws
            ProbeTimeoutError: If the endpoint did not answer in time
            NetworkError: If the HTTP request failed
            WebSocketConnectionError: If the WebSocket connection failed to open
        """
        url = request.url
        kind = probe_kind(url)
        logger.info(f"Probing {url} (timeout: {request.timeout_ms}ms)")

        async with aiohttp.ClientSession(timeout=PROBE_CLIENT_TIMEOUT) as session:
            if kind == HTTP_SCHEME_PREFIX:
                response = await self._race(request, self._fetch(session, url))
                # The body is not read; status and headers stay available
                response.release()
                return response

            ws = await self._race(request, self._open_websocket(session, url))
            await self._close_websocket(ws)
            return None

    async def _race(
        self, request: ProbeRequest, operation: Awaitable[Any]
    ) -> Any:
        """
        Run the operation against a timer; the first to finish settles the outcome.

        Args:
            request: Probe request carrying the timeout and its message
            operation: The network operation

        Returns:
            The operation result

        Raises:
            ProbeTimeoutError: If the timer finished first
        """
        timer = asyncio.create_task(asyncio.sleep(request.timeout_seconds))
        io_task = asyncio.ensure_future(operation)
        try:
            done, _ = await asyncio.wait(
                {timer, io_task}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            io_task.cancel()
            raise
        finally:
            timer.cancel()

        if io_task in done:
            result = io_task.result()
            logger.debug(f"Probe of {request.url} succeeded")
            return result

        # Late results of the abandoned operation are dropped
        io_task.add_done_callback(_discard_result)
        io_task.cancel()
        logger.debug(f"Probe of {request.url} timed out after {request.timeout_ms}ms")
        raise ProbeTimeoutError(request.url, request.timeout_ms, request.timeout_message)

    async def _fetch(
        self, session: aiohttp.ClientSession, url: str
    ) -> aiohttp.ClientResponse:
        """Issue a single GET, settling as soon as the response headers arrive"""
        try:
            return await session.get(url)
        except (aiohttp.ClientError, OSError) as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise NetworkError(url, str(e)) from e

    async def _open_websocket(
        self, session: aiohttp.ClientSession, url: str
    ) -> aiohttp.ClientWebSocketResponse:
        """Open a WebSocket connection, settling once the handshake is done"""
        try:
            return await session.ws_connect(url)
        except (aiohttp.ClientError, OSError) as e:
            raise WebSocketConnectionError(url, str(e)) from e

    async def _close_websocket(self, ws: aiohttp.ClientWebSocketResponse) -> None:
        """Close an opened WebSocket without waiting long for the peer's close frame"""
        try:
            await asyncio.wait_for(ws.close(), timeout=WS_CLOSE_TIMEOUT_SECONDS)
        except (asyncio.TimeoutError, aiohttp.ClientError, OSError) as e:
            logger.debug(f"Ignoring WebSocket close failure: {e!r}")


async def health_check(
    url: str,
    timeout_ms: int | None = None,
    timeout_message: str | None = None,
) -> aiohttp.ClientResponse | None:
    """
    Probe an endpoint once, falling back to the configured timeout defaults.

    Args:
        url: Endpoint URL (http(s):// or ws(s)://)
        timeout_ms: Timeout in milliseconds
        timeout_message: Message of the timeout error

    Returns:
        The HTTP response for http(s) URLs, None for ws(s) URLs
    """
    probe_kind(url)

    settings = get_settings()
    request = ProbeRequest(
        url=url,
        timeout_ms=timeout_ms if timeout_ms is not None else settings.probe_timeout_ms,
        timeout_message=(
            timeout_message
            if timeout_message is not None
            else settings.probe_timeout_message
        ),
    )
    return await ReachabilityService().probe(request)
