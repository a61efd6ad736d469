"""Construction of the shared HTTP client.

One ``httpx.AsyncClient`` is built at process start and handed to every
:class:`~feed_assembler.lib.fetcher.Fetcher`.  It is safe for concurrent
use and is not reconfigured after construction.
"""

import logging

import httpx

from ..config import Settings

logger = logging.getLogger(__name__)


async def _log_request(request: httpx.Request) -> None:
    logger.debug("--> %s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    # Event hooks run before the body is read.
    await response.aread()
    logger.debug(
        "<-- %s %s (%d bytes)\n%s",
        response.status_code,
        response.request.url,
        len(response.content),
        response.text,
    )


def create_http_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the process-wide client for *settings*.

    *transport* replaces the network transport (e.g. ``httpx.MockTransport``).
    """
    base_url = settings.base_url if settings.base_url.endswith("/") else settings.base_url + "/"
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout),
        transport=transport,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )
