"""Single-request fetcher.

A :class:`Fetcher` performs one GET against the feed service and turns the
response into typed records, or raises a :class:`~feed_assembler.errors.FetchError`.
It never retries and never caches.
"""

import logging
from typing import TypeVar

import httpx

from ..errors import EmptyResponse, FetchError, TransportFailure
from .endpoints import Endpoint

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Fetcher:
    """Fetch endpoints through a shared ``httpx.AsyncClient``.

    The client is owned by the caller; the fetcher only issues requests on
    it.  *timeout* (seconds) bounds every call unless a call passes its own.
    """

    def __init__(self, client: httpx.AsyncClient, *, timeout: float | None = None) -> None:
        self._client = client
        self._timeout = timeout
        self.calls = 0

    async def fetch(self, endpoint: Endpoint[T], *, timeout: float | None = None) -> T:
        """GET *endpoint* and decode its body.

        Raises
        ------
        TransportFailure
            Connection/timeout/I-O error, an undecodable transfer encoding,
            or a non-2xx status.
        EmptyResponse
            A 2xx status with an empty body.
        DecodeFailure
            The body does not match the endpoint's record shape.
        """
        self.calls += 1
        effective = timeout if timeout is not None else self._timeout
        kwargs = {"timeout": effective} if effective is not None else {}

        try:
            response = await self._client.get(endpoint.path, **kwargs)
        except httpx.RequestError as exc:
            raise TransportFailure(
                f"Request to '{endpoint.path}' failed: {exc!r}", path=endpoint.path
            ) from exc

        if not response.is_success:
            raise TransportFailure(
                f"Request to '{endpoint.path}' returned HTTP {response.status_code}",
                path=endpoint.path,
                status_code=response.status_code,
            )

        body = response.content
        if not body.strip():
            raise EmptyResponse(f"Empty body from '{endpoint.path}'", path=endpoint.path)

        try:
            return endpoint.decode(body)
        except FetchError as exc:
            exc.path = endpoint.path
            logger.debug("Could not decode response from %s", endpoint.path)
            raise
