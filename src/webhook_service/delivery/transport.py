"""HTTP transports performing the single outbound POST.

Two implementations of the ``HTTPTransport`` protocol are provided: one
over httpx (the default) and one over aiohttp for applications that already
run an aiohttp session. Both translate library-specific failures into
``TransportError`` and never retry.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Self

import aiohttp
import httpx

from webhook_service.exceptions import TransportError
from webhook_service.types.models import Response
from webhook_service.utils.sanitization import sanitize_url

logger = logging.getLogger(__name__)


def _lower_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {key.lower(): value for key, value in headers.items()}


class HTTPXTransport:
    """Transport backed by ``httpx.AsyncClient``.

    When constructed without a client, each request opens and closes its own
    client. Pass a client, or use the transport as an async context manager,
    to reuse one connection pool across sends.

    Example:
        >>> async with HTTPXTransport() as transport:
        ...     dispatcher = Dispatcher(transport)
        ...     result = await dispatcher.send(message, webhook_url)
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client: httpx.AsyncClient | None = client
        self._owns_client: bool = False

    async def __aenter__(self) -> Self:
        if self._client is None:
            self._client = httpx.AsyncClient()
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def post(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes,
        timeout: float,
    ) -> Response:
        """Send one HTTP POST request.

        Raises:
            TransportError: On timeout, malformed URL, or connection failure
        """
        try:
            if self._client is not None:
                response = await self._client.post(
                    url, content=body, headers=dict(headers), timeout=timeout
                )
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.post(url, content=body, headers=dict(headers))
        except httpx.TimeoutException as exc:
            logger.warning("Request to %s timed out after %.1fs", url, timeout)
            raise TransportError(f"Request timed out after {timeout}s", original_error=exc) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TransportError(f"Malformed URL: {sanitize_url(url)}", original_error=exc) from exc
        except httpx.HTTPError as exc:
            logger.warning("HTTP error for %s: %s", url, exc)
            raise TransportError(
                f"Network connection error: {sanitize_url(str(exc))}", original_error=exc
            ) from exc

        return Response(
            status=response.status_code,
            headers=_lower_headers(response.headers),
            body=response.content,
        )


class AIOHTTPTransport:
    """Transport backed by ``aiohttp.ClientSession``.

    Must be used as an async context manager unless a session is supplied.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session: aiohttp.ClientSession | None = session
        self._owns_session: bool = False

    async def __aenter__(self) -> Self:
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._owns_session = False

    async def post(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes,
        timeout: float,
    ) -> Response:
        """Send one HTTP POST request.

        Raises:
            RuntimeError: If no session is available
            TransportError: On timeout, malformed URL, or client failure
        """
        if self._session is None:
            msg = "HTTP session not initialized. Use 'async with' context manager."
            raise RuntimeError(msg)

        try:
            async with asyncio.timeout(timeout):
                async with self._session.post(url, data=body, headers=dict(headers)) as response:
                    payload = await response.read()
                    return Response(
                        status=response.status,
                        headers=_lower_headers(response.headers),
                        body=payload,
                    )
        except TimeoutError as exc:
            logger.warning("Request to %s timed out after %.1fs", url, timeout)
            raise TransportError(f"Request timed out after {timeout}s", original_error=exc) from exc
        except aiohttp.InvalidURL as exc:
            raise TransportError(f"Malformed URL: {sanitize_url(url)}", original_error=exc) from exc
        except aiohttp.ClientError as exc:
            logger.warning("Client error for %s: %s", url, exc)
            raise TransportError(
                f"Network connection error: {sanitize_url(str(exc))}", original_error=exc
            ) from exc
